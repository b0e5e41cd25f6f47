# Path: corpus_match/process/matcher/__init__.py
"""
Matching Engine - Classification Queries Against Raw Documents

Core Components:
    - PatternSet: ordered compiled queries, shareable across threads
    - PatternMatcher: per-worker evaluation with last-result memory
    - Evaluators: structural tag scan (default) and lxml XPath
    - Models: MatchResult

Example:
    from corpus_match.process.matcher import PatternSet, PatternMatcher

    matcher = PatternMatcher(PatternSet.compile(wanted))
    matcher.evaluate(sgml_text)
    matcher.last_triggering_pattern()
"""

from .evaluators import (
    BaseEvaluator,
    StructuralEvaluator,
    XPathEvaluator,
    create_evaluator,
)
from .models import MatchResult
from .pattern_set import PatternSet
from .pattern_matcher import PatternMatcher

__all__ = [
    'BaseEvaluator',
    'StructuralEvaluator',
    'XPathEvaluator',
    'create_evaluator',
    'MatchResult',
    'PatternSet',
    'PatternMatcher',
]
