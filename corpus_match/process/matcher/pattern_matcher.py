# Path: corpus_match/process/matcher/pattern_matcher.py
"""
Pattern Matcher

Evaluates a PatternSet against documents one at a time and remembers
which query fired on the most recent document.

The remembered result is instance state: use one PatternMatcher per
worker. The PatternSet underneath may be shared.
"""

from typing import Optional

from ...core.logger import get_process_logger
from ..query.path_query import PathQuery
from .evaluators import BaseEvaluator, StructuralEvaluator
from .models.match_result import MatchResult
from .pattern_set import PatternSet


class PatternMatcher:
    """
    Stateful wrapper over PatternSet.match_document().

    Example:
        matcher = PatternMatcher(PatternSet.compile(wanted))
        if matcher.evaluate(sgml_text):
            print(matcher.last_triggering_pattern())
    """

    def __init__(
        self,
        pattern_set: Optional[PatternSet] = None,
        evaluator: Optional[BaseEvaluator] = None
    ):
        self.logger = get_process_logger('matcher.pattern_matcher')
        self.pattern_set = pattern_set if pattern_set is not None else PatternSet()
        self.evaluator = evaluator or StructuralEvaluator()
        self._last_result: Optional[MatchResult] = None

    def evaluate(self, document: str) -> bool:
        """
        Match one document, replacing any previous result.

        Args:
            document: Raw markup text

        Returns:
            True if any query matched
        """
        self._last_result = None
        result = self.pattern_set.match_document(document, self.evaluator)
        self._last_result = result
        return result.matched

    def last_triggering_pattern(self) -> Optional[PathQuery]:
        """Query that fired on the last evaluate(), or None."""
        if self._last_result is None:
            return None
        return self._last_result.pattern

    @property
    def last_result(self) -> Optional[MatchResult]:
        return self._last_result

    def clear(self) -> None:
        """Forget the last result."""
        self._last_result = None

    def __repr__(self) -> str:
        return (
            f"PatternMatcher(pattern_set={self.pattern_set!r}, "
            f"evaluator={self.evaluator.evaluator_type})"
        )


__all__ = ['PatternMatcher']
