# Path: corpus_match/__init__.py
"""
corpus_match - Classification Matching for Legacy Patent Markup

Decides whether a raw SGML patent document carries any of a list of
wanted CPC or USPC classifications, without building a document model,
and reports which compiled query made the match.

Data Flow:
    wanted classifications -> PathQuery (one per code)
    -> PatternSet (compiled once)
    -> per document: evaluate in order, stop at first hit
    -> MatchResult (matched, triggering query, field, value)

Example:
    from corpus_match import ClassificationMatch, CpcClassification, PatentDocType

    matcher = ClassificationMatch([CpcClassification.from_text('H04N21')])
    matcher.setup()
    if matcher.bind(sgml_text, PatentDocType.GRANT).match():
        print(matcher.explain())
"""

from .classification import (
    ClassificationScheme,
    CpcClassification,
    UspcClassification,
    filter_by_scheme,
)
from .corpus import ClassificationMatch, CorpusMatch, MatchState, PatentDocType
from .models.error import BuildError, CorpusMatchError, UsageError
from .process.matcher import MatchResult, PatternMatcher, PatternSet
from .process.query import (
    PathQuery,
    PrefixTest,
    build_cpc_query,
    build_query,
    build_uspc_query,
)

__version__ = '0.1.0'

__all__ = [
    'ClassificationScheme',
    'CpcClassification',
    'UspcClassification',
    'filter_by_scheme',
    'ClassificationMatch',
    'CorpusMatch',
    'MatchState',
    'PatentDocType',
    'BuildError',
    'CorpusMatchError',
    'UsageError',
    'MatchResult',
    'PatternMatcher',
    'PatternSet',
    'PathQuery',
    'PrefixTest',
    'build_cpc_query',
    'build_query',
    'build_uspc_query',
]
