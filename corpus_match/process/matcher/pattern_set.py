# Path: corpus_match/process/matcher/pattern_set.py
"""
Pattern Set

Ordered, immutable collection of compiled path queries.

A PatternSet is compiled once per wanted-classification list and then
evaluated against many documents. It holds no per-document state:
match_document() is a pure function of (pattern set, document,
evaluator), so one PatternSet can be shared across worker threads.
"""

from typing import Iterable, Iterator, Optional

from ...classification import (
    ClassificationCode,
    ClassificationScheme,
    filter_by_scheme,
)
from ...core.logger import get_process_logger
from ..query.builder import build_query
from ..query.path_query import PathQuery
from .evaluators import BaseEvaluator, StructuralEvaluator
from .models.match_result import MatchResult


# Compilation order: all CPC codes, then all USPC codes
SCHEME_ORDER = (ClassificationScheme.CPC, ClassificationScheme.USPC)

logger = get_process_logger('matcher.pattern_set')


class PatternSet:
    """
    Ordered sequence of PathQuery.

    Duplicates are kept: a repeated wanted classification yields a
    repeated, redundant query.

    Example:
        patterns = PatternSet.compile([
            CpcClassification(section='H', main_class='04', sub_class='N', main_group='21'),
            UspcClassification(main_class='705'),
        ])
        result = patterns.match_document(sgml_text)
        if result.matched:
            print(result.explain())
    """

    def __init__(self, queries: Iterable[PathQuery] = ()):
        self._queries = tuple(queries)
        self._locations = frozenset(
            alt.location(query.anchor)
            for query in self._queries
            for alt in query.alternatives
        )

    @classmethod
    def compile(cls, wanted: Iterable[ClassificationCode]) -> 'PatternSet':
        """
        Build one query per wanted classification.

        Codes are partitioned by scheme, CPC first, each partition in
        input order.

        Args:
            wanted: Scheme-tagged classification codes

        Returns:
            PatternSet holding one query per code

        Raises:
            BuildError: If any code has an empty required field
            ValueError: If a code carries an unknown scheme
        """
        wanted = list(wanted)
        unsupported = [
            code for code in wanted
            if getattr(code, 'scheme', None) not in SCHEME_ORDER
        ]
        if unsupported:
            raise ValueError(f"Unsupported classification scheme: {unsupported!r}")

        queries = []
        for scheme in SCHEME_ORDER:
            for code in filter_by_scheme(wanted, scheme):
                query = build_query(code)
                logger.info(f"{scheme.name} xPath: {query.to_xpath()}")
                queries.append(query)

        return cls(queries)

    @property
    def queries(self) -> tuple:
        return self._queries

    @property
    def locations(self) -> frozenset:
        """Every element path any alternative reads."""
        return self._locations

    def match_document(
        self,
        document: str,
        evaluator: Optional[BaseEvaluator] = None
    ) -> MatchResult:
        """
        Evaluate the queries in order against one document.

        Stops at the first query with a satisfied alternative. The
        boolean outcome is the OR of all queries; order only decides
        which query is reported.

        Args:
            document: Raw markup text
            evaluator: Evaluation engine (structural scan by default)

        Returns:
            MatchResult naming the triggering query, or a no-match result
        """
        if not self._queries:
            return MatchResult.no_match()

        evaluator = evaluator or StructuralEvaluator()
        loaded = evaluator.load(document, self._locations)

        for query in self._queries:
            for alternative in query.alternatives:
                value = evaluator.find_value(loaded, query, alternative)
                if value is not None:
                    logger.debug(
                        f"Matched {query.code} at {alternative.field_tag}: {value!r}"
                    )
                    return MatchResult.hit(query, alternative, value)

        return MatchResult.no_match()

    def __len__(self) -> int:
        return len(self._queries)

    def __iter__(self) -> Iterator[PathQuery]:
        return iter(self._queries)

    def __contains__(self, query: object) -> bool:
        return query in self._queries

    def __repr__(self) -> str:
        return f"PatternSet(queries={len(self._queries)})"


__all__ = ['PatternSet']
