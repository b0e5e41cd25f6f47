# Path: corpus_match/corpus/classification_match.py
"""
Classification Match

Matches patent documents by looking only at the classifications stored
in their SGML markup, without building a patent object model.

Matches on the document's own classification as well as the secondary
classification fields (which grants also fill for cited patents).
"""

from typing import Iterable, Optional

from ..classification import ClassificationCode
from ..config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..models.error import UsageError
from ..process.matcher import (
    MatchResult,
    PatternMatcher,
    PatternSet,
    create_evaluator,
)
from ..process.query import PathQuery
from .corpus_match import CorpusMatch, MatchState, PatentDocType


class ClassificationMatch(CorpusMatch):
    """
    CorpusMatch over wanted CPC/USPC classifications.

    One instance holds one bound document and its last result, so each
    worker thread needs its own instance. Instances may share a compiled
    PatternSet through from_pattern_set().

    Example:
        matcher = ClassificationMatch([
            CpcClassification(section='H', main_class='04', sub_class='N', main_group='21'),
        ])
        matcher.setup()
        if matcher.bind(sgml_text, PatentDocType.GRANT).match():
            logger.info(matcher.explain())
    """

    def __init__(
        self,
        wanted_classes: Iterable[ClassificationCode],
        engine: Optional[str] = None
    ):
        """
        Initialize the matcher.

        Args:
            wanted_classes: Classifications a document must carry (any of)
            engine: 'structural' or 'xpath'; defaults to configuration
        """
        self.logger = get_process_logger('corpus.classification_match')
        self.wanted_classes = list(wanted_classes)
        self.engine = engine or ConfigLoader().get('evaluation_engine')
        self._evaluator = create_evaluator(self.engine)
        self._matcher: Optional[PatternMatcher] = None
        self._document: Optional[str] = None
        self._doc_type: Optional[PatentDocType] = None
        self._state = MatchState.UNINITIALIZED

    @classmethod
    def from_pattern_set(
        cls,
        pattern_set: PatternSet,
        engine: Optional[str] = None
    ) -> 'ClassificationMatch':
        """
        Create a ready matcher around an already compiled PatternSet.

        Lets worker threads share one compilation while keeping their
        bound documents apart.
        """
        instance = cls([query.code for query in pattern_set], engine=engine)
        instance._matcher = PatternMatcher(pattern_set, instance._evaluator)
        instance._state = MatchState.READY
        return instance

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def pattern_set(self) -> Optional[PatternSet]:
        return self._matcher.pattern_set if self._matcher else None

    @property
    def doc_type(self) -> Optional[PatentDocType]:
        return self._doc_type

    def setup(self) -> None:
        """
        Compile the wanted classifications.

        Calling it again recompiles from the same list and drops any
        bound document.

        Raises:
            BuildError: If a wanted classification has an empty field
        """
        pattern_set = PatternSet.compile(self.wanted_classes)
        self._matcher = PatternMatcher(pattern_set, self._evaluator)
        self._document = None
        self._doc_type = None
        self._state = MatchState.READY
        self.logger.info(
            f"Compiled {len(pattern_set)} queries "
            f"({self._evaluator.evaluator_type} engine)"
        )

    def bind(
        self,
        document: str,
        doc_type: PatentDocType = PatentDocType.GRANT
    ) -> 'ClassificationMatch':
        """
        Attach a document and clear the previous result.

        Args:
            document: Raw markup, scanned as-is (no entity decoding)
            doc_type: Document family (informational)

        Returns:
            self, so calls chain: matcher.bind(doc, kind).match()

        Raises:
            UsageError: If setup() has not been called
        """
        if self._matcher is None:
            raise UsageError("bind() called before setup()")

        self._matcher.clear()
        self._document = document
        self._doc_type = doc_type
        self._state = MatchState.BOUND
        return self

    def match(self) -> bool:
        """
        Evaluate the bound document.

        Returns:
            True if any wanted classification matched

        Raises:
            UsageError: If no document is bound
        """
        if self._state != MatchState.BOUND:
            raise UsageError(f"match() called in state {self._state.value}; bind() a document first")

        matched = self._matcher.evaluate(self._document)
        self.logger.debug(
            f"{self._doc_type.value} document: "
            f"{'matched' if matched else 'no match'}"
        )
        return matched

    @property
    def last_result(self) -> Optional[MatchResult]:
        """Structured result of the last match() on the bound document."""
        return self._matcher.last_result if self._matcher else None

    def last_triggering_pattern(self) -> Optional[PathQuery]:
        return self._matcher.last_triggering_pattern() if self._matcher else None

    def explain(self) -> Optional[str]:
        """
        XPath text of the query that made the last match() succeed.

        Returns:
            The query's structural expression, or None when the last
            match() failed or none has run on the bound document
        """
        pattern = self.last_triggering_pattern()
        return pattern.to_xpath() if pattern is not None else None

    def __repr__(self) -> str:
        return (
            f"ClassificationMatch(wanted={len(self.wanted_classes)}, "
            f"state={self._state.value}, matcher={self._matcher!r})"
        )


__all__ = ['ClassificationMatch']
