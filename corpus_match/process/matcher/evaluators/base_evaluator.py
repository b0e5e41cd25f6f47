# Path: corpus_match/process/matcher/evaluators/base_evaluator.py
"""
Base Evaluator

Abstract base class for document evaluators.

An evaluator turns a raw document into whatever per-document state it
needs (load), then answers, for one alternative of one query, which
field value satisfied the prefix (find_value). Evaluators hold no
per-document state themselves, so one instance can serve many threads.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from ....core.logger import get_process_logger
from ...query.path_query import PathQuery, PrefixTest


class BaseEvaluator(ABC):
    """
    Abstract base class for evaluators.

    Subclasses must implement load() and find_value().

    Example:
        evaluator = StructuralEvaluator()
        loaded = evaluator.load(document, locations)
        value = evaluator.find_value(loaded, query, query.alternatives[0])
    """

    def __init__(self):
        """Initialize evaluator."""
        self.logger = get_process_logger(f'matcher.evaluators.{self.evaluator_type}')

    @property
    @abstractmethod
    def evaluator_type(self) -> str:
        """Return the type name of this evaluator."""
        pass

    @abstractmethod
    def load(self, document: str, locations: Iterable[tuple]) -> Any:
        """
        Prepare a document for evaluation.

        Args:
            document: Raw markup text
            locations: Element paths the queries will read

        Returns:
            Evaluator-specific state (None when nothing is readable)
        """
        pass

    @abstractmethod
    def find_value(
        self,
        loaded: Any,
        query: PathQuery,
        alternative: PrefixTest
    ) -> Optional[str]:
        """
        Find the first field value satisfying one alternative.

        Args:
            loaded: State returned by load()
            query: Query the alternative belongs to
            alternative: Location and prefix to test

        Returns:
            The satisfying field value, or None
        """
        pass


__all__ = ['BaseEvaluator']
