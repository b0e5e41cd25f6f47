# Path: corpus_match/corpus/corpus_match.py
"""
Corpus Match Interface

Lifecycle contract used by a corpus pipeline to filter documents:

    matcher.setup()                             # compile once
    for doc in corpus:
        if matcher.bind(doc, doc_type).match():
            keep(doc, reason=matcher.explain())
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class PatentDocType(str, Enum):
    """
    Document family of a bound document.

    Informational only: query anchors are the same for every family.
    Published applications carry no citation data; grants do.
    """
    GRANT = "grant"
    APPLICATION = "application"


class MatchState(str, Enum):
    """Lifecycle state of a CorpusMatch."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    BOUND = "bound"


class CorpusMatch(ABC):
    """Abstract base for document matchers driven by a corpus pipeline."""

    @abstractmethod
    def setup(self) -> None:
        """Compile whatever the matcher needs before seeing documents."""
        pass

    @abstractmethod
    def bind(self, document: str, doc_type: PatentDocType) -> 'CorpusMatch':
        """Attach the next document, dropping any previous result."""
        pass

    @abstractmethod
    def match(self) -> bool:
        """Evaluate the bound document."""
        pass

    @abstractmethod
    def explain(self) -> Optional[str]:
        """Describe what made the last match() succeed, or None."""
        pass


__all__ = ['PatentDocType', 'MatchState', 'CorpusMatch']
