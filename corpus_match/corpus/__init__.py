# Path: corpus_match/corpus/__init__.py
"""
Corpus-facing lifecycle wrappers.
"""

from .corpus_match import CorpusMatch, MatchState, PatentDocType
from .classification_match import ClassificationMatch

__all__ = [
    'CorpusMatch',
    'MatchState',
    'PatentDocType',
    'ClassificationMatch',
]
