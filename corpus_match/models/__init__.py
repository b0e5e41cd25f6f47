# Path: corpus_match/models/__init__.py
"""
Shared models for corpus_match.
"""

from .error import CorpusMatchError, BuildError, UsageError

__all__ = [
    'CorpusMatchError',
    'BuildError',
    'UsageError',
]
