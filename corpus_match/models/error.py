# Path: corpus_match/models/error.py
"""
Error Handling

Error classes raised by corpus_match.

Taxonomy:
    BuildError: a wanted classification cannot be compiled into a query
                (an empty required field). Aborts setup.
    UsageError: the matcher lifecycle was driven out of order
                (e.g. match() before bind()). Always a programming error.

Evaluation never raises for data-shape reasons: a document that lacks a
classification section simply does not match.
"""

from typing import Any


class CorpusMatchError(Exception):
    """Base class for all corpus_match errors."""


class BuildError(CorpusMatchError, ValueError):
    """
    A classification code could not be compiled into a path query.

    Attributes:
        code: The offending classification code
        empty_fields: Names of the required fields that were empty
    """

    def __init__(self, code: Any, empty_fields: list[str]):
        self.code = code
        self.empty_fields = list(empty_fields)
        super().__init__(
            f"Cannot build query for {code!r}: "
            f"empty required field(s): {', '.join(self.empty_fields)}"
        )


class UsageError(CorpusMatchError, RuntimeError):
    """The matcher was used out of lifecycle order."""


__all__ = ['CorpusMatchError', 'BuildError', 'UsageError']
