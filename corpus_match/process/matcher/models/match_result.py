# Path: corpus_match/process/matcher/models/match_result.py
"""
Match Result Model

Outcome of evaluating a PatternSet against one document.
"""

from dataclasses import dataclass
from typing import Optional

from ...query.path_query import PathQuery, PrefixTest


@dataclass(frozen=True)
class MatchResult:
    """
    Result of matching one document.

    Attributes:
        matched: Whether any query fired
        pattern: The query that fired first (None when not matched)
        alternative: The location within that query that fired
        matched_value: Field text that satisfied the prefix
    """
    matched: bool
    pattern: Optional[PathQuery] = None
    alternative: Optional[PrefixTest] = None
    matched_value: Optional[str] = None

    @classmethod
    def no_match(cls) -> 'MatchResult':
        """Create a result for a document no query matched."""
        return cls(matched=False)

    @classmethod
    def hit(
        cls,
        pattern: PathQuery,
        alternative: PrefixTest,
        matched_value: str
    ) -> 'MatchResult':
        """Create a result for a document matched by pattern."""
        return cls(
            matched=True,
            pattern=pattern,
            alternative=alternative,
            matched_value=matched_value,
        )

    def explain(self) -> Optional[str]:
        """XPath text of the triggering query, or None."""
        return self.pattern.to_xpath() if self.pattern is not None else None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'matched': self.matched,
            'pattern': self.pattern.to_dict() if self.pattern else None,
            'alternative': (
                self.alternative.to_xpath(self.pattern.anchor)
                if self.alternative and self.pattern else None
            ),
            'matched_value': self.matched_value,
        }


__all__ = ['MatchResult']
