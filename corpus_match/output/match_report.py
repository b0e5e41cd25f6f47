# Path: corpus_match/output/match_report.py
"""
Match Report Model

One line of CLI output: the outcome of matching one document.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import STATUS_ERROR, STATUS_MATCH, STATUS_NO_MATCH
from ..process.matcher.models.match_result import MatchResult


@dataclass
class MatchReport:
    """
    Outcome for one document.

    Attributes:
        source: File the document came from
        doc_type: Document family the document was bound as
        status: MATCH, NO MATCH or ERROR
        classification: Wanted code that fired
        field: Field element that fired (e.g. 'B516')
        matched_value: Field text that satisfied the prefix
        explanation: XPath text of the triggering query
        error: Reason the document could not be matched
    """
    source: str
    doc_type: str
    status: str
    classification: Optional[str] = None
    field: Optional[str] = None
    matched_value: Optional[str] = None
    explanation: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        source: str,
        doc_type: str,
        result: MatchResult
    ) -> 'MatchReport':
        """Build a report from a MatchResult."""
        if not result.matched:
            return cls(source=source, doc_type=doc_type, status=STATUS_NO_MATCH)
        return cls(
            source=source,
            doc_type=doc_type,
            status=STATUS_MATCH,
            classification=str(result.pattern.code),
            field=result.alternative.field_tag,
            matched_value=result.matched_value,
            explanation=result.explain(),
        )

    @classmethod
    def failed(cls, source: str, doc_type: str, error: str) -> 'MatchReport':
        """Build a report for a document that could not be read."""
        return cls(source=source, doc_type=doc_type, status=STATUS_ERROR, error=error)

    @property
    def is_match(self) -> bool:
        return self.status == STATUS_MATCH

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'source': self.source,
            'doc_type': self.doc_type,
            'status': self.status,
            'classification': self.classification,
            'field': self.field,
            'matched_value': self.matched_value,
            'explanation': self.explanation,
            'error': self.error,
        }


__all__ = ['MatchReport']
