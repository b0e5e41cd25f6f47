# Path: corpus_match/output/formatters.py
"""
Report Formatters

Render MatchReport lines for the command line. Formatters know nothing
about matching; they only lay out report fields.
"""

import json
from abc import ABC, abstractmethod

from ..constants import OUTPUT_JSON, OUTPUT_TEXT
from .match_report import MatchReport


class BaseFormatter(ABC):
    """Abstract base for report formatters."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @abstractmethod
    def format_report(self, report: MatchReport) -> str:
        """Render one report as a single line."""


class TextFormatter(BaseFormatter):
    """Tab-separated human-readable lines."""

    @property
    def format_name(self) -> str:
        return OUTPUT_TEXT

    def format_report(self, report: MatchReport) -> str:
        parts = [report.status, report.source]
        if report.is_match:
            parts.append(f"{report.classification} at {report.field} = {report.matched_value}")
            parts.append(report.explanation)
        elif report.error:
            parts.append(report.error)
        return '\t'.join(parts)


class JsonFormatter(BaseFormatter):
    """One JSON object per line."""

    @property
    def format_name(self) -> str:
        return OUTPUT_JSON

    def format_report(self, report: MatchReport) -> str:
        return json.dumps(report.to_dict(), default=str)


FORMATTERS = {
    OUTPUT_TEXT: TextFormatter,
    OUTPUT_JSON: JsonFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """
    Look up a formatter by name.

    Raises:
        ValueError: If the format is unknown
    """
    try:
        return FORMATTERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown output format: {name!r}") from None


__all__ = [
    'BaseFormatter',
    'TextFormatter',
    'JsonFormatter',
    'get_formatter',
]
