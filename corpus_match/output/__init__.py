# Path: corpus_match/output/__init__.py
"""
OUTPUT layer: match reports and their formatters.
"""

from .match_report import MatchReport
from .formatters import BaseFormatter, TextFormatter, JsonFormatter, get_formatter

__all__ = [
    'MatchReport',
    'BaseFormatter',
    'TextFormatter',
    'JsonFormatter',
    'get_formatter',
]
