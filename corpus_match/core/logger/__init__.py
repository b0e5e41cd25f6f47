# Path: corpus_match/core/logger/__init__.py
"""
corpus_match Logger Package

IPO-aware logging for classification matching.

Provides separate log streams for:
- INPUT layer (document reading)
- PROCESS layer (query compilation, evaluation)
- OUTPUT layer (match reports)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
