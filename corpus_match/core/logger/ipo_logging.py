# Path: corpus_match/core/logger/ipo_logging.py
"""
IPO-Aware Logging for corpus_match

Input-Process-Output separated logging for classification matching.

This module sets up logging with separate files for:
- INPUT layer (document reading, CLI arguments)
- PROCESS layer (query compilation, document evaluation)
- OUTPUT layer (match reports)
- Full activity (everything combined)
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

LAYER_FILES = {
    'input': 'input_activity.log',
    'process': 'process_activity.log',
    'output': 'output_activity.log',
}


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for corpus_match.

    Creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    File logging is skipped when no log_dir is configured; the matcher
    is usually embedded in a larger pipeline that owns its own files.

    Args:
        log_dir: Directory for log files (None for console only)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console (stderr)

    Example:
        setup_ipo_logging(
            log_dir=Path('/mnt/corpus_match/logs'),
            log_level='INFO',
            console_output=True
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer, filename in LAYER_FILES.items():
            handler = logging.FileHandler(log_dir / filename)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(handler)

    # Console goes to stderr so stdout stays clean for match reports
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'document_reader')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer (compilation and matching).

    Args:
        name: Logger name (e.g., 'matcher.pattern_set')

    Returns:
        Logger configured for PROCESS layer

    Example:
        logger = get_process_logger('matcher.pattern_set')
        logger.info("Compiled 3 queries")
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Get logger for OUTPUT layer (e.g., 'match_report')."""
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
