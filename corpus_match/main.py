# Path: corpus_match/main.py
"""
corpus_match - Command Line Entry Point

Filters raw SGML patent documents by wanted classifications.

Usage:
    python -m corpus_match --cpc H04N21 FILE...
    python -m corpus_match --cpc H04N21 --uspc 705 --format json FILE...
    python -m corpus_match --uspc 705 --doc-type application FILE...

Exit codes:
    0  at least one document matched
    1  no document matched
    2  a classification could not be compiled or a file could not be read
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .classification import CpcClassification, UspcClassification
from .config_loader import ConfigLoader
from .constants import (
    EXIT_ERROR,
    EXIT_MATCHED,
    EXIT_NO_MATCH,
    OUTPUT_TEXT,
    SUPPORTED_ENGINES,
    SUPPORTED_OUTPUT_FORMATS,
)
from .core.logger import get_input_logger, get_output_logger, setup_ipo_logging
from .corpus import ClassificationMatch, PatentDocType
from .loaders import DocumentReader
from .models.error import BuildError
from .output import MatchReport, get_formatter


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='corpus_match',
        description='corpus_match - match patent documents by classification',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m corpus_match --cpc H04N21 pg020101.sgm
  python -m corpus_match --cpc H04N21 --uspc 705 --format json docs/*.sgm
        """
    )

    parser.add_argument(
        'files',
        nargs='+',
        type=Path,
        help='Raw document files to match'
    )

    parser.add_argument(
        '--cpc',
        action='append',
        default=[],
        metavar='SYMBOL',
        help='Wanted CPC main group, e.g. H04N21 (repeatable)'
    )

    parser.add_argument(
        '--uspc',
        action='append',
        default=[],
        metavar='CLASS',
        help='Wanted USPC main class, e.g. 705 (repeatable)'
    )

    parser.add_argument(
        '--doc-type',
        choices=[t.value for t in PatentDocType],
        default=PatentDocType.GRANT.value,
        help='Document family of the inputs (default: grant)'
    )

    parser.add_argument(
        '--engine',
        choices=list(SUPPORTED_ENGINES),
        help='Evaluation engine (default: from configuration)'
    )

    parser.add_argument(
        '--format',
        choices=list(SUPPORTED_OUTPUT_FORMATS),
        help='Output format (default: from configuration)'
    )

    parser.add_argument(
        '--log-level',
        help='Override configured log level'
    )

    return parser


def parse_wanted(cpc: list[str], uspc: list[str]) -> list:
    """
    Turn CLI symbols into classification codes.

    Raises:
        ValueError: If a symbol is malformed
    """
    wanted = [CpcClassification.from_text(symbol) for symbol in cpc]
    wanted.extend(UspcClassification.from_text(symbol) for symbol in uspc)
    return wanted


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for corpus_match.

    Returns:
        Exit code (see module docstring)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.cpc and not args.uspc:
        parser.error('at least one --cpc or --uspc classification is required')

    try:
        config = ConfigLoader()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=args.log_level or config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True),
    )
    input_logger = get_input_logger('main')
    output_logger = get_output_logger('match_report')

    try:
        wanted = parse_wanted(args.cpc, args.uspc)
        matcher = ClassificationMatch(wanted, engine=args.engine)
        matcher.setup()
    except BuildError as e:
        print(f"Cannot compile classification: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:
        print(f"Invalid classification: {e}", file=sys.stderr)
        return EXIT_ERROR

    formatter = get_formatter(args.format or config.get('output_format', OUTPUT_TEXT))
    reader = DocumentReader(config)
    doc_type = PatentDocType(args.doc_type)

    matched = 0
    failed = 0
    for file_path in args.files:
        try:
            document = reader.read(file_path)
        except OSError as e:
            input_logger.error(f"Cannot read {file_path}: {e}")
            report = MatchReport.failed(str(file_path), doc_type.value, str(e))
            failed += 1
        else:
            matcher.bind(document.text, doc_type).match()
            report = MatchReport.from_result(
                str(file_path), doc_type.value, matcher.last_result
            )
            if report.is_match:
                matched += 1

        print(formatter.format_report(report))

    output_logger.info(
        f"{len(args.files)} document(s): {matched} matched, "
        f"{len(args.files) - matched - failed} not matched, {failed} unreadable"
    )

    if failed:
        return EXIT_ERROR
    return EXIT_MATCHED if matched else EXIT_NO_MATCH


if __name__ == '__main__':
    sys.exit(main())
