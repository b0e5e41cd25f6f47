# Path: corpus_match/constants.py
"""
Constants for corpus_match

Scheme identifiers and the fixed document locations where the legacy
SGML patent markup (PATDOC) records classifications.

Layout of the bibliographic block this package inspects:

    <PATDOC>
      <SDOBI>
        <B500>
          <B510>                  CPC / international classification
            <B511><PDAT>...       primary (main) classification
            <B516><PDAT>...       secondary classification
          </B510>
          <B520>                  US classification
            <B521><PDAT>...       primary (main) class
            <B522><PDAT>...       further / cited class
          </B520>
        </B500>
      </SDOBI>
    </PATDOC>
"""

from typing import Final


# ==============================================================================
# DOCUMENT STRUCTURE
# ==============================================================================
DOCUMENT_ROOT: Final[tuple] = ('PATDOC', 'SDOBI', 'B500')
"""Path shared by both classification anchors."""

VALUE_TAG: Final[str] = 'PDAT'
"""Element holding the character data of a field."""

CPC_GROUP_TAG: Final[str] = 'B510'
CPC_PRIMARY_TAG: Final[str] = 'B511'
CPC_SECONDARY_TAG: Final[str] = 'B516'

USPC_GROUP_TAG: Final[str] = 'B520'
USPC_PRIMARY_TAG: Final[str] = 'B521'
USPC_SECONDARY_TAG: Final[str] = 'B522'

CPC_ANCHOR: Final[tuple] = DOCUMENT_ROOT + (CPC_GROUP_TAG,)
USPC_ANCHOR: Final[tuple] = DOCUMENT_ROOT + (USPC_GROUP_TAG,)

CPC_FIELD_TAGS: Final[tuple] = (CPC_PRIMARY_TAG, CPC_SECONDARY_TAG)
"""Field locations for CPC, in evaluation order."""

USPC_FIELD_TAGS: Final[tuple] = (USPC_PRIMARY_TAG, USPC_SECONDARY_TAG)
"""Field locations for USPC, in evaluation order."""


# ==============================================================================
# CLASSIFICATION CODE SHAPES (CLI parsing only)
# ==============================================================================
CPC_TEXT_PATTERN: Final[str] = r'^\s*([A-Za-z])\s*(\d{2})\s*([A-Za-z])\s*(\d+)\s*$'
"""Section, two-digit class, subclass letter, main group digits: 'H04N21'."""

USPC_TEXT_PATTERN: Final[str] = r'^\s*([A-Za-z0-9]+)\s*$'
"""USPC main class: '705', 'D14', 'PLT'."""


# ==============================================================================
# EVALUATION ENGINES
# ==============================================================================
ENGINE_STRUCTURAL: Final[str] = 'structural'
ENGINE_XPATH: Final[str] = 'xpath'
SUPPORTED_ENGINES: Final[tuple] = (ENGINE_STRUCTURAL, ENGINE_XPATH)


# ==============================================================================
# CLI OUTPUT
# ==============================================================================
OUTPUT_TEXT: Final[str] = 'text'
OUTPUT_JSON: Final[str] = 'json'
SUPPORTED_OUTPUT_FORMATS: Final[tuple] = (OUTPUT_TEXT, OUTPUT_JSON)

STATUS_MATCH: Final[str] = 'MATCH'
STATUS_NO_MATCH: Final[str] = 'NO MATCH'
STATUS_ERROR: Final[str] = 'ERROR'

EXIT_MATCHED: Final[int] = 0
EXIT_NO_MATCH: Final[int] = 1
EXIT_ERROR: Final[int] = 2


__all__ = [
    'DOCUMENT_ROOT',
    'VALUE_TAG',
    'CPC_GROUP_TAG',
    'CPC_PRIMARY_TAG',
    'CPC_SECONDARY_TAG',
    'USPC_GROUP_TAG',
    'USPC_PRIMARY_TAG',
    'USPC_SECONDARY_TAG',
    'CPC_ANCHOR',
    'USPC_ANCHOR',
    'CPC_FIELD_TAGS',
    'USPC_FIELD_TAGS',
    'CPC_TEXT_PATTERN',
    'USPC_TEXT_PATTERN',
    'ENGINE_STRUCTURAL',
    'ENGINE_XPATH',
    'SUPPORTED_ENGINES',
    'OUTPUT_TEXT',
    'OUTPUT_JSON',
    'SUPPORTED_OUTPUT_FORMATS',
    'STATUS_MATCH',
    'STATUS_NO_MATCH',
    'STATUS_ERROR',
    'EXIT_MATCHED',
    'EXIT_NO_MATCH',
    'EXIT_ERROR',
]
