# Path: corpus_match/classification/codes.py
"""
Classification Code Models

Immutable value types for the two supported classification schemes.

Codes arrive already validated from the classification provider; the
models only carry the fields. Emptiness of a required field is reported
by empty_fields() and rejected when a query is built, never here, so a
partially populated code still reaches the query builder and fails there
with a BuildError naming the missing parts.
"""

import re
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from ..constants import CPC_TEXT_PATTERN, USPC_TEXT_PATTERN


class ClassificationScheme(str, Enum):
    """Classification scheme identifier."""
    CPC = "cpc"
    USPC = "uspc"


class CpcClassification(BaseModel):
    """
    Cooperative Patent Classification code down to main group.

    Example:
        CpcClassification(section='H', main_class='04', sub_class='N', main_group='21')
        # prefix -> 'H04N21'
    """
    scheme: Literal[ClassificationScheme.CPC] = ClassificationScheme.CPC
    section: Optional[str] = Field(description="Section letter, e.g. 'H'")
    main_class: Optional[str] = Field(description="Two-digit class, e.g. '04'")
    sub_class: Optional[str] = Field(description="Subclass letter, e.g. 'N'")
    main_group: Optional[str] = Field(description="Main group digits, e.g. '21'")

    model_config = {
        'frozen': True,
    }

    @property
    def prefix(self) -> str:
        """Concatenated prefix literal (empty parts contribute nothing)."""
        return ''.join(
            part or '' for part in
            (self.section, self.main_class, self.sub_class, self.main_group)
        )

    def empty_fields(self) -> list[str]:
        """Names of required fields that are missing, empty or blank."""
        return [
            name for name in ('section', 'main_class', 'sub_class', 'main_group')
            if not (getattr(self, name) or '').strip()
        ]

    @classmethod
    def from_text(cls, text: str) -> 'CpcClassification':
        """
        Parse a compact CPC symbol such as 'H04N21'.

        Raises:
            ValueError: If the text is not section+class+subclass+group
        """
        found = re.match(CPC_TEXT_PATTERN, text or '')
        if not found:
            raise ValueError(f"Not a CPC main group symbol: {text!r}")
        section, main_class, sub_class, main_group = found.groups()
        return cls(
            section=section.upper(),
            main_class=main_class,
            sub_class=sub_class.upper(),
            main_group=main_group,
        )

    def __str__(self) -> str:
        return self.prefix


class UspcClassification(BaseModel):
    """United States Patent Classification main class."""
    scheme: Literal[ClassificationScheme.USPC] = ClassificationScheme.USPC
    main_class: Optional[str] = Field(description="Main class, e.g. '705'")

    model_config = {
        'frozen': True,
    }

    @property
    def prefix(self) -> str:
        return self.main_class or ''

    def empty_fields(self) -> list[str]:
        return [] if (self.main_class or '').strip() else ['main_class']

    @classmethod
    def from_text(cls, text: str) -> 'UspcClassification':
        """Parse a USPC main class such as '705' or 'D14'."""
        found = re.match(USPC_TEXT_PATTERN, text or '')
        if not found:
            raise ValueError(f"Not a USPC main class: {text!r}")
        return cls(main_class=found.group(1).upper())

    def __str__(self) -> str:
        return self.prefix


ClassificationCode = Union[CpcClassification, UspcClassification]


def filter_by_scheme(
    codes: list[ClassificationCode],
    scheme: ClassificationScheme
) -> list[ClassificationCode]:
    """
    Select the codes of one scheme, keeping input order.

    Args:
        codes: Mixed list of classification codes
        scheme: Scheme to keep

    Returns:
        Codes whose scheme equals the requested one
    """
    return [code for code in codes if code.scheme == scheme]


__all__ = [
    'ClassificationScheme',
    'CpcClassification',
    'UspcClassification',
    'ClassificationCode',
    'filter_by_scheme',
]
