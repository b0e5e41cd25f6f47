# Path: corpus_match/process/query/path_query.py
"""
Path Query Models

A compiled structural query: one anchor path plus an ordered list of
alternative field locations, each carrying the prefix its value must
start with. Alternatives are OR-ed; the first one satisfied is the one
reported.

Queries render to XPath for logging and for the lxml engine:

    /PATDOC/SDOBI/B500/B510/B511[starts-with(normalize-space(PDAT), 'H04N21')]
    | /PATDOC/SDOBI/B500/B510/B516[starts-with(normalize-space(PDAT), 'H04N21')]
"""

from dataclasses import dataclass
from typing import Optional

from ...classification import ClassificationCode, ClassificationScheme
from ...constants import VALUE_TAG


def xpath_literal(text: str) -> str:
    """Quote text as an XPath 1.0 string literal."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


@dataclass(frozen=True)
class PrefixTest:
    """
    One alternative location for a classification field.

    Attributes:
        field_tag: Element under the anchor holding the field (e.g. 'B511')
        prefix: Literal the field value must start with
        value_tag: Child element carrying the text (e.g. 'PDAT')
    """
    field_tag: str
    prefix: str
    value_tag: str = VALUE_TAG

    def __post_init__(self):
        # An empty prefix would accept every document.
        if not self.prefix:
            raise ValueError(f"Empty prefix for field {self.field_tag}")

    def matches(self, value: Optional[str]) -> bool:
        """Check a field value against the prefix."""
        return value is not None and value.startswith(self.prefix)

    def location(self, anchor: tuple) -> tuple:
        """Full element path of the value this test reads."""
        return tuple(anchor) + (self.field_tag, self.value_tag)

    def to_xpath(self, anchor: tuple) -> str:
        """Render this alternative as a fully anchored XPath."""
        path = '/' + '/'.join(tuple(anchor) + (self.field_tag,))
        return (
            f"{path}[starts-with(normalize-space({self.value_tag}), "
            f"{xpath_literal(self.prefix)})]"
        )


@dataclass(frozen=True)
class PathQuery:
    """
    Structural query compiled from one classification code.

    Attributes:
        scheme: Scheme the code belongs to
        code: The classification the query was built from
        anchor: Element path where the classification block lives
        alternatives: Ordered field locations, OR-ed together
    """
    scheme: ClassificationScheme
    code: ClassificationCode
    anchor: tuple
    alternatives: tuple

    @property
    def prefix(self) -> str:
        return self.alternatives[0].prefix if self.alternatives else ''

    def to_xpath(self) -> str:
        """Render the whole alternation as one XPath union expression."""
        return ' | '.join(alt.to_xpath(self.anchor) for alt in self.alternatives)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'scheme': self.scheme.value,
            'code': str(self.code),
            'anchor': '/' + '/'.join(self.anchor),
            'alternatives': [
                {
                    'field': alt.field_tag,
                    'value_tag': alt.value_tag,
                    'prefix': alt.prefix,
                }
                for alt in self.alternatives
            ],
            'xpath': self.to_xpath(),
        }

    def __str__(self) -> str:
        return self.to_xpath()


__all__ = ['PrefixTest', 'PathQuery', 'xpath_literal']
