# Path: corpus_match/process/query/builder.py
"""
Path Query Builder

Renders classification codes into structural path queries.

Both schemes emit two alternatives, because the legacy markup records the
same classification at a primary location and at a secondary location
(further classification, which grants also repeat for cited patents).
Matching is by prefix so a wanted code also selects every more specific
code under it: 'H04N21' matches 'H04N2100' and 'H04N21/4363'.
"""

from ...classification import (
    ClassificationCode,
    ClassificationScheme,
    CpcClassification,
    UspcClassification,
)
from ...constants import (
    CPC_ANCHOR,
    CPC_FIELD_TAGS,
    USPC_ANCHOR,
    USPC_FIELD_TAGS,
    VALUE_TAG,
)
from ...models.error import BuildError
from .path_query import PathQuery, PrefixTest


def _build(
    code: ClassificationCode,
    anchor: tuple,
    field_tags: tuple
) -> PathQuery:
    empty = code.empty_fields()
    if empty:
        raise BuildError(code, empty)

    prefix = code.prefix
    alternatives = tuple(
        PrefixTest(field_tag=tag, prefix=prefix, value_tag=VALUE_TAG)
        for tag in field_tags
    )
    return PathQuery(
        scheme=code.scheme,
        code=code,
        anchor=anchor,
        alternatives=alternatives,
    )


def build_cpc_query(code: CpcClassification) -> PathQuery:
    """
    Build the query for a CPC code.

    The prefix is section + class + subclass + main group, tested at the
    primary (B511) and secondary (B516) fields of the B510 block.

    Args:
        code: CPC code with all four fields populated

    Returns:
        PathQuery with two alternatives

    Raises:
        BuildError: If any of the four fields is empty
    """
    return _build(code, CPC_ANCHOR, CPC_FIELD_TAGS)


def build_uspc_query(code: UspcClassification) -> PathQuery:
    """
    Build the query for a USPC main class.

    Tested at the primary (B521) and further (B522) fields of the B520
    block.

    Raises:
        BuildError: If the main class is empty
    """
    return _build(code, USPC_ANCHOR, USPC_FIELD_TAGS)


def build_query(code: ClassificationCode) -> PathQuery:
    """Dispatch to the builder for the code's scheme."""
    if code.scheme == ClassificationScheme.CPC:
        return build_cpc_query(code)
    return build_uspc_query(code)


__all__ = ['build_cpc_query', 'build_uspc_query', 'build_query']
