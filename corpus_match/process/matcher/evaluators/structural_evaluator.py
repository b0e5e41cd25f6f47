# Path: corpus_match/process/matcher/evaluators/structural_evaluator.py
"""
Structural Evaluator

Scans raw SGML/XML markup as a stream of tags, tracking the path of
open elements, and collects the text of the elements the queries read.
No tree is built; cost is one pass over the document per evaluation.

Field value semantics follow XPath starts-with(normalize-space(PDAT), ...):
the value of a field element is the whitespace-normalized text of its
first value-tag child, including text of nested elements.

SGML leniency:
- tag names compare case-insensitively
- a closing tag pops back to its matching open element, closing any
  unclosed elements in between
- a closing tag without a matching open element is ignored
"""

import re
from typing import Iterable, Optional

from ...query.path_query import PathQuery, PrefixTest
from .base_evaluator import BaseEvaluator


TOKEN_PATTERN = re.compile(
    r'<!--.*?-->'
    r'|<!\[CDATA\[(?P<cdata>.*?)\]\]>'
    r'|<[!?][^>]*>'
    r'|<(?P<close>/?)(?P<name>[A-Za-z_][\w.:-]*)'
    r'(?:"[^">]*"|\'[^\'>]*\'|[^\'">])*?(?P<empty>/?)>',
    re.DOTALL,
)


def normalize_space(text: str) -> str:
    """Collapse whitespace runs and trim, like XPath normalize-space()."""
    return ' '.join(text.split())


def scan_field_values(document: str, locations: Iterable[tuple]) -> dict:
    """
    Collect the text of wanted value elements in one pass.

    Args:
        document: Raw markup text
        locations: Element paths of value elements, e.g.
                   ('PATDOC', 'SDOBI', 'B500', 'B510', 'B511', 'PDAT')

    Returns:
        Dict of upper-cased location -> list of values in document order
        (one per field element that has a value child)
    """
    wanted = {tuple(tag.upper() for tag in loc) for loc in locations}
    values: dict[tuple, list[str]] = {loc: [] for loc in wanted}
    if not wanted:
        return values

    # Each entry: [tag name, first-value-taken flag]
    stack: list[list] = []
    capture_path: Optional[tuple] = None
    capture_depth = 0
    buffer: list[str] = []
    position = 0

    for token in TOKEN_PATTERN.finditer(document):
        if capture_path is not None:
            buffer.append(document[position:token.start()])
            if token.group('cdata') is not None:
                buffer.append(token.group('cdata'))
        position = token.end()

        name = token.group('name')
        if name is None:
            continue
        name = name.upper()

        if token.group('close'):
            index = _last_index(stack, name)
            if index is None:
                continue
            del stack[index:]
            if capture_path is not None and len(stack) < capture_depth:
                values[capture_path].append(normalize_space(''.join(buffer)))
                capture_path = None
                buffer = []
            continue

        path = tuple(entry[0] for entry in stack) + (name,)
        start_capture = (
            capture_path is None
            and path in wanted
            and stack
            and not stack[-1][1]
        )
        if start_capture:
            stack[-1][1] = True

        if token.group('empty'):
            # An empty value element still is the field's first value child
            if start_capture:
                values[path].append('')
            continue

        stack.append([name, False])
        if start_capture:
            capture_path = path
            capture_depth = len(stack)
            buffer = []

    # Unterminated value element at end of input
    if capture_path is not None:
        buffer.append(document[position:])
        values[capture_path].append(normalize_space(''.join(buffer)))

    return values


def _last_index(stack: list[list], name: str) -> Optional[int]:
    for index in range(len(stack) - 1, -1, -1):
        if stack[index][0] == name:
            return index
    return None


class StructuralEvaluator(BaseEvaluator):
    """
    Text-based evaluator over raw markup.

    Example:
        evaluator = StructuralEvaluator()
        loaded = evaluator.load(sgml_text, pattern_set.locations)
    """

    @property
    def evaluator_type(self) -> str:
        return 'structural'

    def load(self, document: str, locations: Iterable[tuple]) -> dict:
        """Scan the document once for every location the queries read."""
        return scan_field_values(document or '', locations)

    def find_value(
        self,
        loaded: dict,
        query: PathQuery,
        alternative: PrefixTest
    ) -> Optional[str]:
        """Return the first collected value starting with the prefix."""
        location = tuple(tag.upper() for tag in alternative.location(query.anchor))
        for value in loaded.get(location, ()):
            if alternative.matches(value):
                return value
        return None


__all__ = ['StructuralEvaluator', 'scan_field_values', 'normalize_space']
