# Path: corpus_match/process/matcher/evaluators/xpath_evaluator.py
"""
XPath Evaluator

Evaluates the rendered XPath of each query with lxml.

Uses a recovering parser so SGML that is close to XML (the usual case
for PATDOC grants) still yields a tree. Builds a full tree per document,
so it is slower than the structural evaluator; it exists to cross-check
the structural scan and for callers that already hold XML.

Security: external entities, DTD loading and network access are off.
"""

import re
from typing import Iterable, Optional

from lxml import etree

from ...query.path_query import PathQuery, PrefixTest
from .base_evaluator import BaseEvaluator


# lxml refuses str input that carries an encoding declaration
XML_DECLARATION_PATTERN = re.compile(r'^\s*<\?xml[^>]*\?>', re.IGNORECASE)


class XPathEvaluator(BaseEvaluator):
    """
    lxml-backed evaluator.

    Example:
        evaluator = XPathEvaluator()
        root = evaluator.load(xml_text, [])
        value = evaluator.find_value(root, query, query.alternatives[1])
    """

    @property
    def evaluator_type(self) -> str:
        return 'xpath'

    def _create_parser(self) -> etree.XMLParser:
        return etree.XMLParser(
            recover=True,
            resolve_entities=False,
            load_dtd=False,
            no_network=True,
            remove_comments=True,
        )

    def load(
        self,
        document: str,
        locations: Iterable[tuple] = ()
    ) -> Optional[etree._Element]:
        """
        Parse the document.

        Returns:
            Root element, or None when nothing could be recovered
        """
        text = XML_DECLARATION_PATTERN.sub('', document or '', count=1)
        if not text.strip():
            return None
        try:
            return etree.fromstring(text, parser=self._create_parser())
        except etree.XMLSyntaxError as e:
            self.logger.debug(f"Document not parseable, treated as no match: {e}")
            return None

    def find_value(
        self,
        loaded: Optional[etree._Element],
        query: PathQuery,
        alternative: PrefixTest
    ) -> Optional[str]:
        """Run the alternative's XPath and return the value that satisfied it."""
        if loaded is None:
            return None
        elements = loaded.xpath(alternative.to_xpath(query.anchor))
        if not elements:
            return None
        return elements[0].xpath(f'normalize-space({alternative.value_tag})')


__all__ = ['XPathEvaluator']
