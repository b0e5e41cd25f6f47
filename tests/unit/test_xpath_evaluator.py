# Path: tests/unit/test_xpath_evaluator.py
"""
Tests for the lxml XPath evaluator.
"""

from corpus_match.process.matcher.evaluators import XPathEvaluator
from corpus_match.process.query import build_cpc_query, build_uspc_query

from fixtures.sample_documents import DECOY_DOCUMENT, build_patdoc


class TestXPathEvaluatorLoad:
    """Test document loading."""

    def test_type(self):
        assert XPathEvaluator().evaluator_type == 'xpath'

    def test_loads_with_xml_declaration(self):
        """Encoding declaration is stripped before parsing str input."""
        root = XPathEvaluator().load(build_patdoc(cpc_primary='H04N2100'))
        assert root is not None
        assert root.tag == 'PATDOC'

    def test_blank_document(self):
        assert XPathEvaluator().load('') is None
        assert XPathEvaluator().load(None) is None

    def test_garbage_document_is_not_an_error(self, cpc_h04n21):
        evaluator = XPathEvaluator()
        query = build_cpc_query(cpc_h04n21)

        loaded = evaluator.load('this is not markup at all')

        assert evaluator.find_value(loaded, query, query.alternatives[0]) is None


class TestXPathEvaluatorFindValue:
    """Test XPath evaluation of alternatives."""

    def test_primary(self, cpc_h04n21):
        evaluator = XPathEvaluator()
        query = build_cpc_query(cpc_h04n21)
        loaded = evaluator.load(build_patdoc(cpc_primary='H04N2100'))

        assert evaluator.find_value(loaded, query, query.alternatives[0]) == 'H04N2100'
        assert evaluator.find_value(loaded, query, query.alternatives[1]) is None

    def test_secondary_among_several(self, cpc_h04n21):
        evaluator = XPathEvaluator()
        query = build_cpc_query(cpc_h04n21)
        loaded = evaluator.load(build_patdoc(cpc_secondary=['G06F1600', 'H04N2199']))

        assert evaluator.find_value(loaded, query, query.alternatives[1]) == 'H04N2199'

    def test_uspc_prefix(self, uspc_705):
        evaluator = XPathEvaluator()
        query = build_uspc_query(uspc_705)

        hit = evaluator.load(build_patdoc(uspc_primary='705123'))
        miss = evaluator.load(build_patdoc(uspc_primary='706000'))

        assert evaluator.find_value(hit, query, query.alternatives[0]) == '705123'
        assert evaluator.find_value(miss, query, query.alternatives[0]) is None

    def test_decoy_locations(self, cpc_h04n21):
        evaluator = XPathEvaluator()
        query = build_cpc_query(cpc_h04n21)
        loaded = evaluator.load(DECOY_DOCUMENT)

        assert all(
            evaluator.find_value(loaded, query, alt) is None
            for alt in query.alternatives
        )
