# Path: tests/unit/test_pattern_set.py
"""
Tests for PatternSet compilation and evaluation, and PatternMatcher.
"""

import logging

import pytest

from corpus_match.classification import CpcClassification, UspcClassification
from corpus_match.models.error import BuildError
from corpus_match.process.matcher import (
    MatchResult,
    PatternMatcher,
    PatternSet,
    StructuralEvaluator,
    XPathEvaluator,
)
from corpus_match.process.query import build_query

from fixtures.sample_documents import build_patdoc


class TestPatternSetCompile:
    """Test compilation order and failure policy."""

    def test_cpc_before_uspc_in_input_order(self, cpc_h04n21, cpc_g06f16, uspc_705):
        patterns = PatternSet.compile([uspc_705, cpc_g06f16, cpc_h04n21])

        assert [q.code for q in patterns] == [cpc_g06f16, cpc_h04n21, uspc_705]

    def test_duplicates_kept(self, cpc_h04n21):
        patterns = PatternSet.compile([cpc_h04n21, cpc_h04n21])
        assert len(patterns) == 2

    def test_empty_list(self):
        patterns = PatternSet.compile([])
        assert len(patterns) == 0
        assert patterns.locations == frozenset()

    def test_build_error_propagates(self, cpc_h04n21):
        bad = UspcClassification(main_class='')
        with pytest.raises(BuildError):
            PatternSet.compile([cpc_h04n21, bad])

    def test_unknown_scheme_rejected(self, cpc_h04n21):
        with pytest.raises(ValueError, match='Unsupported classification scheme'):
            PatternSet.compile([cpc_h04n21, 'H04N21'])

    def test_accepts_generator(self, cpc_h04n21):
        patterns = PatternSet.compile(code for code in [cpc_h04n21])
        assert len(patterns) == 1

    def test_logs_each_query(self, cpc_h04n21, uspc_705, caplog):
        with caplog.at_level(logging.INFO, logger='process.matcher.pattern_set'):
            PatternSet.compile([cpc_h04n21, uspc_705])

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith('CPC xPath: /PATDOC/SDOBI/B500/B510/B511') for m in messages)
        assert any(m.startswith('USPC xPath: /PATDOC/SDOBI/B500/B520/B521') for m in messages)

    def test_locations(self, uspc_705):
        patterns = PatternSet.compile([uspc_705])
        assert patterns.locations == {
            ('PATDOC', 'SDOBI', 'B500', 'B520', 'B521', 'PDAT'),
            ('PATDOC', 'SDOBI', 'B500', 'B520', 'B522', 'PDAT'),
        }


class TestPatternSetMatchDocument:
    """Test pure evaluation."""

    def test_empty_set_never_matches(self):
        result = PatternSet().match_document(build_patdoc(cpc_primary='H04N2100'))

        assert result == MatchResult.no_match()
        assert result.pattern is None

    def test_first_matching_query_reported(self, cpc_h04n21, cpc_g06f16):
        patterns = PatternSet.compile([cpc_g06f16, cpc_h04n21])
        doc = build_patdoc(cpc_primary='H04N2100', cpc_secondary=['G06F1699'])

        result = patterns.match_document(doc)

        # G06F16 is first in the set; it matches at the secondary location
        assert result.matched
        assert result.pattern.code == cpc_g06f16
        assert result.alternative.field_tag == 'B516'
        assert result.matched_value == 'G06F1699'

    def test_outcome_independent_of_order(self, cpc_h04n21, cpc_g06f16, uspc_705):
        doc = build_patdoc(uspc_primary='705001')
        forward = PatternSet.compile([cpc_h04n21, cpc_g06f16, uspc_705])
        backward = PatternSet([build_query(c) for c in (uspc_705, cpc_g06f16, cpc_h04n21)])

        assert forward.match_document(doc).matched == backward.match_document(doc).matched

    def test_pattern_comes_from_set(self, cpc_h04n21, uspc_705):
        patterns = PatternSet.compile([cpc_h04n21, uspc_705])
        result = patterns.match_document(build_patdoc(uspc_secondary=['705999']))

        assert result.pattern in patterns
        assert any(result.pattern is q for q in patterns.queries)

    def test_no_match(self, cpc_h04n21):
        patterns = PatternSet.compile([cpc_h04n21])
        result = patterns.match_document(build_patdoc(cpc_primary='H05N2100'))

        assert not result.matched
        assert result.pattern is None
        assert result.explain() is None

    def test_missing_anchor_is_no_match(self, uspc_705):
        """Documents without the classification block simply do not match."""
        patterns = PatternSet.compile([uspc_705])
        assert not patterns.match_document(build_patdoc()).matched

    @pytest.mark.parametrize('evaluator', [StructuralEvaluator(), XPathEvaluator()])
    def test_engines_agree(self, evaluator, cpc_h04n21, uspc_705):
        patterns = PatternSet.compile([cpc_h04n21, uspc_705])
        doc = build_patdoc(cpc_primary='A01B0100', uspc_secondary=['705123'])

        result = patterns.match_document(doc, evaluator)

        assert result.matched
        assert result.pattern.code == uspc_705
        assert result.alternative.field_tag == 'B522'


class TestPatternMatcher:
    """Test stateful last-result tracking."""

    def test_no_call_yet(self, cpc_h04n21):
        matcher = PatternMatcher(PatternSet.compile([cpc_h04n21]))
        assert matcher.last_triggering_pattern() is None
        assert matcher.last_result is None

    def test_records_triggering_pattern(self, cpc_h04n21):
        patterns = PatternSet.compile([cpc_h04n21])
        matcher = PatternMatcher(patterns)

        assert matcher.evaluate(build_patdoc(cpc_primary='H04N2100')) is True
        assert matcher.last_triggering_pattern() is patterns.queries[0]

    def test_failed_evaluate_clears_pattern(self, cpc_h04n21):
        matcher = PatternMatcher(PatternSet.compile([cpc_h04n21]))

        matcher.evaluate(build_patdoc(cpc_primary='H04N2100'))
        assert matcher.evaluate(build_patdoc(cpc_primary='H05N2100')) is False

        assert matcher.last_triggering_pattern() is None

    def test_default_empty_set(self):
        matcher = PatternMatcher()
        assert matcher.evaluate(build_patdoc(cpc_primary='H04N2100')) is False
        assert matcher.last_triggering_pattern() is None

    def test_clear(self, cpc_h04n21):
        matcher = PatternMatcher(PatternSet.compile([cpc_h04n21]))
        matcher.evaluate(build_patdoc(cpc_primary='H04N2100'))

        matcher.clear()

        assert matcher.last_result is None

    def test_uses_given_evaluator(self, cpc_h04n21):
        matcher = PatternMatcher(PatternSet.compile([cpc_h04n21]), XPathEvaluator())
        assert 'xpath' in repr(matcher)


class TestMatchResult:
    """Test result serialization."""

    def test_to_dict_match(self, cpc_h04n21):
        patterns = PatternSet.compile([cpc_h04n21])
        data = patterns.match_document(build_patdoc(cpc_secondary=['H04N2199'])).to_dict()

        assert data['matched'] is True
        assert data['pattern']['code'] == 'H04N21'
        assert data['alternative'].startswith('/PATDOC/SDOBI/B500/B510/B516[')
        assert data['matched_value'] == 'H04N2199'

    def test_to_dict_no_match(self):
        assert MatchResult.no_match().to_dict() == {
            'matched': False,
            'pattern': None,
            'alternative': None,
            'matched_value': None,
        }

    def test_cpc_code_value_type(self):
        code = CpcClassification.from_text('H04N21')
        assert MatchResult.hit(build_query(code), build_query(code).alternatives[0], 'H04N21').matched
