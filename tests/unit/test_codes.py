# Path: tests/unit/test_codes.py
"""
Tests for classification code models.
"""

import pytest
from pydantic import ValidationError

from corpus_match.classification import (
    ClassificationScheme,
    CpcClassification,
    UspcClassification,
    filter_by_scheme,
)


class TestCpcClassification:
    """Test CPC value type."""

    def test_prefix_concatenates_fields(self, cpc_h04n21):
        """Prefix is section + class + subclass + group."""
        assert cpc_h04n21.prefix == 'H04N21'

    def test_scheme_tag(self, cpc_h04n21):
        assert cpc_h04n21.scheme == ClassificationScheme.CPC

    def test_is_immutable(self, cpc_h04n21):
        """Frozen model rejects assignment."""
        with pytest.raises(ValidationError):
            cpc_h04n21.section = 'G'

    def test_fields_are_required(self):
        """Absent fields are not filled in."""
        with pytest.raises(ValidationError):
            CpcClassification(section='H', main_class='04', sub_class='N')

    def test_empty_fields_reported(self):
        code = CpcClassification(section='H', main_class='', sub_class='N', main_group=None)
        assert code.empty_fields() == ['main_class', 'main_group']

    def test_whitespace_only_field_is_empty(self):
        """A blank group must not shorten the prefix to the subclass."""
        code = CpcClassification(section='H', main_class='04', sub_class='N', main_group=' ')
        assert code.empty_fields() == ['main_group']

    def test_no_empty_fields(self, cpc_h04n21):
        assert cpc_h04n21.empty_fields() == []

    def test_hashable_and_equal(self):
        a = CpcClassification(section='H', main_class='04', sub_class='N', main_group='21')
        b = CpcClassification(section='H', main_class='04', sub_class='N', main_group='21')
        assert a == b
        assert hash(a) == hash(b)

    def test_str_is_prefix(self, cpc_h04n21):
        assert str(cpc_h04n21) == 'H04N21'


class TestCpcFromText:
    """Test CPC symbol parsing used by the command line."""

    def test_compact_symbol(self):
        code = CpcClassification.from_text('H04N21')
        assert (code.section, code.main_class, code.sub_class, code.main_group) == (
            'H', '04', 'N', '21'
        )

    def test_lower_case_and_spaces(self):
        code = CpcClassification.from_text(' g06f 16 ')
        assert code.prefix == 'G06F16'

    @pytest.mark.parametrize('text', ['', 'H04N', 'H4N21', '04N21', 'H04N21/00', None])
    def test_malformed_rejected(self, text):
        with pytest.raises(ValueError):
            CpcClassification.from_text(text)


class TestUspcClassification:
    """Test USPC value type."""

    def test_prefix_is_main_class(self, uspc_705):
        assert uspc_705.prefix == '705'
        assert uspc_705.scheme == ClassificationScheme.USPC

    def test_empty_main_class_reported(self):
        assert UspcClassification(main_class='').empty_fields() == ['main_class']
        assert UspcClassification(main_class=' ').empty_fields() == ['main_class']

    def test_from_text(self):
        assert UspcClassification.from_text('d14').main_class == 'D14'

    def test_from_text_rejects_blank(self):
        with pytest.raises(ValueError):
            UspcClassification.from_text('  ')


class TestFilterByScheme:
    """Test scheme partitioning."""

    def test_keeps_input_order(self, cpc_h04n21, cpc_g06f16, uspc_705):
        codes = [cpc_g06f16, uspc_705, cpc_h04n21]

        assert filter_by_scheme(codes, ClassificationScheme.CPC) == [cpc_g06f16, cpc_h04n21]
        assert filter_by_scheme(codes, ClassificationScheme.USPC) == [uspc_705]

    def test_empty_input(self):
        assert filter_by_scheme([], ClassificationScheme.CPC) == []
