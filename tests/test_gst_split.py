"""Tests for inter-state / intra-state resolution."""

from decimal import Decimal

from gst_invoice.domain.services.gst_split import is_inter_state, split_tax


class TestIsInterState:

    def test_same_state_is_intra(self):
        assert is_inter_state("Karnataka", "Karnataka") is False

    def test_different_state_is_inter(self):
        assert is_inter_state("Karnataka", "Maharashtra") is True

    def test_comparison_is_case_sensitive(self):
        assert is_inter_state("Karnataka", "karnataka") is True

    def test_missing_state_defaults_to_intra(self):
        assert is_inter_state(None, "Maharashtra") is False
        assert is_inter_state("Karnataka", None) is False
        assert is_inter_state(None, None) is False

    def test_blank_state_treated_as_missing(self):
        assert is_inter_state("Karnataka", "   ") is False


class TestSplitTax:

    def test_intra_state_splits_evenly(self):
        assert split_tax(Decimal("180"), False) == (Decimal("90"), Decimal("90"), Decimal("0"))

    def test_inter_state_all_igst(self):
        assert split_tax(Decimal("180"), True) == (Decimal("0"), Decimal("0"), Decimal("180"))

    def test_odd_paise_split_without_rounding(self):
        cgst, sgst, igst = split_tax(Decimal("0.01"), False)
        assert cgst == sgst == Decimal("0.005")
        assert cgst + sgst == Decimal("0.01")
