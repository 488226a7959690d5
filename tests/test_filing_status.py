"""Tests for filing-status normalisation."""

import pytest

from gst_invoice.domain.services.filing_status import (
    FilingVariant,
    normalize_filing_status,
    status_badge_variant,
)


class TestNotFiledWins:

    @pytest.mark.parametrize("text", ["Not Filed", "NOT FILED", "  not   filed ", "Return not yet filed", "Unfiled", "Not-Filed", "not_filed", "NOT_YET_FILED"])
    def test_not_filed_phrases_never_classified_filed(self, text):
        result = normalize_filing_status(text)
        assert result.variant == FilingVariant.not_filed
        assert result.label == "Not filed"


class TestFiled:

    @pytest.mark.parametrize("text", ["Filed", "filed on 20-05-2024", "Completed", "SUBMITTED", "yes", " Yes "])
    def test_filed_tokens(self, text):
        result = normalize_filing_status(text)
        assert result.variant == FilingVariant.filed
        assert result.label == "Filed"


class TestPending:

    @pytest.mark.parametrize("text", ["Pending", "Due", "Overdue", "no", "NIL"])
    def test_not_filed_tokens(self, text):
        assert normalize_filing_status(text).variant == FilingVariant.not_filed

    def test_exact_match_only_for_short_words(self):
        # "no" and "nil" must match the whole status, not a substring
        result = normalize_filing_status("Nominal")
        assert result.variant == FilingVariant.unknown


class TestUnknown:

    def test_original_text_preserved(self):
        result = normalize_filing_status("Under Review (ARN 123)")
        assert result.variant == FilingVariant.unknown
        assert result.label == "Under Review (ARN 123)"

    def test_empty_and_none(self):
        assert normalize_filing_status("").variant == FilingVariant.unknown
        assert normalize_filing_status(None).label == ""

    def test_to_dict_uses_wire_variant(self):
        assert normalize_filing_status("Not Filed").to_dict() == {"label": "Not filed", "variant": "notFiled"}


def test_badge_variants():
    assert status_badge_variant(FilingVariant.filed) == "default"
    assert status_badge_variant(FilingVariant.not_filed) == "secondary"
    assert status_badge_variant(FilingVariant.unknown) == "outline"
