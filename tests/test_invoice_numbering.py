"""Tests for invoice display numbers."""

from gst_invoice.domain.models.invoice import BusinessProfile
from gst_invoice.domain.services.invoice_numbering import display_number, format_invoice_number


class TestFormatInvoiceNumber:

    def test_default_prefix_and_padding(self):
        assert format_invoice_number(3) == "INV0003"

    def test_profile_prefix_and_starting_number(self):
        profile = BusinessProfile(invoice_prefix="ABC/24-25/", starting_number=101)
        assert format_invoice_number(1, profile) == "ABC/24-25/0101"

    def test_numbers_wider_than_padding(self):
        assert format_invoice_number(12345) == "INV12345"

    def test_empty_prefix_is_respected(self):
        profile = BusinessProfile(invoice_prefix="", starting_number=1)
        assert format_invoice_number(7, profile) == "0007"


class TestDisplayNumber:

    def test_stored_override_wins(self, make_invoice, business_profile):
        invoice = make_invoice(42, "2024-04-15", invoice_number="INV-2024-007")
        assert display_number(invoice, business_profile) == "INV-2024-007"

    def test_stored_override_returned_verbatim(self, make_invoice):
        invoice = make_invoice(1, "2024-04-15", invoice_number=" OLD/17 ")
        assert display_number(invoice) == " OLD/17 "

    def test_blank_override_falls_back(self, make_invoice, business_profile):
        invoice = make_invoice(3, "2024-04-15", invoice_number="   ")
        assert display_number(invoice, business_profile) == "INV0003"

    def test_computed_from_sequential_id(self, make_invoice, business_profile):
        invoice = make_invoice(3, "2024-04-15")
        assert display_number(invoice, business_profile) == "INV0003"

    def test_without_business_profile(self, make_invoice):
        invoice = make_invoice(1, "2024-04-15")
        assert display_number(invoice) == "INV0001"
