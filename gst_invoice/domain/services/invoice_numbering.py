# gst_invoice/domain/services/invoice_numbering.py

from __future__ import annotations

from gst_invoice.config.settings import settings
from gst_invoice.domain.models.invoice import BusinessProfile, Invoice


def format_invoice_number(
    sequential_id: int,
    business_profile: BusinessProfile | None = None,
) -> str:
    """Prefix + zero-padded (sequential_id + starting_number - 1), e.g. INV0003."""
    if business_profile is not None:
        prefix = business_profile.invoice_prefix
        starting_number = business_profile.starting_number
    else:
        prefix = settings.DEFAULT_INVOICE_PREFIX
        starting_number = 1

    number = sequential_id + starting_number - 1
    return f"{prefix}{str(number).rjust(settings.INVOICE_NUMBER_WIDTH, '0')}"


def display_number(
    invoice: Invoice,
    business_profile: BusinessProfile | None = None,
) -> str:
    """
    Number shown on screen and on the printed invoice.

    A stored number (manual override, or one carried over from a prior
    system) always wins and is returned verbatim; otherwise the number is
    derived from the invoice's sequential id.
    """
    stored = invoice.invoice_number
    if stored is not None and stored.strip():
        return stored
    return format_invoice_number(invoice.id, business_profile)
