# gst_invoice/domain/services/period_summary.py
"""
Monthly rollup of invoice totals.

Invoices are bucketed by (year, month) of their invoice date and each
bucket accumulates the same totals as the per-invoice aggregator. Output
is most recent period first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Iterable, Optional

from gst_invoice.domain.models.invoice import Customer, Invoice, ItemId
from gst_invoice.domain.services.gst_calculations import (
    Catalog,
    buyer_state_for,
    compute_totals,
    index_catalog,
)
from gst_invoice.domain.services.gst_split import ZERO

logger = logging.getLogger("period_summary")

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

CustomerLookup = Callable[[ItemId], Optional[Customer]]


@dataclass
class PeriodSummary:
    """Accumulated totals for one calendar month."""
    year: str
    month: str  # "01".."12", or "" when the invoice date could not be parsed
    invoice_count: int = 0
    taxable_value: Decimal = ZERO
    cgst: Decimal = ZERO
    sgst: Decimal = ZERO
    igst: Decimal = ZERO
    total_gst: Decimal = ZERO
    grand_total: Decimal = ZERO

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month}"

    @property
    def is_unknown_period(self) -> bool:
        return not self.year or not self.month

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "invoice_count": self.invoice_count,
            "taxable_value": self.taxable_value,
            "cgst": self.cgst,
            "sgst": self.sgst,
            "igst": self.igst,
            "total_gst": self.total_gst,
            "grand_total": self.grand_total,
        }


# ---------------------------------------------------------------------------
# Date helpers
# ---------------------------------------------------------------------------

def parse_invoice_date(value: str | None) -> date | None:
    """Parse a stored invoice date ("YYYY-MM-DD", or an ISO timestamp)."""
    if not value or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def invoice_year_month(value: str | None) -> tuple[str, str]:
    """Return ("YYYY", "MM"), or ("", "") when the date is unparsable."""
    parsed = parse_invoice_date(value)
    if parsed is None:
        return "", ""
    return f"{parsed.year:04d}", f"{parsed.month:02d}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def aggregate_by_period(
    invoices: Iterable[Invoice],
    catalog: Catalog,
    seller_state: str | None,
    customer_lookup: CustomerLookup,
) -> list[PeriodSummary]:
    """
    Fold invoice totals into one PeriodSummary per (year, month).

    Invoices with an unparsable date land in a single "unknown period"
    bucket (year and month both ""); callers may drop it before display.
    """
    items = index_catalog(catalog)
    summaries: dict[str, PeriodSummary] = {}

    for invoice in invoices:
        year, month = invoice_year_month(invoice.invoice_date)
        if not year:
            logger.warning(
                "Invoice %s has unparsable date %r; counted under unknown period",
                invoice.id, invoice.invoice_date,
            )

        customer = customer_lookup(invoice.customer_id)
        totals = compute_totals(
            invoice.line_items,
            items,
            seller_state,
            buyer_state_for(invoice, customer),
        )

        key = f"{year}-{month}"
        summary = summaries.get(key)
        if summary is None:
            summary = summaries[key] = PeriodSummary(year=year, month=month)

        summary.invoice_count += 1
        summary.taxable_value += totals.taxable_amount
        summary.cgst += totals.cgst
        summary.sgst += totals.sgst
        summary.igst += totals.igst
        summary.total_gst += totals.total_gst
        summary.grand_total += totals.grand_total

    return sorted(summaries.values(), key=lambda s: s.key, reverse=True)


def filter_period_summaries(
    summaries: Iterable[PeriodSummary],
    month: str | None = None,
    year: str | None = None,
) -> list[PeriodSummary]:
    """Keep summaries matching the selected month and/or year."""
    return [
        s for s in summaries
        if (not month or s.month == month) and (not year or s.year == year)
    ]


def month_name(month: str) -> str:
    """'04' -> 'April'. Unrecognised values are returned unchanged."""
    try:
        index = int(month) - 1
    except (TypeError, ValueError):
        return month
    if 0 <= index < len(MONTH_NAMES):
        return MONTH_NAMES[index]
    return month


def period_label(summary: PeriodSummary) -> str:
    if summary.is_unknown_period:
        return "Unknown period"
    return f"{month_name(summary.month)} {summary.year}"
