# gst_invoice/domain/services/__init__.py
"""GST engine: totals, HSN/SAC breakdown, monthly rollup, numbering, words."""

from gst_invoice.domain.services.amount_words import INVALID_AMOUNT_WORDS, amount_in_words
from gst_invoice.domain.services.filing_status import (
    FilingVariant,
    NormalizedStatus,
    normalize_filing_status,
)
from gst_invoice.domain.services.gst_calculations import (
    LineValuation,
    TaxTotals,
    compute_invoice_totals,
    compute_totals,
    value_line,
)
from gst_invoice.domain.services.gst_split import is_inter_state
from gst_invoice.domain.services.invoice_numbering import display_number
from gst_invoice.domain.services.period_summary import PeriodSummary, aggregate_by_period
from gst_invoice.domain.services.tax_breakdown import (
    HsnBreakdownRow,
    TaxBreakdown,
    compute_breakdown,
)

__all__ = [
    "INVALID_AMOUNT_WORDS",
    "amount_in_words",
    "FilingVariant",
    "NormalizedStatus",
    "normalize_filing_status",
    "LineValuation",
    "TaxTotals",
    "compute_invoice_totals",
    "compute_totals",
    "value_line",
    "is_inter_state",
    "display_number",
    "PeriodSummary",
    "aggregate_by_period",
    "HsnBreakdownRow",
    "TaxBreakdown",
    "compute_breakdown",
]
