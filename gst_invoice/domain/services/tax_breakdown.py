# gst_invoice/domain/services/tax_breakdown.py
"""
HSN/SAC-wise tax summary for the printable invoice.

Lines sharing a code are merged by summing taxable value first; tax is then
computed once on the merged value. Rows keep first-seen order.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Iterable

from gst_invoice.domain.models.invoice import LineItem
from gst_invoice.domain.services.gst_calculations import (
    HUNDRED,
    Catalog,
    index_catalog,
    value_line,
)
from gst_invoice.domain.services.gst_split import TWO, ZERO, is_inter_state

logger = logging.getLogger("tax_breakdown")

# Bucket for catalog items with no HSN/SAC code
UNSPECIFIED_HSN = "-"
# Bucket for lines whose catalog item no longer exists (always 0%)
UNKNOWN_ITEM_HSN = "Unknown"


@dataclass
class HsnBreakdownRow:
    hsn_sac: str
    taxable_value: Decimal = ZERO
    cgst_rate: Decimal = ZERO
    cgst_amount: Decimal = ZERO
    sgst_rate: Decimal = ZERO
    sgst_amount: Decimal = ZERO
    igst_rate: Decimal = ZERO
    igst_amount: Decimal = ZERO
    total_tax_amount: Decimal = ZERO

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TaxBreakdown:
    rows: list[HsnBreakdownRow] = field(default_factory=list)
    is_inter_state: bool = False
    total_taxable_value: Decimal = ZERO
    total_cgst: Decimal = ZERO
    total_sgst: Decimal = ZERO
    total_igst: Decimal = ZERO

    @property
    def total_tax(self) -> Decimal:
        return self.total_cgst + self.total_sgst + self.total_igst

    def to_dict(self) -> dict:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "is_inter_state": self.is_inter_state,
            "total_taxable_value": self.total_taxable_value,
            "total_cgst": self.total_cgst,
            "total_sgst": self.total_sgst,
            "total_igst": self.total_igst,
            "total_tax": self.total_tax,
        }


def hsn_key(code: str | None) -> str:
    if code is None or not code.strip():
        return UNSPECIFIED_HSN
    return code.strip()


def compute_breakdown(
    line_items: Iterable[LineItem],
    catalog: Catalog,
    seller_state: str | None,
    buyer_state: str | None,
) -> TaxBreakdown:
    """
    Group lines by HSN/SAC code and compute tax per code.

    If two items share a code but carry different rates, the last-seen rate
    is used for the whole bucket.
    """
    items = index_catalog(catalog)
    inter_state = is_inter_state(seller_state, buyer_state)

    # dicts preserve insertion order -> rows come out in first-seen order
    buckets: dict[str, dict[str, Decimal]] = {}
    for line in line_items:
        valuation = value_line(line, items)
        key = UNKNOWN_ITEM_HSN if valuation.is_unknown_item else hsn_key(valuation.hsn_sac)
        bucket = buckets.get(key)
        if bucket is None:
            buckets[key] = {"taxable_value": valuation.taxable_value, "rate": valuation.gst_rate}
            continue
        if bucket["rate"] != valuation.gst_rate:
            logger.warning(
                "HSN/SAC %s has mixed GST rates (%s%%, %s%%); using %s%%",
                key, bucket["rate"], valuation.gst_rate, valuation.gst_rate,
            )
        bucket["taxable_value"] += valuation.taxable_value
        bucket["rate"] = valuation.gst_rate

    result = TaxBreakdown(is_inter_state=inter_state)
    for code, bucket in buckets.items():
        taxable_value = bucket["taxable_value"]
        rate = bucket["rate"]
        tax = taxable_value * rate / HUNDRED

        if inter_state:
            row = HsnBreakdownRow(
                hsn_sac=code,
                taxable_value=taxable_value,
                igst_rate=rate,
                igst_amount=tax,
                total_tax_amount=tax,
            )
        else:
            half = tax / TWO
            row = HsnBreakdownRow(
                hsn_sac=code,
                taxable_value=taxable_value,
                cgst_rate=rate / TWO,
                cgst_amount=half,
                sgst_rate=rate / TWO,
                sgst_amount=half,
                total_tax_amount=tax,
            )

        result.rows.append(row)
        result.total_taxable_value += taxable_value
        result.total_cgst += row.cgst_amount
        result.total_sgst += row.sgst_amount
        result.total_igst += row.igst_amount

    return result
