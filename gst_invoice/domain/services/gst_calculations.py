# gst_invoice/domain/services/gst_calculations.py
"""
Line valuation and invoice-level GST totals.

Per line:
  amount         = quantity x unit_price
  taxable_value  = amount - discount          (discount is an absolute amount)
  gst_amount     = taxable_value x rate / 100 (rate from the catalog item)

Per invoice, GST is summed over all lines and split once into CGST/SGST or
IGST from the two party states. Nothing is rounded here; presentation code
rounds for display (see currency.round_money).
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Iterable, Mapping, Union

from gst_invoice.domain.models.invoice import (
    BusinessProfile,
    CatalogItem,
    Customer,
    Invoice,
    ItemId,
    LineItem,
)
from gst_invoice.domain.services.gst_split import ZERO, is_inter_state, split_tax

logger = logging.getLogger("gst_calculations")

HUNDRED = Decimal("100")
UNKNOWN_ITEM_NAME = "Unknown"

Catalog = Union[Mapping[ItemId, CatalogItem], Iterable[CatalogItem]]


# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------

@dataclass
class LineValuation:
    """Valuation of a single invoice line."""
    catalog_item_id: ItemId
    item_name: str
    hsn_sac: str | None
    amount: Decimal
    discount: Decimal
    taxable_value: Decimal
    gst_rate: Decimal
    gst_amount: Decimal
    is_unknown_item: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TaxTotals:
    """Invoice-level totals. Exactly one of CGST+SGST / IGST is populated."""
    subtotal: Decimal = ZERO
    total_discount: Decimal = ZERO
    taxable_amount: Decimal = ZERO
    cgst: Decimal = ZERO
    sgst: Decimal = ZERO
    igst: Decimal = ZERO
    grand_total: Decimal = ZERO
    is_inter_state: bool = False

    @property
    def total_gst(self) -> Decimal:
        return self.cgst + self.sgst + self.igst

    def to_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "total_discount": self.total_discount,
            "taxable_amount": self.taxable_amount,
            "cgst": self.cgst,
            "sgst": self.sgst,
            "igst": self.igst,
            "total_gst": self.total_gst,
            "grand_total": self.grand_total,
            "is_inter_state": self.is_inter_state,
        }


# ---------------------------------------------------------------------------
# Catalog helpers
# ---------------------------------------------------------------------------

def index_catalog(catalog: Catalog) -> Mapping[ItemId, CatalogItem]:
    """Accept either an id->item mapping or a plain list of catalog items."""
    if isinstance(catalog, Mapping):
        return catalog
    return {item.id: item for item in catalog}


def discount_from_percent(quantity, unit_price, percent) -> Decimal:
    """
    Convert a percentage discount into the absolute amount the engine expects.

    Callers holding a ``discount %`` must convert at the boundary; the
    engine itself only understands absolute amounts.
    """
    amount = _dec(quantity) * _dec(unit_price)
    return amount * _dec(percent) / HUNDRED


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def value_line(line: LineItem, catalog: Catalog) -> LineValuation:
    """Compute amount, taxable value and GST for one line item.

    A line whose catalog item no longer exists is valued with a 0% rate and
    flagged ``is_unknown_item`` so the invoice stays viewable.
    """
    items = index_catalog(catalog)
    item = items.get(line.catalog_item_id)

    amount = line.quantity * line.unit_price
    discount = line.discount or ZERO
    taxable_value = amount - discount

    if item is None:
        logger.debug("Catalog item %s not found; valuing line at 0%% GST", line.catalog_item_id)
        return LineValuation(
            catalog_item_id=line.catalog_item_id,
            item_name=UNKNOWN_ITEM_NAME,
            hsn_sac=None,
            amount=amount,
            discount=discount,
            taxable_value=taxable_value,
            gst_rate=ZERO,
            gst_amount=ZERO,
            is_unknown_item=True,
        )

    rate = item.default_gst_rate
    return LineValuation(
        catalog_item_id=line.catalog_item_id,
        item_name=item.name,
        hsn_sac=item.hsn_sac,
        amount=amount,
        discount=discount,
        taxable_value=taxable_value,
        gst_rate=rate,
        gst_amount=taxable_value * rate / HUNDRED,
    )


def compute_totals(
    line_items: Iterable[LineItem],
    catalog: Catalog,
    seller_state: str | None = None,
    buyer_state: str | None = None,
) -> TaxTotals:
    """
    Aggregate line valuations into invoice totals.

    GST treatment is decided once for the whole invoice from the two party
    states. An empty line list yields all-zero totals.
    """
    items = index_catalog(catalog)

    subtotal = ZERO
    total_discount = ZERO
    total_gst = ZERO
    for line in line_items:
        valuation = value_line(line, items)
        subtotal += valuation.amount
        total_discount += valuation.discount
        total_gst += valuation.gst_amount

    taxable_amount = subtotal - total_discount
    inter_state = is_inter_state(seller_state, buyer_state)
    cgst, sgst, igst = split_tax(total_gst, inter_state)

    return TaxTotals(
        subtotal=subtotal,
        total_discount=total_discount,
        taxable_amount=taxable_amount,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        grand_total=taxable_amount + cgst + sgst + igst,
        is_inter_state=inter_state,
    )


def buyer_state_for(invoice: Invoice, customer: Customer | None) -> str | None:
    """Invoice-level place of supply wins over the customer's registered state."""
    if invoice.place_of_supply and invoice.place_of_supply.strip():
        return invoice.place_of_supply
    return customer.state if customer else None


def compute_invoice_totals(
    invoice: Invoice,
    catalog: Catalog,
    business_profile: BusinessProfile | None = None,
    customer: Customer | None = None,
) -> TaxTotals:
    seller_state = business_profile.state if business_profile else None
    return compute_totals(
        invoice.line_items,
        catalog,
        seller_state,
        buyer_state_for(invoice, customer),
    )


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _dec(val) -> Decimal:
    """Safely convert a value to Decimal."""
    if val is None:
        return ZERO
    if isinstance(val, Decimal):
        return val
    try:
        return Decimal(str(val))
    except (ArithmeticError, ValueError, TypeError):
        return ZERO
