# gst_invoice/domain/services/gst_split.py
"""
Inter-state vs intra-state resolution.

Intra-state supply  -> CGST + SGST (tax split evenly)
Inter-state supply  -> IGST (whole tax)
"""

from __future__ import annotations

from decimal import Decimal

ZERO = Decimal("0")
TWO = Decimal("2")


def _is_blank(state: str | None) -> bool:
    return state is None or not state.strip()


def is_inter_state(seller_state: str | None, buyer_state: str | None) -> bool:
    """
    True when seller and buyer are registered in different states.

    Either state may be missing while the profile/customer is still loading;
    that is treated as intra-state. States are compared exactly
    (case-sensitive, no normalisation).
    """
    if _is_blank(seller_state) or _is_blank(buyer_state):
        return False
    return seller_state != buyer_state


def split_tax(total_gst: Decimal, inter_state: bool) -> tuple[Decimal, Decimal, Decimal]:
    """Return (cgst, sgst, igst) for a total tax amount."""
    if inter_state:
        return ZERO, ZERO, total_gst
    half = total_gst / TWO
    return half, half, ZERO
