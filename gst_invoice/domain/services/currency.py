# gst_invoice/domain/services/currency.py
"""
Display formatting for rupee amounts.

The engine keeps full precision; these helpers are applied only when a
figure is shown or printed.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from gst_invoice.config.settings import settings

_PAISE = Decimal("0.01")


def round_money(value) -> Decimal:
    """Round to 2 decimal places, half-up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(_PAISE, rounding=ROUND_HALF_UP)


def group_indian(digits: str) -> str:
    """'10030000' -> '1,00,30,000' (last three digits, then groups of two)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount, symbol: str | None = None) -> str:
    """Format as e.g. '₹1,00,300.00'; negatives as '-₹500.00'."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    value = round_money(amount)
    sign = "-" if value < 0 else ""
    rupees, paise = f"{abs(value):.2f}".split(".")
    return f"{sign}{symbol}{group_indian(rupees)}.{paise}"
