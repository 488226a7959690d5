# gst_invoice/domain/services/amount_words.py
"""
Rupee amount in words, Indian numbering system.

    1,23,45,678  ->  "Indian Rupee One Crore Twenty Three Lakh Forty Five
                      Thousand Six Hundred Seventy Eight Only"

Groups: crore (10^7), lakh (10^5), thousand (10^3), then the last three
digits. Paise are rounded away (half-up) before conversion.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

logger = logging.getLogger("amount_words")

INVALID_AMOUNT_WORDS = "Invalid Amount"
ZERO_RUPEES_WORDS = "Zero Rupees Only"

_CRORE = 10_000_000
_LAKH = 100_000
_THOUSAND = 1_000

_ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
_TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def _two_digits(num: int) -> str:
    if num < 10:
        return _ONES[num]
    if num < 20:
        return _TEENS[num - 10]
    tens, ones = divmod(num, 10)
    return f"{_TENS[tens]} {_ONES[ones]}" if ones else _TENS[tens]


def _three_digits(num: int) -> str:
    hundreds, remainder = divmod(num, 100)
    parts = []
    if hundreds:
        parts.append(f"{_ONES[hundreds]} Hundred")
    if remainder:
        parts.append(_two_digits(remainder))
    return " ".join(parts)


def _indian_words(num: int) -> str:
    crore, rest = divmod(num, _CRORE)
    lakh, rest = divmod(rest, _LAKH)
    thousand, remainder = divmod(rest, _THOUSAND)

    parts = []
    if crore:
        # Above 999 crore the crore group is itself spelled out in lakh/thousand
        crore_words = _three_digits(crore) if crore < 1000 else _indian_words(crore)
        parts.append(f"{crore_words} Crore")
    if lakh:
        parts.append(f"{_two_digits(lakh)} Lakh")
    if thousand:
        parts.append(f"{_two_digits(thousand)} Thousand")
    if remainder:
        parts.append(_three_digits(remainder))
    return " ".join(parts)


def _to_rupees(amount) -> int | None:
    """Round to whole rupees; None for negative, non-finite or non-numeric input."""
    if isinstance(amount, bool):
        return None
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not value.is_finite() or value < 0:
        return None
    with localcontext() as ctx:
        # Enough digits to hold the integer part of very large amounts
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def amount_in_words(amount) -> str:
    """
    Render a rupee amount for the invoice declaration line.

    Never raises: invalid input returns ``INVALID_AMOUNT_WORDS``.
    """
    rupees = _to_rupees(amount)
    if rupees is None:
        logger.debug("Cannot convert %r to words", amount)
        return INVALID_AMOUNT_WORDS
    if rupees == 0:
        return ZERO_RUPEES_WORDS
    return f"Indian Rupee {_indian_words(rupees)} Only"
