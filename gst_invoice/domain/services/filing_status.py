# gst_invoice/domain/services/filing_status.py
"""
Normalise free-text GST return filing status (from the registry lookup)
into Filed / Not filed / unknown for display.

The upstream vocabulary is not fixed, so classification is best-effort and
the original text is kept whenever it cannot be classified.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FilingVariant(str, Enum):
    filed = "filed"
    not_filed = "notFiled"
    unknown = "unknown"


@dataclass(frozen=True)
class NormalizedStatus:
    label: str
    variant: FilingVariant

    def to_dict(self) -> dict:
        return {"label": self.label, "variant": self.variant.value}


# Contain "filed" as a substring, so they are tested before the filed tokens
_NOT_FILED_PHRASES = ("not filed", "not yet filed", "unfiled")

_FILED_TOKENS = ("filed", "completed", "submitted")
_FILED_EXACT = {"yes"}

_NOT_FILED_TOKENS = ("pending", "due")
_NOT_FILED_EXACT = {"no", "nil"}

_FILED = NormalizedStatus(label="Filed", variant=FilingVariant.filed)
_NOT_FILED = NormalizedStatus(label="Not filed", variant=FilingVariant.not_filed)

_BADGE_VARIANTS = {
    FilingVariant.filed: "default",
    FilingVariant.not_filed: "secondary",
    FilingVariant.unknown: "outline",
}


def normalize_filing_status(status: str | None) -> NormalizedStatus:
    # "Not-Filed" / "not_filed" read the same as "not filed"
    text = " ".join((status or "").lower().replace("-", " ").replace("_", " ").split())

    if any(phrase in text for phrase in _NOT_FILED_PHRASES):
        return _NOT_FILED

    if text in _FILED_EXACT or any(token in text for token in _FILED_TOKENS):
        return _FILED

    if text in _NOT_FILED_EXACT or any(token in text for token in _NOT_FILED_TOKENS):
        return _NOT_FILED

    return NormalizedStatus(label=status or "", variant=FilingVariant.unknown)


def status_badge_variant(variant: FilingVariant) -> str:
    """UI badge style for a normalised status."""
    return _BADGE_VARIANTS[variant]
