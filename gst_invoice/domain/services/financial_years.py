# gst_invoice/domain/services/financial_years.py
"""
Indian financial year labels ("2024-25"). The FY runs 1 April - 31 March.
"""

from __future__ import annotations

from datetime import date


def financial_year_start(day: date) -> int:
    # Jan-Mar belong to the FY that started the previous April
    return day.year - 1 if day.month < 4 else day.year


def fy_label(start_year: int) -> str:
    return f"{start_year}-{str(start_year + 1)[-2:]}"


def financial_year_for(day: date) -> str:
    return fy_label(financial_year_start(day))


def recent_financial_years(today: date | None = None, count: int = 5) -> list[str]:
    """Current FY and the ones before it, newest first."""
    today = today or date.today()
    current = financial_year_start(today)
    return [fy_label(current - i) for i in range(count)]
