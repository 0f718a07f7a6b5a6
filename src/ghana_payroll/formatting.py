"""Display formatting for amounts, rates and payroll months."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from ghana_payroll.calculators.tax_calculator import round_money, to_decimal
from ghana_payroll.calculators.types import Amount

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_currency(amount: Amount, include_symbol: bool = True, currency: str = "GHS") -> str:
    """Format an amount as cedis, e.g. ``GHS 5,000.00``."""
    formatted = f"{round_money(to_decimal(amount)):,.2f}"
    return f"{currency} {formatted}" if include_symbol else formatted


def format_percentage(rate: Amount, decimals: int = 1) -> str:
    """Format a fractional rate, e.g. ``0.055`` -> ``5.5%``."""
    percent = round_money(to_decimal(rate) * Decimal(100), decimals)
    return f"{percent:.{decimals}f}%"


def format_month(month: str) -> str:
    """``2026-01`` -> ``January 2026``; unparseable input is returned as is."""
    try:
        year_text, month_text = month.split("-")
        year, month_number = int(year_text), int(month_text)
    except (AttributeError, ValueError):
        return month

    if not 1 <= month_number <= 12:
        return month
    return f"{MONTH_NAMES[month_number - 1]} {year}"


def current_month(today: date | None = None) -> str:
    """The payroll month for ``today`` in ``YYYY-MM`` form."""
    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}"


def format_employee_count(count: int) -> str:
    """Human-readable headcount, e.g. ``1 employee`` or ``3 employees``."""
    return f"{count} employee{'s' if count != 1 else ''}"
