"""Ghana statutory payroll constants (monthly)."""

from __future__ import annotations

from decimal import Decimal

from ghana_payroll.calculators.types import TaxBracket

# Widths are incremental: each tier covers the next slice of income.
TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(width=Decimal("490"), rate=Decimal("0")),
    TaxBracket(width=Decimal("110"), rate=Decimal("0.05")),
    TaxBracket(width=Decimal("130"), rate=Decimal("0.10")),
    TaxBracket(width=Decimal("3166.67"), rate=Decimal("0.175")),
    TaxBracket(width=Decimal("16000"), rate=Decimal("0.25")),
    TaxBracket(width=Decimal("30520"), rate=Decimal("0.30")),
    TaxBracket(width=None, rate=Decimal("0.35")),
)

SSNIT_EMPLOYEE_RATE = Decimal("0.055")
SSNIT_EMPLOYER_RATE = Decimal("0.13")

BONUS_TAX_RATE = Decimal("0.05")

STANDARD_MONTHLY_HOURS = Decimal("176")
OVERTIME_MULTIPLIER = Decimal("1.5")

MONEY_PRECISION = Decimal("0.01")
