"""Statutory calculations: PAYE, SSNIT, bonus tax and overtime."""

from __future__ import annotations

from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext, localcontext
from typing import Iterator, Sequence

from ghana_payroll.calculators.constants import (
    BONUS_TAX_RATE,
    OVERTIME_MULTIPLIER,
    SSNIT_EMPLOYEE_RATE,
    SSNIT_EMPLOYER_RATE,
    STANDARD_MONTHLY_HOURS,
    TAX_BRACKETS,
)
from ghana_payroll.calculators.types import ZERO, Amount, SSNITContribution, TaxBracket


class InvalidAmountError(ValueError):
    """Raised when an amount cannot be read as a number."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid amount for '{field}': {value!r}")


def to_decimal(value: Amount | None, field: str = "amount") -> Decimal:
    """Coerce a raw amount to Decimal; ``None`` and blanks become zero.

    Floats go through ``str`` so binary noise never reaches the math.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise InvalidAmountError(field, value)
    else:
        text = str(value).strip()
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(field, value) from None

    if not amount.is_finite():
        raise InvalidAmountError(field, value)
    return amount


# Digits kept beyond the integer part of any figure: cents plus headroom
# for the rates and the overtime division.
GUARD_DIGITS = 16


def _integer_digits(value: Decimal) -> int:
    if not value or not value.is_finite():
        return 1
    return max(value.adjusted(), 0) + 1


def working_precision(*amounts: Decimal) -> int:
    """Context precision that carries ``amounts``, their sums and products to the cent."""
    digits = sum(_integer_digits(amount) for amount in amounts)
    return max(getcontext().prec, digits + GUARD_DIGITS)


@contextmanager
def money_context(*amounts: Decimal) -> Iterator[None]:
    """Widen the decimal context so arithmetic on ``amounts`` stays exact to the cent."""
    with localcontext() as ctx:
        ctx.prec = working_precision(*amounts)
        yield


def round_money(value: Decimal, decimals: int = 2) -> Decimal:
    """Round half-up (away from zero on ties) to ``decimals`` places.

    Works for any finite magnitude; the default 28-digit context would
    reject figures with more integer digits than that.
    """
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def calculate_paye(
    taxable_income: Decimal,
    brackets: Sequence[TaxBracket] = TAX_BRACKETS,
) -> Decimal:
    """Calculate PAYE on monthly taxable income.

    Brackets are incremental: each one taxes only the slice of income
    it covers. The sum is rounded once at the end.

    Example, taxable income 5,225:
        490 @ 0%        =   0.00
        110 @ 5%        =   5.50
        130 @ 10%       =  13.00
        3,166.67 @ 17.5% = 554.17
        1,328.33 @ 25%  = 332.08
        total           = 904.75
    """
    if taxable_income <= 0:
        return ZERO

    tax = ZERO
    remaining = taxable_income

    with money_context(taxable_income):
        for bracket in brackets:
            if remaining <= 0:
                break

            if bracket.width is None:
                taxable_in_bracket = remaining
            else:
                taxable_in_bracket = min(remaining, bracket.width)
            tax += taxable_in_bracket * bracket.rate
            remaining -= taxable_in_bracket

    return round_money(tax)


def calculate_ssnit(basic_salary: Decimal) -> SSNITContribution:
    """Calculate SSNIT contributions on basic salary only.

    The total is the rounded sum of the already rounded parts, so it
    always reconciles with the two figures printed beside it.
    """
    if basic_salary <= 0:
        return SSNITContribution()

    with money_context(basic_salary):
        employee = round_money(basic_salary * SSNIT_EMPLOYEE_RATE)
        employer = round_money(basic_salary * SSNIT_EMPLOYER_RATE)
        return SSNITContribution(
            employee=employee,
            employer=employer,
            total=round_money(employee + employer),
        )


def calculate_bonus_tax(bonus: Decimal) -> Decimal:
    """Flat-rate tax on bonus, outside the PAYE schedule."""
    if bonus <= 0:
        return ZERO
    with money_context(bonus):
        return round_money(bonus * BONUS_TAX_RATE)


def calculate_overtime_pay(basic_salary: Decimal, overtime_hours: Decimal) -> Decimal:
    """Overtime at 1.5x the hourly rate derived from monthly basic salary.

    The hourly rate is not rounded on its own.
    """
    if basic_salary <= 0 or overtime_hours <= 0:
        return ZERO

    with money_context(basic_salary, overtime_hours):
        hourly_rate = basic_salary / STANDARD_MONTHLY_HOURS
        return round_money(overtime_hours * hourly_rate * OVERTIME_MULTIPLIER)
