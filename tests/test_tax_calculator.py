"""Unit tests for the statutory calculations.

Covers PAYE brackets, SSNIT split, bonus tax, overtime and rounding.
"""

import pytest
from decimal import Decimal

from ghana_payroll.calculators.tax_calculator import (
    InvalidAmountError,
    calculate_bonus_tax,
    calculate_overtime_pay,
    calculate_paye,
    calculate_ssnit,
    round_money,
    to_decimal,
)
from ghana_payroll.calculators.types import TaxBracket


class TestRoundMoney:
    """Test half-up rounding."""

    def test_rounds_to_two_places_by_default(self):
        assert round_money(Decimal("5.123456")) == Decimal("5.12")
        assert round_money(Decimal("5.126")) == Decimal("5.13")
        assert round_money(Decimal("5.125")) == Decimal("5.13")

    def test_rounds_to_requested_places(self):
        assert round_money(Decimal("5.123456"), 0) == Decimal("5")
        assert round_money(Decimal("5.123456"), 1) == Decimal("5.1")
        assert round_money(Decimal("5.123456"), 3) == Decimal("5.123")

    def test_negative_values_round_symmetrically(self):
        """Ties round away from zero for negatives too."""
        assert round_money(Decimal("-5.126")) == Decimal("-5.13")
        assert round_money(Decimal("-5.125")) == Decimal("-5.13")

    def test_very_large_values(self):
        """More integer digits than the default 28-digit context holds."""
        assert round_money(Decimal("1000000000000000000000000000000.005")) == Decimal(
            "1000000000000000000000000000000.01"
        )
        assert round_money(Decimal("1e40")).as_tuple().exponent == -2


class TestToDecimal:
    """Test raw amount coercion."""

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(5000.5) == Decimal("5000.5")

    def test_missing_and_blank_are_zero(self):
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("") == Decimal("0")
        assert to_decimal("   ") == Decimal("0")

    def test_numeric_strings_are_accepted(self):
        assert to_decimal(" 1250.75 ") == Decimal("1250.75")

    def test_non_numeric_raises_with_field(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            to_decimal("abc", "basic_salary")
        assert exc_info.value.field == "basic_salary"
        assert "basic_salary" in str(exc_info.value)

    def test_nan_and_infinity_are_rejected(self):
        with pytest.raises(InvalidAmountError):
            to_decimal("NaN")
        with pytest.raises(InvalidAmountError):
            to_decimal(float("inf"))


class TestPAYE:
    """Test progressive PAYE brackets."""

    def test_zero_below_threshold(self):
        assert calculate_paye(Decimal("0")) == Decimal("0")
        assert calculate_paye(Decimal("400")) == Decimal("0")
        assert calculate_paye(Decimal("490")) == Decimal("0")

    def test_first_taxable_bracket(self):
        # 490 @ 0% + 110 @ 5%
        assert calculate_paye(Decimal("600")) == Decimal("5.50")

    def test_spanning_multiple_brackets(self):
        # 0 + 5.50 + 13.00
        assert calculate_paye(Decimal("730")) == Decimal("18.50")

    def test_reference_taxable_income(self):
        """Taxable income of 5,225 (basic 5,000 + allowances 500 - SSNIT 275)."""
        # 0 + 5.50 + 13.00 + 554.17 + 332.08
        assert calculate_paye(Decimal("5225")) == Decimal("904.75")

    def test_thirty_percent_bracket(self):
        # 0 + 5.50 + 13.00 + 554.17 + 4000.00 + 1531.00
        assert calculate_paye(Decimal("25000")) == Decimal("6103.67")

    def test_top_bracket(self):
        """Income above 50,416.67 reaches the 35% tier."""
        paye = calculate_paye(Decimal("60000"))

        assert abs(paye - Decimal("17082.84")) <= Decimal("0.1")
        # Summed unrounded, then rounded once
        assert paye == Decimal("17082.83")

    def test_negative_income_is_zero(self):
        assert calculate_paye(Decimal("-100")) == Decimal("0")

    def test_custom_brackets(self):
        """Brackets are applied incrementally by width."""
        brackets = (
            TaxBracket(width=Decimal("1000"), rate=Decimal("0.10")),
            TaxBracket(width=None, rate=Decimal("0.20")),
        )
        # 1000 * 0.10 + 500 * 0.20
        assert calculate_paye(Decimal("1500"), brackets) == Decimal("200.00")

    def test_result_has_two_places(self):
        assert calculate_paye(Decimal("5225")).as_tuple().exponent == -2

    def test_very_large_income(self):
        tax = calculate_paye(Decimal("1e27"))

        assert tax.as_tuple().exponent == -2
        assert Decimal("3.4e26") < tax < Decimal("3.5e26")


class TestSSNIT:
    """Test social security contributions."""

    def test_employee_contribution(self):
        assert calculate_ssnit(Decimal("5000")).employee == Decimal("275.00")

    def test_employer_contribution(self):
        assert calculate_ssnit(Decimal("5000")).employer == Decimal("650.00")

    def test_total_contribution(self):
        assert calculate_ssnit(Decimal("5000")).total == Decimal("925.00")

    def test_zero_salary(self):
        result = calculate_ssnit(Decimal("0"))
        assert result.employee == 0
        assert result.employer == 0
        assert result.total == 0

    def test_negative_salary(self):
        result = calculate_ssnit(Decimal("-1000"))
        assert result.employee == 0
        assert result.employer == 0
        assert result.total == 0

    def test_fractional_amounts(self):
        result = calculate_ssnit(Decimal("3333.33"))
        assert result.employee == Decimal("183.33")  # 183.33315
        assert result.employer == Decimal("433.33")  # 433.3329

    def test_total_is_sum_of_rounded_parts(self):
        """4.50 gives 0.2475 + 0.585; the rounded parts sum to 0.84, the raw sum to 0.83."""
        result = calculate_ssnit(Decimal("4.50"))
        assert result.employee == Decimal("0.25")
        assert result.employer == Decimal("0.59")
        assert result.total == Decimal("0.84")
        assert result.total == result.employee + result.employer

    def test_very_large_salary(self):
        result = calculate_ssnit(Decimal("1e30"))
        assert result.employee == Decimal("5.5e28")
        assert result.employer == Decimal("1.3e29")
        assert result.total == Decimal("1.85e29")


class TestBonusTax:
    """Test flat-rate bonus tax."""

    def test_five_percent(self):
        assert calculate_bonus_tax(Decimal("1000")) == Decimal("50.00")
        assert calculate_bonus_tax(Decimal("500")) == Decimal("25.00")

    def test_zero_bonus(self):
        assert calculate_bonus_tax(Decimal("0")) == 0

    def test_negative_bonus(self):
        assert calculate_bonus_tax(Decimal("-100")) == 0

    def test_rounding(self):
        # 333.33 * 0.05 = 16.6665
        assert calculate_bonus_tax(Decimal("333.33")) == Decimal("16.67")


class TestOvertimePay:
    """Test overtime at 1.5x the derived hourly rate."""

    def test_standard_overtime(self):
        # 10 * (5000 / 176) * 1.5 = 426.136...
        assert calculate_overtime_pay(Decimal("5000"), Decimal("10")) == Decimal("426.14")

    def test_fractional_hours(self):
        # 5.5 * (5000 / 176) * 1.5 = 234.375
        assert calculate_overtime_pay(Decimal("5000"), Decimal("5.5")) == Decimal("234.38")

    def test_zero_hours(self):
        assert calculate_overtime_pay(Decimal("5000"), Decimal("0")) == 0

    def test_negative_hours(self):
        assert calculate_overtime_pay(Decimal("5000"), Decimal("-5")) == 0

    def test_zero_salary(self):
        assert calculate_overtime_pay(Decimal("0"), Decimal("10")) == 0

    def test_negative_salary(self):
        assert calculate_overtime_pay(Decimal("-5000"), Decimal("10")) == 0

    def test_very_large_salary(self):
        # 176 hours is exactly one month at 1.5x
        pay = calculate_overtime_pay(Decimal("1e30"), Decimal("176"))
        assert pay == Decimal("1.5e30")
        assert pay.as_tuple().exponent == -2
