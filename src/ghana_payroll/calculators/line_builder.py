"""Payslip line breakdown for calculated results."""

from __future__ import annotations

from decimal import Decimal

from ghana_payroll.calculators.constants import (
    BONUS_TAX_RATE,
    OVERTIME_MULTIPLIER,
    SSNIT_EMPLOYEE_RATE,
    SSNIT_EMPLOYER_RATE,
    STANDARD_MONTHLY_HOURS,
)
from ghana_payroll.calculators.tax_calculator import round_money
from ghana_payroll.calculators.types import ZERO, LineType, PayrollResult, PayslipLine


class LineItemBuilder:
    """Builds signed payslip lines from a payroll result.

    Sign conventions:
    - EARNING: positive
    - DEDUCTION (employee): negative
    - EMPLOYER_CONTRIBUTION: positive, excluded from net

    Basic salary, SSNIT and PAYE always appear; the other lines only
    when their amount is non-zero.
    """

    @staticmethod
    def create_earning_line(
        code: str,
        description: str,
        amount: Decimal,
        quantity: Decimal | None = None,
        rate: Decimal | None = None,
    ) -> PayslipLine:
        """Create an earning line (positive amount)."""
        return PayslipLine(
            line_type=LineType.EARNING,
            code=code,
            description=description,
            amount=round_money(amount),
            quantity=quantity,
            rate=rate,
        )

    @staticmethod
    def create_deduction_line(
        code: str,
        description: str,
        amount: Decimal,
        rate: Decimal | None = None,
    ) -> PayslipLine:
        """Create an employee deduction line (negative amount)."""
        return PayslipLine(
            line_type=LineType.DEDUCTION,
            code=code,
            description=description,
            amount=-round_money(amount),
            rate=rate,
        )

    @staticmethod
    def create_employer_line(
        code: str,
        description: str,
        amount: Decimal,
        rate: Decimal | None = None,
    ) -> PayslipLine:
        """Create an employer contribution line (positive, liability)."""
        return PayslipLine(
            line_type=LineType.EMPLOYER_CONTRIBUTION,
            code=code,
            description=description,
            amount=round_money(amount),
            rate=rate,
        )

    @classmethod
    def build_lines(cls, result: PayrollResult) -> list[PayslipLine]:
        """Decompose a result into earnings, deductions and employer lines."""
        lines = [
            cls.create_earning_line("BASIC", "Basic Salary", result.basic_salary),
        ]

        if result.allowances:
            lines.append(cls.create_earning_line("ALLOWANCES", "Allowances", result.allowances))
        if result.overtime_pay:
            hourly_rate = round_money(result.basic_salary / STANDARD_MONTHLY_HOURS * OVERTIME_MULTIPLIER)
            lines.append(
                cls.create_earning_line(
                    "OVERTIME",
                    "Overtime",
                    result.overtime_pay,
                    quantity=result.overtime_hours,
                    rate=hourly_rate,
                )
            )
        if result.bonus:
            lines.append(cls.create_earning_line("BONUS", "Bonus", result.bonus))

        lines.append(
            cls.create_deduction_line(
                "SSNIT_EE", "SSNIT (Employee 5.5%)", result.ssnit_employee, rate=SSNIT_EMPLOYEE_RATE
            )
        )
        lines.append(cls.create_deduction_line("PAYE", "PAYE Income Tax", result.paye))
        if result.bonus_tax:
            lines.append(
                cls.create_deduction_line(
                    "BONUS_TAX", "Bonus Tax (5%)", result.bonus_tax, rate=BONUS_TAX_RATE
                )
            )

        lines.append(
            cls.create_employer_line(
                "SSNIT_ER", "SSNIT (Employer 13%)", result.ssnit_employer, rate=SSNIT_EMPLOYER_RATE
            )
        )
        return lines

    @staticmethod
    def calculate_gross_from_lines(lines: list[PayslipLine]) -> Decimal:
        """GROSS = sum of EARNING lines."""
        gross = ZERO
        for line in lines:
            if line.line_type == LineType.EARNING:
                gross += line.amount
        return round_money(gross)

    @staticmethod
    def calculate_net_from_lines(lines: list[PayslipLine]) -> Decimal:
        """NET = sum of EARNING and DEDUCTION lines.

        EMPLOYER_CONTRIBUTION is excluded (it is a liability).
        """
        net = ZERO
        for line in lines:
            if line.line_type != LineType.EMPLOYER_CONTRIBUTION:
                net += line.amount
        return round_money(net)
