"""Payroll calculation engine - main orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Iterable, Sequence

from ghana_payroll.calculators.tax_calculator import (
    calculate_bonus_tax,
    calculate_overtime_pay,
    calculate_paye,
    calculate_ssnit,
    money_context,
    round_money,
    to_decimal,
)
from ghana_payroll.calculators.types import ZERO, BatchSummary, EmployeeInput, PayrollResult

logger = logging.getLogger(__name__)


def _largest_amount(results: Sequence[PayrollResult]) -> Decimal:
    return max(
        (
            abs(value)
            for r in results
            for value in (
                r.basic_salary,
                r.allowances,
                r.bonus,
                r.overtime_pay,
                r.gross_pay,
                r.ssnit_employee,
                r.ssnit_employer,
                r.paye,
                r.bonus_tax,
                r.total_deductions,
                r.net_pay,
            )
        ),
        default=ZERO,
    )


@dataclass(frozen=True)
class PayrollRunResult:
    """Results for a batch, in input order, plus their totals."""

    results: list[PayrollResult] = field(default_factory=list)
    summary: BatchSummary = field(default_factory=BatchSummary)


class PayrollEngine:
    """Stateless payroll calculation engine.

    Calculation pipeline (fixed order per employee):
    1) Default missing allowances, bonus and overtime hours to zero
    2) Overtime pay from basic salary and hours
    3) Gross = basic + allowances + overtime + bonus
    4) SSNIT split on basic salary alone
    5) Taxable income = gross - SSNIT employee - bonus
    6) PAYE on taxable income
    7) Flat bonus tax
    8) Total deductions = SSNIT employee + PAYE + bonus tax
    9) Net = gross - total deductions
    10) Round every derived figure to 2 places
    """

    def process_employee(self, employee: EmployeeInput) -> PayrollResult:
        """Calculate pay for a single employee."""
        basic_salary = to_decimal(employee.basic_salary, "basic_salary")
        allowances = to_decimal(employee.allowances, "allowances")
        bonus = to_decimal(employee.bonus, "bonus")
        overtime_hours = to_decimal(employee.overtime_hours, "overtime_hours")

        with money_context(basic_salary, allowances, bonus, overtime_hours):
            overtime_pay = calculate_overtime_pay(basic_salary, overtime_hours)
            gross_pay = basic_salary + allowances + overtime_pay + bonus

            ssnit = calculate_ssnit(basic_salary)

            # Bonus is taxed at its own flat rate, never through PAYE
            taxable_income = gross_pay - ssnit.employee - bonus
            paye = calculate_paye(taxable_income)
            bonus_tax = calculate_bonus_tax(bonus)

            total_deductions = ssnit.employee + paye + bonus_tax
            net_pay = gross_pay - total_deductions

        return PayrollResult(
            employee=replace(
                employee,
                basic_salary=basic_salary,
                allowances=allowances,
                bonus=bonus,
                overtime_hours=overtime_hours,
            ),
            basic_salary=basic_salary,
            allowances=allowances,
            bonus=bonus,
            overtime_hours=overtime_hours,
            overtime_pay=round_money(overtime_pay),
            gross_pay=round_money(gross_pay),
            ssnit_employee=round_money(ssnit.employee),
            ssnit_employer=round_money(ssnit.employer),
            taxable_income=round_money(taxable_income),
            paye=round_money(paye),
            bonus_tax=round_money(bonus_tax),
            total_deductions=round_money(total_deductions),
            net_pay=round_money(net_pay),
        )

    def process_employees(self, employees: Iterable[EmployeeInput]) -> list[PayrollResult]:
        """Calculate pay for each employee, preserving input order."""
        return [self.process_employee(employee) for employee in employees]

    def calculate_summary_totals(self, results: Sequence[PayrollResult]) -> BatchSummary:
        """Sum the rounded per-employee figures, then round each total."""
        employee_count = 0
        total_basic_salary = ZERO
        total_allowances = ZERO
        total_bonus = ZERO
        total_overtime_pay = ZERO
        total_gross_pay = ZERO
        total_ssnit_employee = ZERO
        total_ssnit_employer = ZERO
        total_paye = ZERO
        total_bonus_tax = ZERO
        total_deductions = ZERO
        total_net_pay = ZERO

        with money_context(_largest_amount(results), Decimal(len(results))):
            for result in results:
                employee_count += 1
                total_basic_salary += result.basic_salary
                total_allowances += result.allowances
                total_bonus += result.bonus
                total_overtime_pay += result.overtime_pay
                total_gross_pay += result.gross_pay
                total_ssnit_employee += result.ssnit_employee
                total_ssnit_employer += result.ssnit_employer
                total_paye += result.paye
                total_bonus_tax += result.bonus_tax
                total_deductions += result.total_deductions
                total_net_pay += result.net_pay

            total_ssnit_employee = round_money(total_ssnit_employee)
            total_ssnit_employer = round_money(total_ssnit_employer)

            return BatchSummary(
                employee_count=employee_count,
                total_basic_salary=round_money(total_basic_salary),
                total_allowances=round_money(total_allowances),
                total_bonus=round_money(total_bonus),
                total_overtime_pay=round_money(total_overtime_pay),
                total_gross_pay=round_money(total_gross_pay),
                total_ssnit_employee=total_ssnit_employee,
                total_ssnit_employer=total_ssnit_employer,
                total_ssnit=round_money(total_ssnit_employee + total_ssnit_employer),
                total_paye=round_money(total_paye),
                total_bonus_tax=round_money(total_bonus_tax),
                total_deductions=round_money(total_deductions),
                total_net_pay=round_money(total_net_pay),
            )

    def run(self, employees: Iterable[EmployeeInput]) -> PayrollRunResult:
        """Process a batch and summarize it."""
        results = self.process_employees(employees)
        summary = self.calculate_summary_totals(results)

        logger.debug(
            "Processed payroll batch: employees=%d gross=%s net=%s",
            summary.employee_count,
            summary.total_gross_pay,
            summary.total_net_pay,
        )
        return PayrollRunResult(results=results, summary=summary)


_default_engine = PayrollEngine()


def process_employee(employee: EmployeeInput) -> PayrollResult:
    """Calculate pay for a single employee."""
    return _default_engine.process_employee(employee)


def process_employees(employees: Iterable[EmployeeInput]) -> list[PayrollResult]:
    """Calculate pay for a batch, preserving input order."""
    return _default_engine.process_employees(employees)


def calculate_summary_totals(results: Sequence[PayrollResult]) -> BatchSummary:
    """Totals across a batch of results."""
    return _default_engine.calculate_summary_totals(results)
