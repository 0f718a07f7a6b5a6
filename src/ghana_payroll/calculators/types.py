"""Type definitions for calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

# Raw amounts may arrive as spreadsheet cells or JSON numbers.
Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0")


class LineType(str, Enum):
    """Payslip line item types."""

    EARNING = "EARNING"
    DEDUCTION = "DEDUCTION"
    EMPLOYER_CONTRIBUTION = "EMPLOYER_CONTRIBUTION"


@dataclass(frozen=True)
class TaxBracket:
    """One tier of the progressive PAYE schedule.

    ``width`` is the span of income the tier covers, applied incrementally
    after the tiers before it. ``None`` means the tier is unbounded.
    """

    width: Decimal | None
    rate: Decimal


@dataclass(frozen=True)
class EmployeeInput:
    """Compensation inputs for one employee and one pay period.

    Identity and banking fields are carried through to the result
    unchanged; the engine never looks at them.
    """

    employee_name: str | None = None
    basic_salary: Amount | None = None
    allowances: Amount | None = None
    bonus: Amount | None = None
    overtime_hours: Amount | None = None

    employee_id: str | None = None
    tin: str | None = None
    ssnit_number: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    mobile_money: str | None = None


@dataclass(frozen=True)
class SSNITContribution:
    """Social security split, each part rounded to 2 places."""

    employee: Decimal = ZERO
    employer: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class PayrollResult:
    """Calculated payroll figures for one employee."""

    employee: EmployeeInput  # Pass-through with compensation defaults applied
    basic_salary: Decimal
    allowances: Decimal
    bonus: Decimal
    overtime_hours: Decimal

    overtime_pay: Decimal
    gross_pay: Decimal
    ssnit_employee: Decimal
    ssnit_employer: Decimal
    taxable_income: Decimal
    paye: Decimal
    bonus_tax: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    def to_dict(self) -> dict[str, Any]:
        """Flatten identity fields and figures into one record."""
        return {
            "employee_name": self.employee.employee_name,
            "employee_id": self.employee.employee_id,
            "tin": self.employee.tin,
            "ssnit_number": self.employee.ssnit_number,
            "bank_name": self.employee.bank_name,
            "account_number": self.employee.account_number,
            "mobile_money": self.employee.mobile_money,
            "basic_salary": self.basic_salary,
            "allowances": self.allowances,
            "bonus": self.bonus,
            "overtime_hours": self.overtime_hours,
            "overtime_pay": self.overtime_pay,
            "gross_pay": self.gross_pay,
            "ssnit_employee": self.ssnit_employee,
            "ssnit_employer": self.ssnit_employer,
            "taxable_income": self.taxable_income,
            "paye": self.paye,
            "bonus_tax": self.bonus_tax,
            "total_deductions": self.total_deductions,
            "net_pay": self.net_pay,
        }


@dataclass(frozen=True)
class BatchSummary:
    """Totals across a batch of payroll results."""

    employee_count: int = 0
    total_basic_salary: Decimal = ZERO
    total_allowances: Decimal = ZERO
    total_bonus: Decimal = ZERO
    total_overtime_pay: Decimal = ZERO
    total_gross_pay: Decimal = ZERO
    total_ssnit_employee: Decimal = ZERO
    total_ssnit_employer: Decimal = ZERO
    total_ssnit: Decimal = ZERO
    total_paye: Decimal = ZERO
    total_bonus_tax: Decimal = ZERO
    total_deductions: Decimal = ZERO
    total_net_pay: Decimal = ZERO


@dataclass(frozen=True)
class PayslipLine:
    """A signed line on an employee payslip."""

    line_type: LineType
    code: str
    description: str
    amount: Decimal  # Signed per LineType conventions
    quantity: Decimal | None = None
    rate: Decimal | None = None
