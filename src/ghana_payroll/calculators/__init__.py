"""Payroll calculation engine."""

from ghana_payroll.calculators.engine import (
    PayrollEngine,
    PayrollRunResult,
    calculate_summary_totals,
    process_employee,
    process_employees,
)
from ghana_payroll.calculators.line_builder import LineItemBuilder
from ghana_payroll.calculators.tax_calculator import (
    InvalidAmountError,
    calculate_bonus_tax,
    calculate_overtime_pay,
    calculate_paye,
    calculate_ssnit,
    round_money,
)
from ghana_payroll.calculators.types import (
    BatchSummary,
    EmployeeInput,
    LineType,
    PayrollResult,
    PayslipLine,
    SSNITContribution,
    TaxBracket,
)

__all__ = [
    "PayrollEngine",
    "PayrollRunResult",
    "LineItemBuilder",
    "InvalidAmountError",
    "BatchSummary",
    "EmployeeInput",
    "LineType",
    "PayrollResult",
    "PayslipLine",
    "SSNITContribution",
    "TaxBracket",
    "calculate_bonus_tax",
    "calculate_overtime_pay",
    "calculate_paye",
    "calculate_ssnit",
    "calculate_summary_totals",
    "process_employee",
    "process_employees",
    "round_money",
]
