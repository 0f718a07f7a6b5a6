"""Input validation for employee records and company settings.

The calculation engine never calls these checks. Callers gate the
"process" path on an empty issue list and may skip validation when only
previewing figures.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Sequence

from ghana_payroll.calculators.tax_calculator import InvalidAmountError, to_decimal
from ghana_payroll.calculators.types import Amount, EmployeeInput

TIN_PATTERN = re.compile(r"^P\d{10}$")  # P + 10 digits
SSNIT_PATTERN = re.compile(r"^C\d{11}$")  # C + 11 digits
PHONE_PATTERN = re.compile(r"^0\d{9}$")  # Local mobile number
PAYROLL_MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found in a batch. Row 0 is company settings."""

    row: int
    field: str
    message: str


@dataclass(frozen=True)
class CompanySettings:
    """Employer details attached to a payroll batch."""

    company_name: str | None = None
    company_tin: str | None = None
    company_ssnit: str | None = None
    company_address: str | None = None
    payroll_month: str | None = None  # YYYY-MM


def validate_tin(tin: str | None) -> bool:
    """Check TIN format, e.g. ``P0012345678``."""
    if not tin:
        return False
    return TIN_PATTERN.match(tin.strip()) is not None


def validate_ssnit(ssnit_number: str | None) -> bool:
    """Check SSNIT number format, e.g. ``C00123456789``."""
    if not ssnit_number:
        return False
    return SSNIT_PATTERN.match(ssnit_number.strip()) is not None


def validate_phone(phone: str | None) -> bool:
    """Check a mobile number. Blank is valid since the field is optional."""
    if not phone or not phone.strip():
        return True
    return PHONE_PATTERN.match(phone.strip()) is not None


def _is_blank(value: Amount | None) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_amount(value: Amount, field: str) -> Decimal | None:
    """Return the amount, or None if it is not a usable number."""
    try:
        return to_decimal(value, field)
    except InvalidAmountError:
        return None


def validate_employee(employee: EmployeeInput, row: int) -> list[ValidationIssue]:
    """Check required fields and formats for one employee record."""
    issues: list[ValidationIssue] = []

    def add(field: str, message: str) -> None:
        issues.append(ValidationIssue(row=row, field=field, message=message))

    if not employee.employee_name or not employee.employee_name.strip():
        add("employee_name", "Employee name is required")

    if not employee.tin:
        add("tin", "TIN is required")
    elif not validate_tin(employee.tin):
        add("tin", "Invalid TIN format (must be P followed by 10 digits)")

    if not employee.ssnit_number:
        add("ssnit_number", "SSNIT number is required")
    elif not validate_ssnit(employee.ssnit_number):
        add("ssnit_number", "Invalid SSNIT number (must be C followed by 11 digits)")

    if _is_blank(employee.basic_salary):
        add("basic_salary", "Basic salary is required")
    else:
        basic_salary = _parse_amount(employee.basic_salary, "basic_salary")
        if basic_salary is None:
            add("basic_salary", "Basic salary must be a valid number")
        elif basic_salary <= 0:
            add("basic_salary", "Basic salary must be a positive number")

    if not _is_blank(employee.allowances):
        allowances = _parse_amount(employee.allowances, "allowances")
        if allowances is None:
            add("allowances", "Allowances must be a valid number")
        elif allowances < 0:
            add("allowances", "Allowances cannot be negative")

    if employee.mobile_money and not validate_phone(employee.mobile_money):
        add("mobile_money", "Invalid phone number format (must be 10 digits starting with 0)")

    return issues


def validate_employees(employees: Sequence[EmployeeInput]) -> list[ValidationIssue]:
    """Validate every record; rows are numbered from 1."""
    issues: list[ValidationIssue] = []
    for index, employee in enumerate(employees):
        issues.extend(validate_employee(employee, index + 1))
    return issues


def _check_duplicates(
    employees: Sequence[EmployeeInput],
    key: Callable[[EmployeeInput], str | None],
    field: str,
    label: str,
) -> list[ValidationIssue]:
    rows_by_value: dict[str, list[int]] = defaultdict(list)
    for index, employee in enumerate(employees):
        value = key(employee)
        if value:
            rows_by_value[value.strip()].append(index + 1)

    issues: list[ValidationIssue] = []
    for value, rows in rows_by_value.items():
        if len(rows) < 2:
            continue
        plural = "s" if len(rows) > 2 else ""
        for row in rows:
            others = ", ".join(str(r) for r in rows if r != row)
            issues.append(
                ValidationIssue(
                    row=row,
                    field=field,
                    message=f"Duplicate {label}: {value} (also appears in row{plural} {others})",
                )
            )
    return issues


def check_duplicate_tins(employees: Sequence[EmployeeInput]) -> list[ValidationIssue]:
    """Flag every row whose TIN appears on another row."""
    return _check_duplicates(employees, lambda e: e.tin, "tin", "TIN")


def check_duplicate_ssnit(employees: Sequence[EmployeeInput]) -> list[ValidationIssue]:
    """Flag every row whose SSNIT number appears on another row."""
    return _check_duplicates(employees, lambda e: e.ssnit_number, "ssnit_number", "SSNIT number")


def validate_batch(employees: Sequence[EmployeeInput]) -> list[ValidationIssue]:
    """Row checks followed by duplicate TIN and SSNIT checks."""
    return [
        *validate_employees(employees),
        *check_duplicate_tins(employees),
        *check_duplicate_ssnit(employees),
    ]


def validate_company_settings(settings: CompanySettings) -> list[ValidationIssue]:
    """Check the employer details reported against row 0."""
    issues: list[ValidationIssue] = []

    def add(field: str, message: str) -> None:
        issues.append(ValidationIssue(row=0, field=field, message=message))

    if not settings.company_name or not settings.company_name.strip():
        add("company_name", "Company name is required")

    if not settings.company_tin:
        add("company_tin", "Company TIN is required")
    elif not validate_tin(settings.company_tin):
        add("company_tin", "Invalid company TIN format")

    if not settings.company_ssnit:
        add("company_ssnit", "Company SSNIT employer number is required")
    elif not validate_ssnit(settings.company_ssnit):
        add("company_ssnit", "Invalid SSNIT employer number format")

    if not settings.payroll_month:
        add("payroll_month", "Payroll month is required")
    elif not PAYROLL_MONTH_PATTERN.match(settings.payroll_month):
        add("payroll_month", "Payroll month must be in YYYY-MM format")

    return issues


def generate_employee_id(index: int) -> str:
    """Sequential ID for a 0-based row index: 0 -> EMP001."""
    return f"EMP{index + 1:03d}"
