"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ghana_payroll.calculators.types import EmployeeInput, LineType
from ghana_payroll.validators import CompanySettings


# ============================================================================
# Request schemas
# ============================================================================


class EmployeeIn(BaseModel):
    """Compensation inputs and pass-through details for one employee."""

    employee_name: str | None = None
    basic_salary: Decimal | None = None
    allowances: Decimal | None = None
    bonus: Decimal | None = None
    overtime_hours: Decimal | None = None

    employee_id: str | None = None
    tin: str | None = None
    ssnit_number: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    mobile_money: str | None = None

    def to_input(self) -> EmployeeInput:
        return EmployeeInput(**self.model_dump())


class CompanySettingsIn(BaseModel):
    """Employer details for a payroll batch."""

    company_name: str | None = None
    company_tin: str | None = None
    company_ssnit: str | None = None
    company_address: str | None = None
    payroll_month: str | None = Field(default=None, examples=["2026-01"])

    def to_settings(self) -> CompanySettings:
        return CompanySettings(**self.model_dump())


class PayrollBatchRequest(BaseModel):
    """A batch of employees for one pay period."""

    employees: list[EmployeeIn]
    company: CompanySettingsIn | None = None


# ============================================================================
# Response schemas
# ============================================================================


class ValidationIssueOut(BaseModel):
    """A validation problem. Row 0 refers to company settings."""

    model_config = ConfigDict(from_attributes=True)

    row: int
    field: str
    message: str


class ValidateResponse(BaseModel):
    valid: bool
    errors: list[ValidationIssueOut]


class PayrollResultOut(BaseModel):
    """Calculated figures for one employee, with pass-through details."""

    employee_name: str | None = None
    employee_id: str | None = None
    tin: str | None = None
    ssnit_number: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    mobile_money: str | None = None

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


class BatchSummaryOut(BaseModel):
    """Totals across a batch."""

    model_config = ConfigDict(from_attributes=True)

    employee_count: int
    total_basic_salary: Decimal
    total_allowances: Decimal
    total_bonus: Decimal
    total_overtime_pay: Decimal
    total_gross_pay: Decimal
    total_ssnit_employee: Decimal
    total_ssnit_employer: Decimal
    total_ssnit: Decimal
    total_paye: Decimal
    total_bonus_tax: Decimal
    total_deductions: Decimal
    total_net_pay: Decimal


class ProcessResponse(BaseModel):
    """Results in input order plus batch totals."""

    results: list[PayrollResultOut]
    summary: BatchSummaryOut
    payroll_month: str | None = None


class PreviewResponse(ProcessResponse):
    """Preview results; errors are informational only."""

    errors: list[ValidationIssueOut] = []


class PayslipLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    line_type: LineType
    code: str
    description: str
    amount: Decimal
    quantity: Decimal | None = None
    rate: Decimal | None = None


class PayslipResponse(BaseModel):
    """One employee's result broken into payslip lines."""

    result: PayrollResultOut
    lines: list[PayslipLineOut]


class TaxBracketOut(BaseModel):
    width: Decimal | None = Field(description="Income covered by the tier; null if unbounded")
    rate: Decimal
    rate_display: str


class ConstantsResponse(BaseModel):
    """Statutory rates, for display by clients."""

    tax_brackets: list[TaxBracketOut]
    ssnit_employee_rate: Decimal
    ssnit_employer_rate: Decimal
    bonus_tax_rate: Decimal
    standard_monthly_hours: Decimal
    overtime_multiplier: Decimal
    currency: str


class ProcessRejection(BaseModel):
    """Why a batch was refused for processing."""

    message: str
    errors: list[ValidationIssueOut]


class ProcessRejectedResponse(BaseModel):
    """422 body returned by the process endpoint."""

    detail: ProcessRejection


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
    code: str | None = None
