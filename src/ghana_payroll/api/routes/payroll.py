"""Payroll calculation endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from ghana_payroll.api.dependencies import BatchPayload, EngineDep, SettingsDep
from ghana_payroll.api.schemas import (
    BatchSummaryOut,
    ConstantsResponse,
    EmployeeIn,
    PayrollBatchRequest,
    PayrollResultOut,
    PayslipLineOut,
    PayslipResponse,
    PreviewResponse,
    ProcessRejectedResponse,
    ProcessRejection,
    ProcessResponse,
    TaxBracketOut,
    ValidateResponse,
    ValidationIssueOut,
)
from ghana_payroll.calculators import LineItemBuilder, PayrollResult, PayrollRunResult
from ghana_payroll.calculators.constants import (
    BONUS_TAX_RATE,
    OVERTIME_MULTIPLIER,
    SSNIT_EMPLOYEE_RATE,
    SSNIT_EMPLOYER_RATE,
    STANDARD_MONTHLY_HOURS,
    TAX_BRACKETS,
)
from ghana_payroll.formatting import format_employee_count, format_percentage
from ghana_payroll.validators import (
    ValidationIssue,
    validate_batch,
    validate_company_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payroll", tags=["payroll"])


def _collect_issues(payload: PayrollBatchRequest) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if payload.company is not None:
        issues.extend(validate_company_settings(payload.company.to_settings()))
    issues.extend(validate_batch([e.to_input() for e in payload.employees]))
    return issues


def _result_out(result: PayrollResult) -> PayrollResultOut:
    return PayrollResultOut.model_validate(result.to_dict())


def _run_out(run: PayrollRunResult, payload: PayrollBatchRequest) -> dict:
    return {
        "results": [_result_out(r) for r in run.results],
        "summary": BatchSummaryOut.model_validate(run.summary),
        "payroll_month": payload.company.payroll_month if payload.company else None,
    }


# ============================================================================
# Reference data
# ============================================================================


@router.get("/constants", response_model=ConstantsResponse)
async def get_constants(settings: SettingsDep) -> ConstantsResponse:
    """Statutory rates used by the engine."""
    return ConstantsResponse(
        tax_brackets=[
            TaxBracketOut(
                width=bracket.width,
                rate=bracket.rate,
                rate_display=format_percentage(bracket.rate),
            )
            for bracket in TAX_BRACKETS
        ],
        ssnit_employee_rate=SSNIT_EMPLOYEE_RATE,
        ssnit_employer_rate=SSNIT_EMPLOYER_RATE,
        bonus_tax_rate=BONUS_TAX_RATE,
        standard_monthly_hours=STANDARD_MONTHLY_HOURS,
        overtime_multiplier=OVERTIME_MULTIPLIER,
        currency=settings.currency_code,
    )


# ============================================================================
# Validation and calculation
# ============================================================================


@router.post("/validate", response_model=ValidateResponse)
async def validate_payroll(payload: BatchPayload) -> ValidateResponse:
    """Check a batch without calculating it."""
    issues = _collect_issues(payload)
    return ValidateResponse(
        valid=not issues,
        errors=[ValidationIssueOut.model_validate(i) for i in issues],
    )


@router.post("/preview", response_model=PreviewResponse)
async def preview_payroll(payload: BatchPayload, engine: EngineDep) -> PreviewResponse:
    """Calculate a batch as entered, reporting any validation issues alongside."""
    issues = _collect_issues(payload)
    run = engine.run(e.to_input() for e in payload.employees)
    return PreviewResponse(
        **_run_out(run, payload),
        errors=[ValidationIssueOut.model_validate(i) for i in issues],
    )


@router.post(
    "/process",
    response_model=ProcessResponse,
    responses={422: {"model": ProcessRejectedResponse}},
)
async def process_payroll(payload: BatchPayload, engine: EngineDep) -> ProcessResponse:
    """Calculate a batch only if it passes validation."""
    issues = _collect_issues(payload)
    if issues:
        logger.info(
            "Rejected payroll batch of %s: %d validation errors",
            format_employee_count(len(payload.employees)),
            len(issues),
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=ProcessRejection(
                message=f"Cannot process: {len(issues)} validation errors found.",
                errors=[ValidationIssueOut.model_validate(i) for i in issues],
            ).model_dump(),
        )

    run = engine.run(e.to_input() for e in payload.employees)
    return ProcessResponse(**_run_out(run, payload))


@router.post("/payslip", response_model=PayslipResponse)
async def payslip(employee: EmployeeIn, engine: EngineDep) -> PayslipResponse:
    """Calculate one employee and break the result into payslip lines."""
    result = engine.process_employee(employee.to_input())
    return PayslipResponse(
        result=_result_out(result),
        lines=[PayslipLineOut.model_validate(line) for line in LineItemBuilder.build_lines(result)],
    )
