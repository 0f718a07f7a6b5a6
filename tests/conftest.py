"""Pytest fixtures for payroll engine tests."""

from __future__ import annotations

import pytest

from ghana_payroll.calculators import EmployeeInput, PayrollEngine


@pytest.fixture
def engine() -> PayrollEngine:
    return PayrollEngine()


@pytest.fixture
def kofi() -> EmployeeInput:
    """Reference employee: basic 5,000 and allowances 500."""
    return EmployeeInput(
        employee_name="Kofi Mensah",
        employee_id="EMP001",
        tin="P0012345678",
        ssnit_number="C00123456789",
        basic_salary=5000,
        allowances=500,
    )


@pytest.fixture
def kofi_with_extras() -> EmployeeInput:
    """Reference employee with a bonus and ten overtime hours."""
    return EmployeeInput(
        employee_name="Kofi Mensah",
        employee_id="EMP001",
        tin="P0012345678",
        ssnit_number="C00123456789",
        basic_salary=5000,
        allowances=500,
        bonus=1000,
        overtime_hours=10,
    )


@pytest.fixture
def ama() -> EmployeeInput:
    return EmployeeInput(
        employee_name="Ama Owusu",
        employee_id="EMP002",
        tin="P0098765432",
        ssnit_number="C00987654321",
        basic_salary=4000,
        allowances=300,
    )
