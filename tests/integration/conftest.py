"""Fixtures for API integration tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ghana_payroll.api.app import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


KOFI = {
    "employee_name": "Kofi Mensah",
    "employee_id": "EMP001",
    "tin": "P0012345678",
    "ssnit_number": "C00123456789",
    "basic_salary": 5000,
    "allowances": 500,
    "bank_name": "GCB Bank",
    "account_number": "1234567890",
}

AMA = {
    "employee_name": "Ama Owusu",
    "employee_id": "EMP002",
    "tin": "P0098765432",
    "ssnit_number": "C00987654321",
    "basic_salary": 4000,
    "allowances": 300,
}

COMPANY = {
    "company_name": "Accra Traders Ltd",
    "company_tin": "P0000000001",
    "company_ssnit": "C00000000001",
    "payroll_month": "2026-01",
}
