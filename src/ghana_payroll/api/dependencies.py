"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from ghana_payroll.api.schemas import PayrollBatchRequest
from ghana_payroll.calculators import PayrollEngine
from ghana_payroll.config import Settings, get_settings


def get_engine() -> PayrollEngine:
    """Get a payroll engine. Engines are stateless."""
    return PayrollEngine()


SettingsDep = Annotated[Settings, Depends(get_settings)]
EngineDep = Annotated[PayrollEngine, Depends(get_engine)]


def check_batch_size(payload: PayrollBatchRequest, settings: SettingsDep) -> PayrollBatchRequest:
    """Reject batches above the configured limit."""
    if len(payload.employees) > settings.max_batch_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Batch exceeds {settings.max_batch_size} employees",
        )
    return payload


# Type aliases for cleaner dependency injection
BatchPayload = Annotated[PayrollBatchRequest, Depends(check_batch_size)]
