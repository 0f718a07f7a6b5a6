"""API routes."""

from ghana_payroll.api.routes.payroll import router as payroll_router
from ghana_payroll.api.routes.health import router as health_router

__all__ = ["payroll_router", "health_router"]
