from __future__ import annotations

from fastapi import HTTPException, Request, status

from employee_facade.services.employee_client import EmployeeApiClient
from employee_facade.services.employee_service import EmployeeService


def get_employee_client(request: Request) -> EmployeeApiClient:
    client: EmployeeApiClient | None = getattr(request.app.state, "employee_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee API client not initialized",
        )
    return client


def get_employee_service(request: Request) -> EmployeeService:
    service: EmployeeService | None = getattr(request.app.state, "employee_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee service not initialized",
        )
    return service
