from __future__ import annotations

from fastapi import APIRouter, Depends

from employee_facade.core.config import settings
from employee_facade.core.dependencies import get_employee_client
from employee_facade.services.employee_client import EmployeeApiClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    client: EmployeeApiClient = Depends(get_employee_client),  # noqa: B008
):
    services: dict[str, str] = {}

    ok = await client.check_connection()
    services["upstream"] = "ok" if ok else "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
