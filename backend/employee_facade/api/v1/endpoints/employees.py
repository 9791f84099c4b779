from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from employee_facade.core.dependencies import get_employee_service
from employee_facade.models.employee import Employee, EmployeeDraft
from employee_facade.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.list_all()


@router.get("/search/{search_string}", response_model=list[Employee])
async def search_employees_by_name(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.search_by_name(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.top_ten_earner_names()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await service.get_by_id(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )
    return employee


@router.post("", response_model=Employee)
async def create_employee(
    draft: EmployeeDraft,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await service.create(draft)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Employee creation failed",
        )
    return employee


@router.delete("/{employee_id}", response_model=str)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    outcome = await service.delete_by_id(employee_id)
    logger.info("Delete employee %s: %s", employee_id, outcome.name)
    return outcome.message
