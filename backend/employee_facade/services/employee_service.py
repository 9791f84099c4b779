"""Employee aggregation service built on the upstream employee API."""

from __future__ import annotations

import logging

from employee_facade.models.employee import DeleteOutcome, Employee, EmployeeDraft
from employee_facade.services.employee_client import EmployeeApiClient

logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10


class EmployeeService:
    def __init__(self, client: EmployeeApiClient) -> None:
        self.client = client

    async def list_all(self) -> list[Employee]:
        return await self.client.fetch_all()

    async def search_by_name(self, query: str) -> list[Employee]:
        needle = query.casefold()
        employees = await self.client.fetch_all()
        return [e for e in employees if needle in (e.name or "").casefold()]

    async def get_by_id(self, employee_id: str) -> Employee | None:
        return await self.client.fetch_by_id(employee_id)

    async def highest_salary(self) -> int:
        """Highest salary in the collection, or 0 when there is nothing to compare.

        Records without a salary are skipped.
        """
        salaries = [e.salary for e in await self.client.fetch_all() if e.salary is not None]
        return max(salaries, default=0)

    async def top_ten_earner_names(self) -> list[str]:
        """Names of the highest earners, best paid first.

        Records without a salary or a name are skipped.

        ``sorted`` is stable, so employees with equal salaries keep the order
        the upstream API returned them in.
        """
        employees = await self.client.fetch_all()
        paid = [e for e in employees if e.salary is not None and e.name is not None]
        if len(paid) < len(employees):
            logger.debug("Skipping %d employees without salary or name", len(employees) - len(paid))
        ranked = sorted(paid, key=lambda e: e.salary, reverse=True)
        return [e.name for e in ranked[:TOP_EARNERS_LIMIT]]

    async def create(self, draft: EmployeeDraft) -> Employee | None:
        employee = await self.client.create(draft)
        if employee is None:
            logger.info("Employee creation failed for name=%s", draft.name)
        return employee

    async def delete_by_id(self, employee_id: str) -> DeleteOutcome:
        return await self.client.delete_by_id(employee_id)
