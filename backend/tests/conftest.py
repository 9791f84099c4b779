from __future__ import annotations

from itertools import count

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from employee_facade.core.dependencies import get_employee_client, get_employee_service
from employee_facade.main import app
from employee_facade.models.employee import DeleteOutcome, Employee, EmployeeDraft
from employee_facade.services.employee_service import EmployeeService


class FakeEmployeeApi:
    """In-memory stand-in for EmployeeApiClient that keeps created records."""

    def __init__(self, employees: list[Employee] | None = None, *, healthy: bool = True) -> None:
        self.employees: list[Employee] = list(employees or [])
        self.healthy = healthy
        self.fetch_all_calls = 0
        self._ids = count(1)

    async def fetch_all(self) -> list[Employee]:
        self.fetch_all_calls += 1
        return list(self.employees)

    async def fetch_by_id(self, employee_id: str) -> Employee | None:
        return next((e for e in self.employees if e.id == employee_id), None)

    async def create(self, draft: EmployeeDraft) -> Employee | None:
        employee = Employee(id=f"emp-{next(self._ids)}", **draft.model_dump())
        self.employees.append(employee)
        return employee

    async def delete_by_id(self, employee_id: str) -> DeleteOutcome:
        self.employees = [e for e in self.employees if e.id != employee_id]
        return DeleteOutcome.DELETED

    async def check_connection(self) -> bool:
        return self.healthy


def make_employees(*rows: tuple[str, int | None]) -> list[Employee]:
    return [
        Employee(
            id=str(i),
            name=name,
            salary=salary,
            age=30,
            title="Engineer",
            email=f"{name.lower()}@example.com",
        )
        for i, (name, salary) in enumerate(rows, start=1)
    ]


@pytest.fixture
def fake_api():
    return FakeEmployeeApi(make_employees(("John", 50000), ("Jane", 60000), ("Bob", 55000)))


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fake_client(fake_api):
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(fake_api)
    app.dependency_overrides[get_employee_client] = lambda: fake_api
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(fake_api):
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(fake_api)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
