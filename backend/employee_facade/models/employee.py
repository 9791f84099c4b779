"""Employee models shared by the upstream client, the service and the API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmployeeDraft(BaseModel):
    """Employee fields submitted for creation (everything except ``id``)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., alias="employee_name", min_length=1, pattern=r"\S")
    salary: int = Field(..., alias="employee_salary", ge=0)
    age: int = Field(..., alias="employee_age", ge=0)
    title: str = Field(..., alias="employee_title", min_length=1, pattern=r"\S")
    email: str | None = Field(default=None, alias="employee_email")

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the upstream create call, using wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Employee(BaseModel):
    """An employee record as held by the upstream employee API."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str | None = Field(default=None, alias="employee_name")
    salary: int | None = Field(default=None, alias="employee_salary")
    age: int | None = Field(default=None, alias="employee_age")
    title: str | None = Field(default=None, alias="employee_title")
    email: str | None = Field(default=None, alias="employee_email")

    @field_validator("id", mode="before")
    @classmethod
    def _numeric_id_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class DeleteOutcome(str, Enum):
    DELETED = "Employee deleted successfully."
    FAILED = "Failed to delete employee."

    @property
    def message(self) -> str:
        return self.value
