"""Employee records and the request bodies that create, update and search them."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _number_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return value


class EmployeeInput(BaseModel):
    """Body of POST /employees and PUT /employees/{id}.

    Every field is optional at the parsing stage; required fields and length
    bounds are checked by the validation module so that a request reports
    exactly one error.
    """

    emp_first_name: str | None = None
    emp_last_name: str | None = None
    emp_dob: str | None = None
    emp_dept_id: str | None = None
    emp_salary: int | float | None = None
    emp_designation: str | None = None
    emp_status: int | None = None

    @field_validator("emp_dept_id", mode="before")
    @classmethod
    def coerce_dept_id(cls, value: Any) -> Any:
        return _number_to_str(value)


class Employee(BaseModel):
    """Stored employee record, serialized with ``_id`` as the identifier."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    emp_first_name: str
    emp_last_name: str
    emp_dob: str
    emp_dept_id: str | None = None
    emp_salary: int | float | None = None
    emp_designation: str
    emp_status: int | None = None


class EmployeeSearchResult(BaseModel):
    """Employee as returned by search: same fields, identifier stripped."""

    emp_first_name: str
    emp_last_name: str
    emp_dob: str
    emp_dept_id: str | None = None
    emp_salary: int | float | None = None
    emp_designation: str
    emp_status: int | None = None


class EmployeeSearch(BaseModel):
    emp_first_name: str | None = None
    emp_dept_id: str | None = None
    emp_salary: int | float | None = None
    emp_designation: str | None = None

    @field_validator("emp_dept_id", mode="before")
    @classmethod
    def coerce_dept_id(cls, value: Any) -> Any:
        return _number_to_str(value)

    def supplied_filters(self) -> dict[str, Any]:
        """Return only the filters that take part in the query.

        ``None`` and empty strings count as absent.
        """
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None and value != ""
        }
