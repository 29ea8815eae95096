from __future__ import annotations

from pydantic import BaseModel


class DepartmentInput(BaseModel):
    dept_name: str | None = None


class Department(BaseModel):
    dept_id: int
    dept_name: str
    dept_status: int = 1
