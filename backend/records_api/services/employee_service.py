"""Employee operations: validate, assign ids, persist, shape records."""

from __future__ import annotations

import logging

from records_api.core.exceptions import NotFoundError
from records_api.models.employee import Employee, EmployeeInput, EmployeeSearch, EmployeeSearchResult
from records_api.services.identifiers import next_employee_id
from records_api.services.record_store import RecordStore
from records_api.services.validation import require_employee_id, validate_employee

logger = logging.getLogger(__name__)

ACTIVE_STATUS = 1


class EmployeeService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def list_employees(self) -> list[Employee]:
        records = await self.store.list_employees()
        return [Employee.model_validate(r) for r in records]

    async def get_employee(self, employee_id: str) -> Employee:
        employee_id = require_employee_id(employee_id)
        record = await self.store.get_employee(employee_id)
        if record is None:
            raise NotFoundError("Employee not found.")
        return Employee.model_validate(record)

    async def create_employee(self, payload: EmployeeInput) -> Employee:
        validate_employee(payload)

        record = payload.model_dump(exclude={"emp_status"}, exclude_none=True)
        record["_id"] = await next_employee_id(self.store)
        record["emp_status"] = ACTIVE_STATUS

        saved = await self.store.insert_employee(record)
        logger.info("Employee %s created", saved["_id"])
        return Employee.model_validate(saved)

    async def update_employee(self, employee_id: str, payload: EmployeeInput) -> Employee:
        employee_id = require_employee_id(employee_id)
        validate_employee(payload)

        # Fields left out of the body keep their stored value.
        fields = payload.model_dump(exclude_unset=True)
        updated = await self.store.update_employee(employee_id, fields)
        if updated is None:
            raise NotFoundError("Employee not found")

        logger.info("Employee %s updated", employee_id)
        return Employee.model_validate(updated)

    async def delete_employee(self, employee_id: str) -> None:
        employee_id = require_employee_id(employee_id)
        if not await self.store.delete_employee(employee_id):
            raise NotFoundError("Employee not found.")
        logger.info("Employee %s deleted", employee_id)

    async def search_employees(self, criteria: EmployeeSearch) -> list[EmployeeSearchResult]:
        records = await self.store.search_employees(criteria)
        if not records:
            raise NotFoundError("No employees found")
        logger.info("Employee search matched %d records", len(records))
        return [EmployeeSearchResult.model_validate(r) for r in records]
