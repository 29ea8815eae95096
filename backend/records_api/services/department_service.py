from __future__ import annotations

import logging

from records_api.models.department import Department, DepartmentInput
from records_api.services.identifiers import next_department_id
from records_api.services.record_store import RecordStore
from records_api.services.validation import validate_department

logger = logging.getLogger(__name__)

ACTIVE_STATUS = 1


class DepartmentService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_department(self, payload: DepartmentInput) -> Department:
        validate_department(payload)

        department = Department(
            dept_id=await next_department_id(self.store),
            dept_name=payload.dept_name,
            dept_status=ACTIVE_STATUS,
        )
        saved = await self.store.insert_department(department.model_dump())
        logger.info("Department %s created", department.dept_id)
        return Department.model_validate(saved)
