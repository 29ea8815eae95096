from __future__ import annotations

from fastapi import Depends, Request

from records_api.core.config import settings
from records_api.services.department_service import DepartmentService
from records_api.services.document_service import DocumentService
from records_api.services.employee_service import EmployeeService
from records_api.services.file_storage import LocalFileStorage
from records_api.services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_file_storage(request: Request) -> LocalFileStorage:
    return request.app.state.file_storage


def get_employee_service(store: RecordStore = Depends(get_store)) -> EmployeeService:  # noqa: B008
    return EmployeeService(store)


def get_department_service(store: RecordStore = Depends(get_store)) -> DepartmentService:  # noqa: B008
    return DepartmentService(store)


def get_document_service(
    store: RecordStore = Depends(get_store),  # noqa: B008
    storage: LocalFileStorage = Depends(get_file_storage),  # noqa: B008
) -> DocumentService:
    return DocumentService(store, storage, settings.MAX_UPLOAD_SIZE)
