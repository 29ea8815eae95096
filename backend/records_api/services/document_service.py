"""Document attachments: upload, replace and remove files owned by an employee.

The owning employee must exist for uploads and deletes. Reads and updates
address a document by (employee id, document id) and report a missing
document when the pair does not match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from records_api.core.exceptions import NotFoundError
from records_api.models.document import EmployeeDocument
from records_api.services.file_storage import LocalFileStorage
from records_api.services.identifiers import next_document_id
from records_api.services.record_store import RecordStore
from records_api.services.validation import (
    parse_document_id,
    require_document_key,
    require_employee_id,
    validate_document_update,
    validate_document_upload,
    validate_upload_size,
)

logger = logging.getLogger(__name__)


@dataclass
class UploadedImage:
    filename: str | None
    content: bytes


class DocumentService:
    def __init__(
        self,
        store: RecordStore,
        storage: LocalFileStorage,
        max_upload_size: int,
    ) -> None:
        self.store = store
        self.storage = storage
        self.max_upload_size = max_upload_size

    async def list_documents(self, employee_id: str) -> list[EmployeeDocument]:
        employee_id = require_employee_id(employee_id)
        records = await self.store.list_documents(employee_id)
        return [EmployeeDocument.model_validate(r) for r in records]

    async def get_document(self, employee_id: str, document_id: str) -> EmployeeDocument:
        employee_id, doc_id = require_document_key(employee_id, document_id)
        record = await self.store.get_document(employee_id, doc_id)
        if record is None:
            raise NotFoundError("Document not found")
        return EmployeeDocument.model_validate(record)

    async def upload_document(
        self,
        employee_id: str,
        doc_name: str | None,
        image: UploadedImage | None,
    ) -> EmployeeDocument:
        validate_document_upload(employee_id, doc_name, image.filename if image else None)
        validate_upload_size(len(image.content), self.max_upload_size)

        employee_id = employee_id.strip()
        await self._require_employee(employee_id)

        stored_name = await self.storage.save(image.filename, image.content)
        try:
            document = EmployeeDocument(
                document_id=await next_document_id(self.store),
                doc_emp_id=employee_id,
                doc_name=doc_name,
                doc_image=stored_name,
            )
            saved = await self.store.insert_document(document.model_dump())
        except Exception:
            await self.storage.delete(stored_name)
            raise

        logger.info("Document %s added for employee %s", document.document_id, employee_id)
        return EmployeeDocument.model_validate(saved)

    async def update_document(
        self,
        employee_id: str,
        document_id: str,
        doc_name: str | None,
        image: UploadedImage | None,
    ) -> EmployeeDocument:
        validate_document_update(employee_id, document_id, doc_name)
        employee_id = employee_id.strip()
        doc_id = parse_document_id(document_id)
        if image is not None:
            validate_upload_size(len(image.content), self.max_upload_size)

        if await self.store.get_document(employee_id, doc_id) is None:
            raise NotFoundError("Document not found")

        fields: dict[str, str] = {"doc_name": doc_name}
        if image is not None:
            fields["doc_image"] = await self.storage.save(image.filename, image.content)

        try:
            updated = await self.store.update_document(employee_id, doc_id, fields)
            if updated is None:
                raise NotFoundError("Document not found")
        except Exception:
            # The new image has no record pointing at it.
            if "doc_image" in fields:
                await self.storage.delete(fields["doc_image"])
            raise

        logger.info("Document %s updated for employee %s", doc_id, employee_id)
        return EmployeeDocument.model_validate(updated)

    async def delete_document(self, employee_id: str, document_id: str) -> None:
        employee_id, doc_id = require_document_key(employee_id, document_id)
        await self._require_employee(employee_id)

        if not await self.store.delete_document(employee_id, doc_id):
            raise NotFoundError("Document not found")
        logger.info("Document %s deleted for employee %s", doc_id, employee_id)

    async def _require_employee(self, employee_id: str) -> None:
        if await self.store.get_employee(employee_id) is None:
            raise NotFoundError("Employee not found.")
