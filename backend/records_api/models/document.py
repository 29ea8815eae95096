"""Document attachments owned by an employee."""

from __future__ import annotations

from pydantic import BaseModel


class EmployeeDocument(BaseModel):
    document_id: int
    doc_emp_id: str
    doc_name: str
    doc_image: str
