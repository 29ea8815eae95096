"""Identifier assignment for new records.

Ids come from per-kind sequences held by the store, so a deleted record's id
is never handed out again and concurrent creates cannot read the same value.
A sequence that does not exist yet continues from the highest id already
stored, which makes an empty store start at 1.
"""

from __future__ import annotations

from records_api.services.record_store import RecordStore

EMPLOYEE_SEQUENCE = "employee"
DEPARTMENT_SEQUENCE = "department"
DOCUMENT_SEQUENCE = "employee_document"


async def next_employee_id(store: RecordStore) -> str:
    return str(await store.next_sequence(EMPLOYEE_SEQUENCE, store.max_employee_id))


async def next_department_id(store: RecordStore) -> int:
    return await store.next_sequence(DEPARTMENT_SEQUENCE, store.max_department_id)


async def next_document_id(store: RecordStore) -> int:
    return await store.next_sequence(DOCUMENT_SEQUENCE, store.max_document_id)
