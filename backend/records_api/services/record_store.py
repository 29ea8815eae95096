"""Persistence collaborator interface and the process-local implementation."""

from __future__ import annotations

import asyncio
import copy
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from records_api.models.employee import EmployeeSearch
from records_api.services.search_query import matches_search, sort_key

Record = dict[str, Any]
SequenceFloor = Callable[[], Awaitable[int]]


class RecordStore(ABC):
    """Holds employees, departments and employee documents.

    Records cross this boundary as plain dicts in their API shape (employees
    keyed by ``_id``). Each call is atomic on its own; nothing spans calls.
    """

    backend_name: str = ""

    async def close(self) -> None:
        return None

    async def check_connection(self) -> bool:
        return True

    @abstractmethod
    async def list_employees(self) -> list[Record]: ...

    @abstractmethod
    async def get_employee(self, employee_id: str) -> Record | None: ...

    @abstractmethod
    async def insert_employee(self, record: Record) -> Record: ...

    @abstractmethod
    async def update_employee(self, employee_id: str, fields: Record) -> Record | None: ...

    @abstractmethod
    async def delete_employee(self, employee_id: str) -> bool: ...

    @abstractmethod
    async def search_employees(self, criteria: EmployeeSearch) -> list[Record]: ...

    @abstractmethod
    async def max_employee_id(self) -> int: ...

    @abstractmethod
    async def insert_department(self, record: Record) -> Record: ...

    @abstractmethod
    async def max_department_id(self) -> int: ...

    @abstractmethod
    async def list_documents(self, employee_id: str) -> list[Record]: ...

    @abstractmethod
    async def get_document(self, employee_id: str, document_id: int) -> Record | None: ...

    @abstractmethod
    async def insert_document(self, record: Record) -> Record: ...

    @abstractmethod
    async def update_document(
        self, employee_id: str, document_id: int, fields: Record
    ) -> Record | None: ...

    @abstractmethod
    async def delete_document(self, employee_id: str, document_id: int) -> bool: ...

    @abstractmethod
    async def max_document_id(self) -> int: ...

    @abstractmethod
    async def next_sequence(self, name: str, floor: SequenceFloor) -> int:
        """Atomically advance the named sequence and return the new value.

        A sequence that does not exist yet starts from ``await floor()``.
        """


def _numeric_ids(values: list[Any]) -> list[int]:
    ids: list[int] = []
    for value in values:
        try:
            ids.append(int(value))
        except (TypeError, ValueError):
            continue
    return ids


class InMemoryRecordStore(RecordStore):
    backend_name = "in_memory"

    def __init__(self) -> None:
        self.employees: dict[str, Record] = {}
        self.departments: dict[int, Record] = {}
        self.documents: dict[int, Record] = {}
        self.sequences: dict[str, int] = {}
        self._sequence_lock = asyncio.Lock()

    async def list_employees(self) -> list[Record]:
        return [copy.deepcopy(r) for r in self.employees.values()]

    async def get_employee(self, employee_id: str) -> Record | None:
        record = self.employees.get(employee_id)
        return copy.deepcopy(record) if record is not None else None

    async def insert_employee(self, record: Record) -> Record:
        self.employees[record["_id"]] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def update_employee(self, employee_id: str, fields: Record) -> Record | None:
        record = self.employees.get(employee_id)
        if record is None:
            return None
        record.update(fields)
        return copy.deepcopy(record)

    async def delete_employee(self, employee_id: str) -> bool:
        return self.employees.pop(employee_id, None) is not None

    async def search_employees(self, criteria: EmployeeSearch) -> list[Record]:
        matches = [r for r in self.employees.values() if matches_search(criteria, r)]
        return [copy.deepcopy(r) for r in sorted(matches, key=sort_key)]

    async def max_employee_id(self) -> int:
        return max(_numeric_ids(list(self.employees)), default=0)

    async def insert_department(self, record: Record) -> Record:
        self.departments[record["dept_id"]] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def max_department_id(self) -> int:
        return max(self.departments, default=0)

    async def list_documents(self, employee_id: str) -> list[Record]:
        return [copy.deepcopy(r) for r in self.documents.values() if r["doc_emp_id"] == employee_id]

    async def get_document(self, employee_id: str, document_id: int) -> Record | None:
        record = self._find_document(employee_id, document_id)
        return copy.deepcopy(record) if record is not None else None

    async def insert_document(self, record: Record) -> Record:
        self.documents[record["document_id"]] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def update_document(
        self, employee_id: str, document_id: int, fields: Record
    ) -> Record | None:
        record = self._find_document(employee_id, document_id)
        if record is None:
            return None
        record.update(fields)
        return copy.deepcopy(record)

    async def delete_document(self, employee_id: str, document_id: int) -> bool:
        if self._find_document(employee_id, document_id) is None:
            return False
        del self.documents[document_id]
        return True

    async def max_document_id(self) -> int:
        return max(self.documents, default=0)

    async def next_sequence(self, name: str, floor: SequenceFloor) -> int:
        async with self._sequence_lock:
            if name not in self.sequences:
                self.sequences[name] = await floor()
            self.sequences[name] += 1
            return self.sequences[name]

    def _find_document(self, employee_id: str, document_id: int) -> Record | None:
        record = self.documents.get(document_id)
        if record is None or record["doc_emp_id"] != employee_id:
            return None
        return record
