"""Cosmos DB record store.

Every container is expected to be partitioned on ``/id``. Employees keep
their API identifier in the item ``id``; departments and documents use the
stringified numeric id. Counters for the id sequences live in their own
container, one item per sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from azure.cosmos import exceptions
from azure.cosmos.aio import CosmosClient

from records_api.core.config import Settings
from records_api.core.exceptions import PersistenceError
from records_api.models.employee import EmployeeSearch
from records_api.services.record_store import Record, RecordStore, SequenceFloor
from records_api.services.search_query import build_search_query

logger = logging.getLogger(__name__)

# Server-generated properties that never leave the store
_SYSTEM_FIELDS = ("_rid", "_self", "_etag", "_attachments", "_ts")


def _persistence_error(action: str, err: exceptions.CosmosHttpResponseError) -> PersistenceError:
    logger.error("Cosmos DB %s failed: %s", action, err.message)
    return PersistenceError(err.message or str(err))


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    try:
        yield
    except exceptions.CosmosHttpResponseError as err:
        raise _persistence_error(action, err) from err


def _strip_system_fields(item: dict[str, Any]) -> Record:
    return {k: v for k, v in item.items() if k not in _SYSTEM_FIELDS}


def _employee_from_item(item: dict[str, Any]) -> Record:
    record = _strip_system_fields(item)
    record["_id"] = record.pop("id")
    return record


def _employee_to_item(record: Record) -> dict[str, Any]:
    item = {k: v for k, v in record.items() if k != "_id"}
    item["id"] = record["_id"]
    return item


def _numbered_from_item(item: dict[str, Any]) -> Record:
    record = _strip_system_fields(item)
    record.pop("id", None)
    return record


def _set_operations(fields: Record) -> list[dict[str, Any]]:
    # Only the supplied fields are written, in one server-side operation.
    return [{"op": "set", "path": f"/{name}", "value": value} for name, value in fields.items()]


class CosmosRecordStore(RecordStore):
    backend_name = "cosmos_db"

    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.employees: Any = None
        self.departments: Any = None
        self.documents: Any = None
        self.counters: Any = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        self.client = CosmosClient(settings.COSMOS_DB_ENDPOINT, settings.COSMOS_DB_KEY)
        db = self.client.get_database_client(settings.COSMOS_DB_DATABASE)
        self.employees = db.get_container_client(settings.COSMOS_DB_EMPLOYEES_CONTAINER)
        self.departments = db.get_container_client(settings.COSMOS_DB_DEPARTMENTS_CONTAINER)
        self.documents = db.get_container_client(settings.COSMOS_DB_DOCUMENTS_CONTAINER)
        self.counters = db.get_container_client(settings.COSMOS_DB_COUNTERS_CONTAINER)
        self.initialized = True
        logger.info("CosmosRecordStore initialized (database=%s)", settings.COSMOS_DB_DATABASE)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
        self.client = None
        self.employees = None
        self.departments = None
        self.documents = None
        self.counters = None
        self.initialized = False

    async def check_connection(self) -> bool:
        if not self.employees:
            return False
        try:
            await self._query(self.employees, "SELECT VALUE COUNT(1) FROM c")
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

    async def _query(
        self,
        container: Any,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[Any]:
        items: list[Any] = []
        with _translate_errors("query"):
            async for item in container.query_items(
                query=query,
                parameters=parameters or [],
                enable_cross_partition_query=True,
            ):
                items.append(item)
        return items

    async def _max_value(self, container: Any, query: str) -> int:
        values = [v for v in await self._query(container, query) if v is not None]
        return int(values[0]) if values else 0

    async def list_employees(self) -> list[Record]:
        items = await self._query(self.employees, "SELECT * FROM c")
        return [_employee_from_item(i) for i in items]

    async def get_employee(self, employee_id: str) -> Record | None:
        try:
            item = await self.employees.read_item(item=employee_id, partition_key=employee_id)
        except exceptions.CosmosResourceNotFoundError:
            return None
        except exceptions.CosmosHttpResponseError as err:
            raise _persistence_error("read employee", err) from err
        return _employee_from_item(item)

    async def insert_employee(self, record: Record) -> Record:
        with _translate_errors("create employee"):
            item = await self.employees.create_item(body=_employee_to_item(record))
        return _employee_from_item(item)

    async def update_employee(self, employee_id: str, fields: Record) -> Record | None:
        if not fields:
            return await self.get_employee(employee_id)
        try:
            item = await self.employees.patch_item(
                item=employee_id, partition_key=employee_id, patch_operations=_set_operations(fields)
            )
        except exceptions.CosmosResourceNotFoundError:
            return None
        except exceptions.CosmosHttpResponseError as err:
            raise _persistence_error("patch employee", err) from err
        return _employee_from_item(item)

    async def delete_employee(self, employee_id: str) -> bool:
        try:
            await self.employees.delete_item(item=employee_id, partition_key=employee_id)
        except exceptions.CosmosResourceNotFoundError:
            return False
        except exceptions.CosmosHttpResponseError as err:
            raise _persistence_error("delete employee", err) from err
        return True

    async def search_employees(self, criteria: EmployeeSearch) -> list[Record]:
        search = build_search_query(criteria)
        items = await self._query(self.employees, search.query, search.parameters)
        return [_employee_from_item(i) for i in items]

    async def max_employee_id(self) -> int:
        return await self._max_value(
            self.employees, "SELECT VALUE MAX(StringToNumber(c.id)) FROM c"
        )

    async def insert_department(self, record: Record) -> Record:
        body = {**record, "id": str(record["dept_id"])}
        with _translate_errors("create department"):
            item = await self.departments.create_item(body=body)
        return _numbered_from_item(item)

    async def max_department_id(self) -> int:
        return await self._max_value(
            self.departments, "SELECT TOP 1 VALUE c.dept_id FROM c ORDER BY c.dept_id DESC"
        )

    async def list_documents(self, employee_id: str) -> list[Record]:
        items = await self._query(
            self.documents,
            "SELECT * FROM c WHERE c.doc_emp_id = @employee_id",
            [{"name": "@employee_id", "value": employee_id}],
        )
        return [_numbered_from_item(i) for i in items]

    async def _find_document_item(self, employee_id: str, document_id: int) -> dict[str, Any] | None:
        items = await self._query(
            self.documents,
            "SELECT * FROM c WHERE c.doc_emp_id = @employee_id AND c.document_id = @document_id",
            [
                {"name": "@employee_id", "value": employee_id},
                {"name": "@document_id", "value": document_id},
            ],
        )
        return items[0] if items else None

    async def get_document(self, employee_id: str, document_id: int) -> Record | None:
        item = await self._find_document_item(employee_id, document_id)
        return _numbered_from_item(item) if item is not None else None

    async def insert_document(self, record: Record) -> Record:
        body = {**record, "id": str(record["document_id"])}
        with _translate_errors("create document"):
            item = await self.documents.create_item(body=body)
        return _numbered_from_item(item)

    async def update_document(
        self, employee_id: str, document_id: int, fields: Record
    ) -> Record | None:
        item = await self._find_document_item(employee_id, document_id)
        if item is None:
            return None
        try:
            item = await self.documents.patch_item(
                item=item["id"], partition_key=item["id"], patch_operations=_set_operations(fields)
            )
        except exceptions.CosmosResourceNotFoundError:
            return None
        except exceptions.CosmosHttpResponseError as err:
            raise _persistence_error("patch document", err) from err
        return _numbered_from_item(item)

    async def delete_document(self, employee_id: str, document_id: int) -> bool:
        item = await self._find_document_item(employee_id, document_id)
        if item is None:
            return False
        with _translate_errors("delete document"):
            await self.documents.delete_item(item=item["id"], partition_key=item["id"])
        return True

    async def max_document_id(self) -> int:
        return await self._max_value(self.documents, "SELECT VALUE MAX(c.document_id) FROM c")

    async def next_sequence(self, name: str, floor: SequenceFloor) -> int:
        increment = [{"op": "incr", "path": "/value", "value": 1}]
        while True:
            try:
                item = await self.counters.patch_item(
                    item=name, partition_key=name, patch_operations=increment
                )
                return int(item["value"])
            except exceptions.CosmosResourceNotFoundError:
                pass
            except exceptions.CosmosHttpResponseError as err:
                raise _persistence_error(f"increment sequence {name}", err) from err

            start = await floor() + 1
            try:
                await self.counters.create_item(body={"id": name, "value": start})
            except exceptions.CosmosResourceExistsError:
                # Another request created the counter first; increment theirs.
                continue
            except exceptions.CosmosHttpResponseError as err:
                raise _persistence_error(f"create sequence {name}", err) from err
            logger.info("Sequence %s seeded at %d", name, start)
            return start
