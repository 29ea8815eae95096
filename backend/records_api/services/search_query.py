"""Employee search: supplied filters become one conjunctive query.

The same filter set drives two back ends. ``build_search_query`` renders a
parameterized Cosmos DB SQL statement and ``matches_search`` evaluates the
filters against a plain record for the in-memory store. Keep them in step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from records_api.models.employee import EmployeeSearch

SORT_FIELD = "emp_first_name"

# Filters compared as case-insensitive substrings; everything else is exact.
_SUBSTRING_FILTERS = ("emp_first_name", "emp_designation")
_EXACT_FILTERS = ("emp_dept_id", "emp_salary")


@dataclass
class SearchQuery:
    query: str
    parameters: list[dict[str, Any]] = field(default_factory=list)


def build_search_query(criteria: EmployeeSearch) -> SearchQuery:
    supplied = criteria.supplied_filters()
    clauses: list[str] = []
    parameters: list[dict[str, Any]] = []

    for name in _SUBSTRING_FILTERS:
        if name in supplied:
            clauses.append(f"CONTAINS(c.{name}, @{name}, true)")
            parameters.append({"name": f"@{name}", "value": supplied[name]})

    for name in _EXACT_FILTERS:
        if name in supplied:
            clauses.append(f"c.{name} = @{name}")
            parameters.append({"name": f"@{name}", "value": supplied[name]})

    query = "SELECT * FROM c"
    if clauses:
        query += " WHERE " + " AND ".join(clauses)
    query += f" ORDER BY c.{SORT_FIELD} ASC"
    return SearchQuery(query=query, parameters=parameters)


def matches_search(criteria: EmployeeSearch, record: dict[str, Any]) -> bool:
    supplied = criteria.supplied_filters()

    for name in _SUBSTRING_FILTERS:
        if name in supplied:
            value = record.get(name)
            if not isinstance(value, str) or supplied[name].lower() not in value.lower():
                return False

    for name in _EXACT_FILTERS:
        if name in supplied and record.get(name) != supplied[name]:
            return False

    return True


def sort_key(record: dict[str, Any]) -> str:
    return record.get(SORT_FIELD) or ""
