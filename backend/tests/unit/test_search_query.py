from __future__ import annotations

from records_api.models.employee import EmployeeSearch
from records_api.services.search_query import build_search_query, matches_search

ANNA = {"emp_first_name": "Anna", "emp_dept_id": "2", "emp_salary": 5000, "emp_designation": "Senior Engineer"}
SUSAN = {"emp_first_name": "Susan", "emp_dept_id": "1", "emp_salary": 4000, "emp_designation": "Manager"}
BOB = {"emp_first_name": "Bob", "emp_dept_id": "2", "emp_salary": 4000, "emp_designation": "Engineer"}


def test_no_filters_selects_everything_sorted():
    search = build_search_query(EmployeeSearch())
    assert search.query == "SELECT * FROM c ORDER BY c.emp_first_name ASC"
    assert search.parameters == []


def test_empty_strings_are_left_out():
    search = build_search_query(EmployeeSearch(emp_first_name="", emp_designation=""))
    assert "WHERE" not in search.query
    assert search.parameters == []


def test_all_filters_form_a_conjunction():
    criteria = EmployeeSearch(
        emp_first_name="an",
        emp_dept_id="2",
        emp_salary=5000,
        emp_designation="eng",
    )
    search = build_search_query(criteria)

    assert search.query == (
        "SELECT * FROM c WHERE CONTAINS(c.emp_first_name, @emp_first_name, true)"
        " AND CONTAINS(c.emp_designation, @emp_designation, true)"
        " AND c.emp_dept_id = @emp_dept_id"
        " AND c.emp_salary = @emp_salary"
        " ORDER BY c.emp_first_name ASC"
    )
    assert {"name": "@emp_salary", "value": 5000} in search.parameters
    assert len(search.parameters) == 4


def test_numeric_department_filter_is_compared_as_string():
    criteria = EmployeeSearch(emp_dept_id=2)
    assert criteria.emp_dept_id == "2"
    assert build_search_query(criteria).parameters == [{"name": "@emp_dept_id", "value": "2"}]


def test_zero_salary_is_a_real_filter():
    search = build_search_query(EmployeeSearch(emp_salary=0))
    assert "c.emp_salary = @emp_salary" in search.query


def test_first_name_matches_substring_case_insensitively():
    criteria = EmployeeSearch(emp_first_name="an")
    assert matches_search(criteria, ANNA)
    assert matches_search(criteria, SUSAN)
    assert not matches_search(criteria, BOB)


def test_exact_filters():
    criteria = EmployeeSearch(emp_dept_id="2", emp_salary=4000)
    assert matches_search(criteria, BOB)
    assert not matches_search(criteria, ANNA)
    assert not matches_search(criteria, SUSAN)


def test_designation_substring():
    criteria = EmployeeSearch(emp_designation="ENGINEER")
    assert matches_search(criteria, ANNA)
    assert matches_search(criteria, BOB)
    assert not matches_search(criteria, SUSAN)


def test_missing_field_never_matches_substring_filter():
    assert not matches_search(EmployeeSearch(emp_designation="x"), {"emp_first_name": "Al"})
