from __future__ import annotations

import pytest

from records_api.core.exceptions import ValidationError
from records_api.models.department import DepartmentInput
from records_api.models.employee import EmployeeInput
from records_api.services.validation import (
    require_document_key,
    require_employee_id,
    validate_department,
    validate_document_update,
    validate_document_upload,
    validate_employee,
    validate_upload_size,
)

VALID = {
    "emp_first_name": "Jo",
    "emp_last_name": "Lee",
    "emp_dob": "1990-01-01",
    "emp_designation": "Engineer",
}


def test_valid_employee_passes():
    validate_employee(EmployeeInput(**VALID))


@pytest.mark.parametrize("field", ["emp_first_name", "emp_last_name", "emp_dob", "emp_designation"])
def test_missing_mandatory_field(field):
    payload = EmployeeInput(**{**VALID, field: None})
    with pytest.raises(ValidationError, match="Mandatory fields are missing"):
        validate_employee(payload)


def test_empty_string_counts_as_missing():
    with pytest.raises(ValidationError, match="Mandatory fields are missing"):
        validate_employee(EmployeeInput(**{**VALID, "emp_dob": ""}))


@pytest.mark.parametrize("field", ["emp_first_name", "emp_last_name", "emp_designation"])
@pytest.mark.parametrize("value", ["J", "x" * 51])
def test_length_bounds(field, value):
    with pytest.raises(ValidationError, match=f"Invalid field length: {field}"):
        validate_employee(EmployeeInput(**{**VALID, field: value}))


def test_length_bounds_are_inclusive():
    validate_employee(EmployeeInput(**{**VALID, "emp_first_name": "x" * 50, "emp_last_name": "Li"}))


def test_first_failing_check_wins():
    payload = EmployeeInput(**{**VALID, "emp_first_name": "J", "emp_last_name": "L"})
    with pytest.raises(ValidationError) as exc_info:
        validate_employee(payload)
    assert exc_info.value.message == "Invalid field length: emp_first_name"


def test_department_name_required():
    with pytest.raises(ValidationError, match="Department name is required."):
        validate_department(DepartmentInput())


def test_department_name_length():
    with pytest.raises(ValidationError, match="Invalid field length: dept_name"):
        validate_department(DepartmentInput(dept_name="H"))


def test_require_employee_id_strips():
    assert require_employee_id(" 7 ") == "7"


def test_require_employee_id_blank():
    with pytest.raises(ValidationError, match="Employee ID is required."):
        require_employee_id("  ")


def test_require_document_key_parses_document_id():
    assert require_document_key("3", "12") == ("3", 12)


def test_require_document_key_missing():
    with pytest.raises(ValidationError, match="Employee ID and Document ID are required."):
        require_document_key("3", "")


def test_require_document_key_non_numeric():
    with pytest.raises(ValidationError, match="Invalid document ID: abc"):
        require_document_key("3", "abc")


@pytest.mark.parametrize(
    ("employee_id", "doc_name", "filename"),
    [("", "Passport", "p.png"), ("1", None, "p.png"), ("1", "Passport", None)],
)
def test_document_upload_requires_all_fields(employee_id, doc_name, filename):
    with pytest.raises(ValidationError, match="Employee ID, document name, and image are required."):
        validate_document_upload(employee_id, doc_name, filename)


def test_document_update_image_optional():
    validate_document_update("1", "2", "Passport")
    with pytest.raises(ValidationError, match="Employee ID, document ID, and name are required."):
        validate_document_update("1", "2", "")


def test_upload_size_limit():
    validate_upload_size(10, 10)
    with pytest.raises(ValidationError, match="File too large"):
        validate_upload_size(11, 10)
