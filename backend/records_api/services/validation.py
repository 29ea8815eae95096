"""Request checks run before any collaborator is touched.

Each function raises ``ValidationError`` on the first failing check, so a
request reports exactly one problem.
"""

from __future__ import annotations

from records_api.core.exceptions import ValidationError
from records_api.models.department import DepartmentInput
from records_api.models.employee import EmployeeInput

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 50

_EMPLOYEE_MANDATORY = ("emp_first_name", "emp_last_name", "emp_dob", "emp_designation")
_EMPLOYEE_BOUNDED = ("emp_first_name", "emp_last_name", "emp_designation")


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_length(field: str, value: str) -> None:
    if not MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH:
        raise ValidationError(f"Invalid field length: {field}")


def validate_employee(payload: EmployeeInput) -> None:
    if any(_is_blank(getattr(payload, field)) for field in _EMPLOYEE_MANDATORY):
        raise ValidationError("Mandatory fields are missing")

    for field in _EMPLOYEE_BOUNDED:
        _check_length(field, getattr(payload, field))


def validate_department(payload: DepartmentInput) -> None:
    if _is_blank(payload.dept_name):
        raise ValidationError("Department name is required.")
    _check_length("dept_name", payload.dept_name)


def require_employee_id(employee_id: str | None) -> str:
    if _is_blank(employee_id):
        raise ValidationError("Employee ID is required.")
    return employee_id.strip()


def require_document_key(employee_id: str | None, document_id: str | None) -> tuple[str, int]:
    if _is_blank(employee_id) or _is_blank(document_id):
        raise ValidationError("Employee ID and Document ID are required.")
    return employee_id.strip(), parse_document_id(document_id)


def parse_document_id(document_id: str) -> int:
    try:
        return int(document_id)
    except ValueError as err:
        raise ValidationError(f"Invalid document ID: {document_id}") from err


def validate_document_upload(
    employee_id: str | None,
    doc_name: str | None,
    filename: str | None,
) -> None:
    if _is_blank(employee_id) or _is_blank(doc_name) or _is_blank(filename):
        raise ValidationError("Employee ID, document name, and image are required.")


def validate_document_update(
    employee_id: str | None,
    document_id: str | None,
    doc_name: str | None,
) -> None:
    if _is_blank(employee_id) or _is_blank(document_id) or _is_blank(doc_name):
        raise ValidationError("Employee ID, document ID, and name are required.")


def validate_upload_size(size: int, limit: int) -> None:
    if size > limit:
        raise ValidationError(f"File too large: {size} bytes. Maximum: {limit} bytes")
