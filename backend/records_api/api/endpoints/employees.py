from __future__ import annotations

from fastapi import APIRouter, Depends

from records_api.core.dependencies import get_employee_service
from records_api.models.employee import Employee, EmployeeInput, EmployeeSearch, EmployeeSearchResult
from records_api.models.envelope import ApiListResponse, ApiResponse
from records_api.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=ApiListResponse[Employee])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employees = await service.list_employees()
    return ApiListResponse[Employee](
        total_count=len(employees),
        response_message="Employee List Retrieved.",
        response_data=employees,
    )


@router.post("/search", response_model=ApiResponse[list[EmployeeSearchResult]])
async def search_employees(
    criteria: EmployeeSearch,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    results = await service.search_employees(criteria)
    return ApiResponse[list[EmployeeSearchResult]](
        response_message="employee search.",
        response_data=results,
    )


@router.get("/{employee_id}", response_model=ApiResponse[Employee])
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await service.get_employee(employee_id)
    return ApiResponse[Employee](response_message="Employee found.", response_data=employee)


@router.post("", response_model=ApiResponse[Employee])
async def create_employee(
    payload: EmployeeInput,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await service.create_employee(payload)
    return ApiResponse[Employee](
        response_message="Employee Created Successfully.",
        response_data=employee,
    )


@router.put("/{employee_id}", response_model=ApiResponse[Employee])
async def update_employee(
    employee_id: str,
    payload: EmployeeInput,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await service.update_employee(employee_id, payload)
    return ApiResponse[Employee](
        response_message="Employee Updated Successfully.",
        response_data=employee,
    )


@router.delete("/{employee_id}", response_model=ApiResponse[dict])
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    await service.delete_employee(employee_id)
    return ApiResponse[dict](response_message="Employee deleted successfully.", response_data={})
