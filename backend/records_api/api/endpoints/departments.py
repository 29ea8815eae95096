from __future__ import annotations

from fastapi import APIRouter, Depends

from records_api.core.dependencies import get_department_service
from records_api.models.department import Department, DepartmentInput
from records_api.models.envelope import ApiResponse
from records_api.services.department_service import DepartmentService

router = APIRouter(prefix="/departments", tags=["departments"])


@router.post("", response_model=ApiResponse[Department])
async def create_department(
    payload: DepartmentInput,
    service: DepartmentService = Depends(get_department_service),  # noqa: B008
):
    department = await service.create_department(payload)
    return ApiResponse[Department](
        response_message="Department Added Successfully.",
        response_data=department,
    )
