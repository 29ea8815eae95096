from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile

from records_api.core.dependencies import get_document_service
from records_api.models.document import EmployeeDocument
from records_api.models.envelope import ApiListResponse, ApiResponse, MessageResponse
from records_api.services.document_service import DocumentService, UploadedImage

router = APIRouter(prefix="/employees", tags=["documents"])


async def _read_upload(file: UploadFile | None) -> UploadedImage | None:
    if file is None or not file.filename:
        return None
    return UploadedImage(filename=file.filename, content=await file.read())


@router.get("/{employee_id}/documents", response_model=ApiListResponse[EmployeeDocument])
async def list_documents(
    employee_id: str,
    service: DocumentService = Depends(get_document_service),  # noqa: B008
):
    documents = await service.list_documents(employee_id)
    return ApiListResponse[EmployeeDocument](
        total_count=len(documents),
        response_message="Document List Retrieved.",
        response_data=documents,
    )


@router.get("/{employee_id}/documents/{document_id}", response_model=ApiResponse[EmployeeDocument])
async def get_document(
    employee_id: str,
    document_id: str,
    service: DocumentService = Depends(get_document_service),  # noqa: B008
):
    document = await service.get_document(employee_id, document_id)
    return ApiResponse[EmployeeDocument](
        response_message="Document Retrieved Successfully.",
        response_data=document,
    )


@router.post("/{employee_id}/documents", response_model=ApiResponse[EmployeeDocument])
async def upload_document(
    employee_id: str,
    doc_name: str | None = Form(None),  # noqa: B008
    doc_image: UploadFile | None = File(None),  # noqa: B008
    service: DocumentService = Depends(get_document_service),  # noqa: B008
):
    image = await _read_upload(doc_image)
    document = await service.upload_document(employee_id, doc_name, image)
    return ApiResponse[EmployeeDocument](
        response_message="Document Added Successfully.",
        response_data=document,
    )


@router.put("/{employee_id}/documents/{document_id}", response_model=ApiResponse[EmployeeDocument])
async def update_document(
    employee_id: str,
    document_id: str,
    doc_name: str | None = Form(None),  # noqa: B008
    doc_image: UploadFile | None = File(None),  # noqa: B008
    service: DocumentService = Depends(get_document_service),  # noqa: B008
):
    image = await _read_upload(doc_image)
    document = await service.update_document(employee_id, document_id, doc_name, image)
    return ApiResponse[EmployeeDocument](
        response_message="Document updated successfully",
        response_data=document,
    )


@router.delete("/{employee_id}/documents/{document_id}", response_model=MessageResponse)
async def delete_document(
    employee_id: str,
    document_id: str,
    service: DocumentService = Depends(get_document_service),  # noqa: B008
):
    await service.delete_document(employee_id, document_id)
    return MessageResponse(message="Document deleted successfully")
