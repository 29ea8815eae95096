"""Success envelope shared by most endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")

SUCCESS_CODE = 1


class ApiResponse(BaseModel, Generic[DataT]):
    model_config = ConfigDict(populate_by_name=True)

    response_code: int = Field(default=SUCCESS_CODE, alias="responseCode")
    response_message: str = Field(alias="responseMessage")
    response_data: DataT = Field(alias="responseData")


class ApiListResponse(BaseModel, Generic[DataT]):
    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(alias="totalCount")
    response_code: int = Field(default=SUCCESS_CODE, alias="responseCode")
    response_message: str = Field(alias="responseMessage")
    response_data: list[DataT] = Field(alias="responseData")


class MessageResponse(BaseModel):
    message: str
