"""Common response wrapper schemas for API responses."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from lexiboard.domain.catalog.exceptions import ErrorType

T = TypeVar("T")


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool = True
    message: str


class DataResponse(BaseModel, Generic[T]):
    """Success envelope carrying a payload."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Failure envelope shared by every endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str
    type: ErrorType
    field: str | None = None
    details: Any = None
    existing_id: str | None = Field(default=None, alias="existingId")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[T]
    total: int
    page: int
    total_pages: int = Field(alias="totalPages")
