"""
Common response models and utilities.

Response envelope, paginated envelope and error schemas shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base schema for request bodies; string fields are trimmed before validation."""

    model_config = ConfigDict(str_strip_whitespace=True)


class ApiResponse(CamelModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    message: str | None = None
    data: T | None = None


class ListResponse(ApiResponse[list[T]], Generic[T]):
    """Envelope for unpaginated listings."""

    count: int = Field(description="Items in ``data``")


class PaginatedResponse(ListResponse[T], Generic[T]):
    """Envelope for paginated listings."""

    total: int = Field(description="Items matching the filters")
    page: int
    pages: int


class FieldError(CamelModel):
    """One request validation failure."""

    field: str
    message: str
    type: str


class ErrorResponse(CamelModel):
    """Error response schema."""

    success: bool = False
    message: str = Field(description="Error message")
    errors: list[FieldError] | None = None
    data: dict[str, Any] | None = Field(default=None, description="Context the client can act on")
    error: str | None = Field(default=None, description="Exception text (development only)")
    stack: str | None = Field(default=None, description="Stack trace (development only)")


class DeletedData(CamelModel):
    """Identifier of a deleted record."""

    id: UUID
