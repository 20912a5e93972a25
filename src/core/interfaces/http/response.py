"""Standard API response models."""

from typing import Any, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.core.domain.listing import total_pages

T = TypeVar("T")


class ApiResponse[T](BaseModel):
    """Standard API response model."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool = True
    data: T | None = None
    message: str | None = None

    @classmethod
    def ok(cls, data: T = None, message: str | None = None) -> Self:
        return cls(success=True, data=data, message=message)


class Pagination(BaseModel):
    """分页元数据。"""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")


class PaginatedResponse[T](BaseModel):
    """Paginated API response model."""

    success: bool = True
    data: list[T] = Field(default_factory=list)
    pagination: Pagination

    @classmethod
    def create(
        cls,
        items: list[T],
        total: int,
        page: int,
        page_size: int,
    ) -> Self:
        return cls(
            data=items,
            pagination=Pagination(
                page=page,
                limit=page_size,
                total=total,
                total_pages=total_pages(total, page_size),
            ),
        )


class ErrorResponse(BaseModel):
    """Error response body."""

    success: bool = False
    error: dict[str, Any]

    @classmethod
    def create(
        cls,
        code: str,
        message: str,
        details: Any = None,
        fields: list[dict[str, str]] | None = None,
    ) -> Self:
        error_dict: dict[str, Any] = {"code": code, "message": message}
        if details:
            error_dict["details"] = details
        if fields:
            error_dict["fields"] = fields
        return cls(error=error_dict)
