"""Response envelopes shared by the project and season services."""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, model_serializer

ItemT = TypeVar("ItemT")


class PaginationParams(BaseModel):
    """Page/limit pair requested by list endpoints."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class PaginatedResponse(BaseModel, Generic[ItemT]):
    page: int
    limit: int
    total: int
    next: str
    prev: Optional[str] = None
    items: List[ItemT]


class SuccessResponse(BaseModel):
    """Either ``{"result": ...}`` or ``{"message": ...}``."""

    result: Optional[Any] = None
    message: Optional[str] = None

    @model_serializer(mode="wrap")
    def _drop_empty_keys(self, handler):  # type: ignore[no-untyped-def]
        # Only the envelope keys; None values inside ``result`` are kept
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}
