"""
Response envelopes shared by every resource.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageEnvelope(BaseModel, Generic[T]):
    """Canonical list response for players, coaches and schedule."""

    success: bool = True
    data: List[T] = Field(default_factory=list)
    totalData: int = Field(0, example=23)
    currentPage: int = Field(1, example=1)
    pageSize: int = Field(10, example=10)
    totalPages: int = Field(0, example=3)


class MessageResponse(BaseModel):
    message: str = Field(..., example="Pemain berhasil dihapus")


class UpdateResponse(BaseModel, Generic[T]):
    """Result of an update; ``data`` is empty when no row matched the id."""

    message: str
    data: List[T] = Field(default_factory=list)
