"""Shared API schemas: camelCase base model, pagination meta, error envelope."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portal.application.dtos.results import PaginationMeta


class CamelModel(BaseModel):
    """Base for response bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMetaResponse(CamelModel):
    """Pagination block (page, limit, total, totalPages, hasNext, hasPrev)."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_next: bool
    has_prev: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationMetaResponse":
        return cls.model_validate(meta)


class ErrorDetail(BaseModel):
    """Error body: human-readable message plus machine-readable code."""

    message: str
    code: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Envelope returned for every 4xx/5xx response."""

    success: bool = False
    error: ErrorDetail
