"""Application DTOs: parsed queries and result read-models."""

from portal.application.dtos.query import (
    ContentQuery,
    PageRequest,
    SearchQuery,
    UserQuery,
)
from portal.application.dtos.results import (
    DepartmentInfo,
    Highlights,
    Page,
    PaginationMeta,
    SearchPage,
    SearchResult,
    TagInfo,
)

__all__ = [
    "ContentQuery",
    "PageRequest",
    "SearchQuery",
    "UserQuery",
    "DepartmentInfo",
    "Highlights",
    "Page",
    "PaginationMeta",
    "SearchPage",
    "SearchResult",
    "TagInfo",
]
