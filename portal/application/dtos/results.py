"""DTOs for query results: pages, search hits and aggregates."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from portal.application.dtos.query import SearchQuery
from portal.domain.entities import ContentItemEntity
from portal.shared.enums import TagCategory

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination block returned with every paginated list."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of an ordered collection plus its metadata."""

    items: list[T]
    meta: PaginationMeta


@dataclass(frozen=True)
class Highlights:
    """Matched snippets per field. A field is None when it did not match."""

    title: tuple[str, ...] | None = None
    content: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None


@dataclass(frozen=True)
class SearchResult:
    """A content item with its relevance score and optional highlights."""

    item: ContentItemEntity
    score: int
    highlights: Highlights | None = None


@dataclass(frozen=True)
class SearchPage:
    """Search response read-model: the page, the parsed query and timing."""

    page: Page[SearchResult]
    query: SearchQuery
    execution_time_ms: float


@dataclass(frozen=True)
class DepartmentInfo:
    """Department aggregate (recomputed per request)."""

    name: str
    user_count: int
    content_count: int


@dataclass(frozen=True)
class TagInfo:
    """Tag usage aggregate (recomputed per request); count is always > 0."""

    name: str
    count: int
    category: TagCategory
