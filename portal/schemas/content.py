"""Content and search API schemas."""

from datetime import datetime

from pydantic import Field

from portal.application.dtos.query import SearchQuery
from portal.application.dtos.results import Page, SearchPage
from portal.domain.entities import ContentItemEntity
from portal.schemas.common import CamelModel, PaginationMetaResponse
from portal.schemas.user import UserResponse
from portal.shared.enums import ContentType, SortKey, SortOrder


class ContentItemResponse(CamelModel):
    """Content item with its embedded author."""

    id: str
    title: str
    content: str
    author: UserResponse
    created_at: datetime
    updated_at: datetime
    tags: list[str]
    type: ContentType


class ContentListResponse(CamelModel):
    """Paginated content listing."""

    success: bool = True
    data: list[ContentItemResponse]
    meta: PaginationMetaResponse

    @classmethod
    def from_page(cls, page: Page[ContentItemEntity]) -> "ContentListResponse":
        return cls(
            data=[ContentItemResponse.model_validate(item) for item in page.items],
            meta=PaginationMetaResponse.from_meta(page.meta),
        )


class HighlightsResponse(CamelModel):
    """Matched snippets; fields that did not match are omitted."""

    title: list[str] | None = None
    content: list[str] | None = None
    tags: list[str] | None = None


class SearchResultResponse(CamelModel):
    """Search hit: the item, its relevance score and highlights."""

    item: ContentItemResponse
    score: int = Field(..., ge=0)
    highlights: HighlightsResponse | None = None


class SearchQueryEcho(CamelModel):
    """The parsed search query, echoed back to the caller."""

    q: str | None = None
    type: str | None = None
    tags: list[str] | None = None
    author: str | None = None
    department: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    page: int
    limit: int
    sort_by: SortKey
    sort_order: SortOrder

    @classmethod
    def from_query(cls, query: SearchQuery) -> "SearchQueryEcho":
        return cls(
            q=query.q,
            type=query.type,
            tags=list(query.tags) if query.tags else None,
            author=query.author,
            department=query.department,
            date_from=query.date_from,
            date_to=query.date_to,
            page=query.page_request.page,
            limit=query.page_request.limit,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )


class SearchResponse(CamelModel):
    """Paginated search results plus the echoed query and execution time (ms)."""

    success: bool = True
    data: list[SearchResultResponse]
    meta: PaginationMetaResponse
    query: SearchQueryEcho
    execution_time: float = Field(..., ge=0)

    @classmethod
    def from_search_page(cls, result: SearchPage) -> "SearchResponse":
        return cls(
            data=[SearchResultResponse.model_validate(hit) for hit in result.page.items],
            meta=PaginationMetaResponse.from_meta(result.page.meta),
            query=SearchQueryEcho.from_query(result.query),
            execution_time=result.execution_time_ms,
        )
