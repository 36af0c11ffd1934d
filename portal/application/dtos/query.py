"""DTOs for parsed query parameters (one per endpoint).

Built per request by the endpoint after pagination has been validated;
discarded once the response is produced.
"""

from dataclasses import dataclass

from portal.shared.enums import SortKey, SortOrder


@dataclass(frozen=True)
class PageRequest:
    """Validated pagination parameters (page >= 1, 1 <= limit <= max)."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ContentQuery:
    """Filters, sort and pagination for listing content."""

    page_request: PageRequest
    type: str | None = None
    author: str | None = None
    tags: tuple[str, ...] | None = None
    date_from: str | None = None
    date_to: str | None = None
    sort_by: SortKey = SortKey.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class SearchQuery(ContentQuery):
    """Content query plus free text and author department (search endpoint)."""

    q: str | None = None
    department: str | None = None
    sort_by: SortKey = SortKey.RELEVANCE


@dataclass(frozen=True)
class UserQuery:
    """Filters, sort and pagination for the user directory."""

    page_request: PageRequest
    department: str | None = None
    search: str | None = None
    sort_by: SortKey = SortKey.NAME
    sort_order: SortOrder = SortOrder.ASC
