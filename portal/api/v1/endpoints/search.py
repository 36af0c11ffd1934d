"""Search API: relevance-scored free-text search over content."""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portal.api.v1.dependencies import get_page_request, get_search_content_use_case
from portal.application.dtos.query import PageRequest, SearchQuery
from portal.application.services.filters import parse_tags_csv
from portal.application.services.sorting import resolve_sort_key
from portal.application.use_cases import SearchContentUseCase
from portal.schemas.content import SearchResponse
from portal.shared.enums import SEARCH_SORT_KEYS, ContentType, SortKey, SortOrder

TYPE_DESCRIPTION = " | ".join(ContentType.values())

router = APIRouter()


@router.get("", response_model=SearchResponse, response_model_exclude_none=True)
def search_content(
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    use_case: Annotated[SearchContentUseCase, Depends(get_search_content_use_case)],
    q: str | None = Query(None, description="Free-text query"),
    type: str | None = Query(None, description=TYPE_DESCRIPTION),
    author: str | None = Query(None),
    department: str | None = Query(None, description="Author department (exact, case-insensitive)"),
    tags: str | None = Query(None),
    date_from: str | None = Query(None, alias="dateFrom"),
    date_to: str | None = Query(None, alias="dateTo"),
    sort_by: str | None = Query(
        None, alias="sortBy", description="relevance | createdAt | updatedAt | title"
    ),
    sort_order: str | None = Query(None, alias="sortOrder"),
):
    """Search content. Without q every filtered item is returned with score 1."""
    started_at = time.perf_counter()
    query = SearchQuery(
        page_request=page_request,
        q=q or None,
        type=type or None,
        author=author or None,
        department=department or None,
        tags=parse_tags_csv(tags),
        date_from=date_from or None,
        date_to=date_to or None,
        sort_by=resolve_sort_key(sort_by, SEARCH_SORT_KEYS, SortKey.RELEVANCE),
        sort_order=SortOrder.parse(sort_order, SortOrder.DESC),
    )
    return SearchResponse.from_search_page(use_case.execute(query, started_at=started_at))
