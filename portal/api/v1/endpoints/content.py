"""Content API: filtered, sorted, paginated listing of intranet content."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portal.api.v1.dependencies import get_list_content_use_case, get_page_request
from portal.application.dtos.query import ContentQuery, PageRequest
from portal.application.services.filters import parse_tags_csv
from portal.application.services.sorting import resolve_sort_key
from portal.application.use_cases import ListContentUseCase
from portal.schemas.content import ContentListResponse
from portal.shared.enums import CONTENT_SORT_KEYS, ContentType, SortKey, SortOrder

TYPE_DESCRIPTION = " | ".join(ContentType.values())

router = APIRouter()


@router.get("", response_model=ContentListResponse, response_model_exclude_none=True)
def list_content(
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    use_case: Annotated[ListContentUseCase, Depends(get_list_content_use_case)],
    type: str | None = Query(None, description=TYPE_DESCRIPTION),
    author: str | None = Query(None, description="Substring of author name or email"),
    tags: str | None = Query(None, description="Comma-separated; any tag substring matches"),
    date_from: str | None = Query(None, alias="dateFrom"),
    date_to: str | None = Query(None, alias="dateTo"),
    sort_by: str | None = Query(None, alias="sortBy", description="createdAt | updatedAt | title"),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc | desc"),
):
    """List content (default: newest first)."""
    query = ContentQuery(
        page_request=page_request,
        type=type or None,
        author=author or None,
        tags=parse_tags_csv(tags),
        date_from=date_from or None,
        date_to=date_to or None,
        sort_by=resolve_sort_key(sort_by, CONTENT_SORT_KEYS, SortKey.CREATED_AT),
        sort_order=SortOrder.parse(sort_order, SortOrder.DESC),
    )
    return ContentListResponse.from_page(use_case.execute(query))
