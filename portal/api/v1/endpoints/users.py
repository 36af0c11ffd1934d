"""User API: paginated directory with department and name/email filters."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portal.api.v1.dependencies import get_list_users_use_case, get_page_request
from portal.application.dtos.query import PageRequest, UserQuery
from portal.application.services.sorting import resolve_sort_key
from portal.application.use_cases import ListUsersUseCase
from portal.schemas.user import UserListResponse
from portal.shared.enums import USER_SORT_KEYS, SortKey, SortOrder

router = APIRouter()


@router.get("", response_model=UserListResponse, response_model_exclude_none=True)
def list_users(
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    use_case: Annotated[ListUsersUseCase, Depends(get_list_users_use_case)],
    department: str | None = Query(None),
    search: str | None = Query(None, description="Substring of name or email"),
    sort_by: str | None = Query(None, alias="sortBy", description="name | email | department"),
    sort_order: str | None = Query(None, alias="sortOrder"),
):
    """List users (default: name ascending)."""
    query = UserQuery(
        page_request=page_request,
        department=department or None,
        search=search or None,
        sort_by=resolve_sort_key(sort_by, USER_SORT_KEYS, SortKey.NAME),
        sort_order=SortOrder.parse(sort_order, SortOrder.ASC),
    )
    return UserListResponse.from_page(use_case.execute(query))
