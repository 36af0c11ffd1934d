"""User directory use case: filter by department or name/email, sort, paginate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal.application.dtos.query import UserQuery
from portal.application.dtos.results import Page
from portal.application.services.filters import apply_predicates, build_user_predicates
from portal.application.services.pagination import paginate
from portal.application.services.sorting import sort_users
from portal.domain.entities import UserEntity

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import IEntityStore


class ListUsersUseCase:
    """List users, alphabetically by name unless another key is requested."""

    def __init__(self, store: "IEntityStore") -> None:
        self.store = store

    def execute(self, query: UserQuery) -> Page[UserEntity]:
        users = apply_predicates(self.store.list_users(), build_user_predicates(query))
        return paginate(sort_users(users, query.sort_by, query.sort_order), query.page_request)
