"""Stable multi-key sorting for content, search results and users.

Sorting uses key functions with sorted(); Python's sort is stable in both
directions, so items with equal keys keep their original collection order
whether the order is ascending or descending. No secondary key is added.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from portal.application.dtos.results import SearchResult
from portal.domain.entities import ContentItemEntity, UserEntity
from portal.shared.enums import (
    CONTENT_SORT_KEYS,
    SEARCH_SORT_KEYS,
    USER_SORT_KEYS,
    SortKey,
    SortOrder,
)
from portal.shared.utils import collation_key

T = TypeVar("T")

_CONTENT_KEY_FUNCS: dict[SortKey, Callable[[ContentItemEntity], Any]] = {
    SortKey.CREATED_AT: lambda item: item.created_at,
    SortKey.UPDATED_AT: lambda item: item.updated_at,
    SortKey.TITLE: lambda item: collation_key(item.title),
}

_USER_KEY_FUNCS: dict[SortKey, Callable[[UserEntity], Any]] = {
    SortKey.NAME: lambda user: collation_key(user.name),
    SortKey.EMAIL: lambda user: collation_key(user.email),
    SortKey.DEPARTMENT: lambda user: collation_key(user.department or ""),
}


def resolve_sort_key(raw: str | None, allowed: frozenset[SortKey], default: SortKey) -> SortKey:
    """Return the requested key if the endpoint supports it, else the endpoint default."""
    if raw:
        for key in allowed:
            if key.value == raw:
                return key
    return default


def stable_sort(items: Iterable[T], key: Callable[[T], Any], order: SortOrder) -> list[T]:
    return sorted(items, key=key, reverse=order is SortOrder.DESC)


def sort_content(
    items: Iterable[ContentItemEntity], sort_by: SortKey, order: SortOrder
) -> list[ContentItemEntity]:
    if sort_by not in CONTENT_SORT_KEYS:
        raise ValueError(f"Unsupported content sort key: {sort_by.value}")
    return stable_sort(items, _CONTENT_KEY_FUNCS[sort_by], order)


def sort_search_results(
    results: Iterable[SearchResult], sort_by: SortKey, order: SortOrder
) -> list[SearchResult]:
    if sort_by not in SEARCH_SORT_KEYS:
        raise ValueError(f"Unsupported search sort key: {sort_by.value}")
    if sort_by is SortKey.RELEVANCE:
        return stable_sort(results, lambda r: r.score, order)
    item_key = _CONTENT_KEY_FUNCS[sort_by]
    return stable_sort(results, lambda r: item_key(r.item), order)


def sort_users(users: Iterable[UserEntity], sort_by: SortKey, order: SortOrder) -> list[UserEntity]:
    if sort_by not in USER_SORT_KEYS:
        raise ValueError(f"Unsupported user sort key: {sort_by.value}")
    return stable_sort(users, _USER_KEY_FUNCS[sort_by], order)
