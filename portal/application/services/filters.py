"""Predicate filters for content and users.

Each factory returns a pure predicate; predicates compose by logical AND
in apply_predicates(). Text comparisons go through portal.shared.utils.text
so every filter (and the relevance scorer) folds case the same way.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import TypeVar

from portal.application.dtos.query import ContentQuery, SearchQuery, UserQuery
from portal.domain.entities import ContentItemEntity, UserEntity
from portal.shared.utils import contains_ci, equals_ci, parse_datetime_lenient

T = TypeVar("T")
Predicate = Callable[[T], bool]


def parse_tags_csv(raw: str | None) -> tuple[str, ...] | None:
    """Split a comma-separated tag list, dropping empty entries. None if nothing remains."""
    if not raw:
        return None
    tags = tuple(tag for tag in raw.split(",") if tag)
    return tags or None


# ---- Content predicates ----


def by_type(content_type: str) -> Predicate[ContentItemEntity]:
    """Exact match on content type; an unknown type matches nothing."""
    return lambda item: item.type.value == content_type


def by_author(needle: str) -> Predicate[ContentItemEntity]:
    """Author name or email contains needle."""
    return lambda item: contains_ci(item.author.name, needle) or contains_ci(
        item.author.email, needle
    )


def by_author_department(department: str) -> Predicate[ContentItemEntity]:
    """Author department equals department (case-insensitive); no department never matches."""
    return lambda item: equals_ci(item.author.department, department)


def by_any_tag(tags: Sequence[str]) -> Predicate[ContentItemEntity]:
    """Any item tag contains any of the query tags."""
    return lambda item: any(
        contains_ci(item_tag, tag) for tag in tags for item_tag in item.tags
    )


def created_from(bound: datetime) -> Predicate[ContentItemEntity]:
    return lambda item: item.created_at >= bound


def created_to(bound: datetime) -> Predicate[ContentItemEntity]:
    return lambda item: item.created_at <= bound


def build_content_predicates(query: ContentQuery) -> list[Predicate[ContentItemEntity]]:
    """Return the active predicates for a content or search query.

    Unparseable date bounds are skipped rather than rejected.
    """
    predicates: list[Predicate[ContentItemEntity]] = []
    if query.type:
        predicates.append(by_type(query.type))
    if query.author:
        predicates.append(by_author(query.author))
    if isinstance(query, SearchQuery) and query.department:
        predicates.append(by_author_department(query.department))
    if query.tags:
        predicates.append(by_any_tag(query.tags))
    date_from = parse_datetime_lenient(query.date_from)
    if date_from is not None:
        predicates.append(created_from(date_from))
    date_to = parse_datetime_lenient(query.date_to)
    if date_to is not None:
        predicates.append(created_to(date_to))
    return predicates


# ---- User predicates ----


def user_in_department(department: str) -> Predicate[UserEntity]:
    return lambda user: equals_ci(user.department, department)


def user_matches(needle: str) -> Predicate[UserEntity]:
    """User name or email contains needle."""
    return lambda user: contains_ci(user.name, needle) or contains_ci(user.email, needle)


def build_user_predicates(query: UserQuery) -> list[Predicate[UserEntity]]:
    predicates: list[Predicate[UserEntity]] = []
    if query.department:
        predicates.append(user_in_department(query.department))
    if query.search:
        predicates.append(user_matches(query.search))
    return predicates


def apply_predicates(items: Iterable[T], predicates: Sequence[Predicate[T]]) -> list[T]:
    """Keep items accepted by every predicate, preserving input order."""
    return [item for item in items if all(p(item) for p in predicates)]
