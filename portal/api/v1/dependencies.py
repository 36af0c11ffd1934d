"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the entity store, validated pagination and
application use cases. Routes depend only on these dependencies, never on
infrastructure directly. Tests swap the store with
app.dependency_overrides[get_entity_store].
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query

from portal.application.dtos.query import PageRequest
from portal.application.interfaces.repositories import IEntityStore
from portal.application.services.query_validator import validate_pagination
from portal.application.use_cases import (
    GetDepartmentSummaryUseCase,
    GetTagSummaryUseCase,
    ListContentUseCase,
    ListUsersUseCase,
    SearchContentUseCase,
)
from portal.core.config import get_settings
from portal.infrastructure.store import InMemoryEntityStore, load_entity_store


@lru_cache
def _load_store(seed_path: str | None) -> InMemoryEntityStore:
    """One immutable store per seed path for the life of the process."""
    return load_entity_store(seed_path)


def get_entity_store() -> IEntityStore:
    """Resident entity store (loaded on first use, then shared read-only)."""
    return _load_store(get_settings().seed_data_path)


def get_page_request(
    page: Annotated[str | None, Query(description="Page number (>= 1)")] = None,
    limit: Annotated[str | None, Query(description="Page size (1-100)")] = None,
) -> PageRequest:
    """Validated pagination; raises INVALID_PAGE / INVALID_LIMIT before any work."""
    settings = get_settings()
    return validate_pagination(
        page,
        limit,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )


def get_list_content_use_case(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
) -> ListContentUseCase:
    return ListContentUseCase(store)


def get_search_content_use_case(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
) -> SearchContentUseCase:
    return SearchContentUseCase(store)


def get_list_users_use_case(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
) -> ListUsersUseCase:
    return ListUsersUseCase(store)


def get_department_summary_use_case(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
) -> GetDepartmentSummaryUseCase:
    return GetDepartmentSummaryUseCase(store)


def get_tag_summary_use_case(
    store: Annotated[IEntityStore, Depends(get_entity_store)],
) -> GetTagSummaryUseCase:
    return GetTagSummaryUseCase(store)
