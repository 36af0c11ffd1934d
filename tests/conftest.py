"""Pytest configuration and fixtures for the intranet portal.

Uses portal.main:app for HTTP tests. The entity store is swapped per test
through app.dependency_overrides[get_entity_store]; the packaged seed data
is used when a test does not install its own store.
"""

from collections.abc import AsyncIterator, Callable, Sequence
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from portal.api.v1.dependencies import get_entity_store
from portal.domain.entities import ContentItemEntity, UserEntity
from portal.infrastructure.store import InMemoryEntityStore, load_entity_store
from portal.main import app
from portal.shared.enums import ContentType

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def make_user(
    id: str = "u1",
    name: str = "Test User",
    email: str | None = None,
    department: str | None = None,
) -> UserEntity:
    """Build a user; email defaults to a value derived from id."""
    return UserEntity(
        id=id,
        name=name,
        email=email or f"{id}@example.com",
        department=department,
    )


def make_content(
    id: str = "c1",
    title: str = "Untitled",
    content: str = "",
    author: UserEntity | None = None,
    day: int = 0,
    updated_day: int | None = None,
    tags: Sequence[str] = (),
    type: ContentType = ContentType.NEWS,
) -> ContentItemEntity:
    """Build a content item created `day` days after BASE_TIME."""
    created = BASE_TIME + timedelta(days=day)
    updated = BASE_TIME + timedelta(days=updated_day if updated_day is not None else day)
    return ContentItemEntity(
        id=id,
        title=title,
        content=content,
        author=author or make_user(),
        created_at=created,
        updated_at=updated,
        tags=tuple(tags),
        type=type,
    )


@pytest.fixture
def seed_store() -> InMemoryEntityStore:
    """Store loaded from the packaged seed data."""
    return load_entity_store()


@pytest.fixture
def use_store() -> Callable[[InMemoryEntityStore], None]:
    """Install a store for HTTP tests in this test only."""

    def install(store: InMemoryEntityStore) -> None:
        app.dependency_overrides[get_entity_store] = lambda: store

    yield install
    app.dependency_overrides.pop(get_entity_store, None)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def assert_paginated(body: dict) -> None:
    """Check the {success, data, meta} envelope shape."""
    assert body["success"] is True
    assert isinstance(body["data"], list)
    assert set(body["meta"]) == {"page", "limit", "total", "totalPages", "hasNext", "hasPrev"}


def assert_error(body: dict, code: str) -> None:
    assert body["success"] is False
    assert body["error"]["code"] == code
    assert isinstance(body["error"]["message"], str)
