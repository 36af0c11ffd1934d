"""Tests for domain entities and shared enums."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from portal.domain.entities import ContentItemEntity, UserEntity
from portal.domain.exceptions import ValidationException
from portal.shared.enums import ContentType, SortKey, TagCategory
from tests.conftest import BASE_TIME, make_content, make_user


def test_user_requires_id_and_name() -> None:
    with pytest.raises(ValidationException):
        UserEntity(id="", name="X", email="x@x.com")
    with pytest.raises(ValidationException):
        UserEntity(id="1", name="", email="x@x.com")


def test_user_is_frozen() -> None:
    user = make_user()
    with pytest.raises(FrozenInstanceError):
        user.name = "changed"  # type: ignore[misc]


def test_user_has_department() -> None:
    assert make_user(department="HR").has_department is True
    assert make_user(department=None).has_department is False
    assert make_user(department="").has_department is False


def test_content_requires_aware_timestamps() -> None:
    with pytest.raises(ValidationException):
        ContentItemEntity(
            id="1",
            title="t",
            content="c",
            author=make_user(),
            created_at=datetime(2024, 1, 1),
            updated_at=BASE_TIME,
            tags=(),
            type=ContentType.NEWS,
        )


def test_content_does_not_enforce_update_after_create() -> None:
    item = make_content(day=5, updated_day=1)
    assert item.updated_at < item.created_at


def test_enum_values() -> None:
    assert ContentType.values() == ["announcement", "news", "policy", "event"]
    assert TagCategory.values() == ["general", "department", "event", "policy"]
    assert SortKey("createdAt") is SortKey.CREATED_AT
