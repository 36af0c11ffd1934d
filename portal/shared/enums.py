"""Shared enumerations for the intranet portal.

Content types, sort keys and tag categories used by the domain, the
query engine and the API schemas.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ContentType(_ValuesMixin, str, Enum):
    """Kind of intranet content item."""

    ANNOUNCEMENT = "announcement"
    NEWS = "news"
    POLICY = "policy"
    EVENT = "event"


class SortOrder(_ValuesMixin, str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None, default: "SortOrder") -> "SortOrder":
        """Return DESC only for an explicit 'desc'; anything else given is ASC."""
        if raw is None or raw == "":
            return default
        return cls.DESC if raw == cls.DESC.value else cls.ASC


class SortKey(_ValuesMixin, str, Enum):
    """Every sort key understood by the comparator.

    Each endpoint accepts a subset (see CONTENT_SORT_KEYS etc.).
    """

    RELEVANCE = "relevance"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    NAME = "name"
    EMAIL = "email"
    DEPARTMENT = "department"


CONTENT_SORT_KEYS = frozenset({SortKey.CREATED_AT, SortKey.UPDATED_AT, SortKey.TITLE})
SEARCH_SORT_KEYS = CONTENT_SORT_KEYS | {SortKey.RELEVANCE}
USER_SORT_KEYS = frozenset({SortKey.NAME, SortKey.EMAIL, SortKey.DEPARTMENT})


class TagCategory(_ValuesMixin, str, Enum):
    """Category inferred for a tag in the tag summary."""

    GENERAL = "general"
    DEPARTMENT = "department"
    EVENT = "event"
    POLICY = "policy"
