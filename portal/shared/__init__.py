"""Shared utilities: enums, logging, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from portal.shared.enums import ContentType, SortKey, SortOrder, TagCategory
from portal.shared.utils import (
    contains_ci,
    ensure_utc,
    parse_datetime_lenient,
)

__all__ = [
    "ContentType",
    "SortKey",
    "SortOrder",
    "TagCategory",
    "contains_ci",
    "ensure_utc",
    "parse_datetime_lenient",
]
