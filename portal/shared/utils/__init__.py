"""Shared utilities: datetime parsing, case-insensitive text matching."""

from portal.shared.utils.datetime import ensure_utc, parse_datetime_lenient
from portal.shared.utils.text import (
    collation_key,
    contains_ci,
    equals_ci,
    find_ci,
    fold,
)

__all__ = [
    "ensure_utc",
    "parse_datetime_lenient",
    "collation_key",
    "contains_ci",
    "equals_ci",
    "find_ci",
    "fold",
]
