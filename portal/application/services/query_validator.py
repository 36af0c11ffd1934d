"""Pagination validation. Runs before any filtering or sorting work."""

from portal.application.dtos.query import PageRequest
from portal.core.constants import DEFAULT_PAGE
from portal.domain.exceptions import InvalidLimitException, InvalidPageException


def _to_int(raw: str | int | None, default: int) -> int | None:
    """Return raw as int, default when absent, or None when it is not an integer."""
    if raw is None or raw == "":
        return default
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


def validate_pagination(
    page: str | int | None,
    limit: str | int | None,
    *,
    default_limit: int = 10,
    max_limit: int = 100,
) -> PageRequest:
    """Parse and bound-check raw page/limit values.

    Args:
        page: Raw page value; absent means 1.
        limit: Raw limit value; absent means default_limit.
        default_limit: Page size used when limit is absent.
        max_limit: Largest accepted page size.

    Returns:
        PageRequest with validated values.

    Raises:
        InvalidPageException: page is not an integer or is below 1.
        InvalidLimitException: limit is not an integer or is outside [1, max_limit].
    """
    page_value = _to_int(page, DEFAULT_PAGE)
    if page_value is None or page_value < 1:
        raise InvalidPageException()
    limit_value = _to_int(limit, default_limit)
    if limit_value is None or limit_value < 1 or limit_value > max_limit:
        raise InvalidLimitException(max_limit)
    return PageRequest(page=page_value, limit=limit_value)
