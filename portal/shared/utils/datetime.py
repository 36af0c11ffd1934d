"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC.
Query values and seed timestamps are normalized through these helpers.
"""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a seed or query timestamp to aware UTC.

    Naive values are taken to already be UTC; aware values are converted.
    None passes through so optional fields can be normalized in one call.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_datetime_lenient(raw: str | None) -> datetime | None:
    """
    Parse an ISO-8601 date or date-time query value into UTC.

    Accepts '2024-01-20', '2024-01-20T10:00:00', '2024-01-20T10:00:00Z'
    and explicit offsets. Date-only and naive values are taken as UTC
    midnight / UTC time.

    Args:
        raw: Raw query string value

    Returns:
        UTC-aware datetime, or None if raw is empty or unparseable
    """
    if not raw:
        return None
    value = raw.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return ensure_utc(parsed)
