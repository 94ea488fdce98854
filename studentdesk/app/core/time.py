"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def utc_timestamp(value: datetime | None = None) -> str:
    """Format a datetime as an ISO-8601 UTC string with millisecond precision, e.g. 2026-10-18T07:26:00.123Z."""
    value = (value or utc_now()).astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
