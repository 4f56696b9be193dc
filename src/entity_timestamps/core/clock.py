"""Wall-clock readers used to stamp significant writes."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def local_now() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()
