"""Datetime utilities and the job deadline policy."""

from datetime import datetime, timezone
from typing import Optional


def now() -> datetime:
    """Get current datetime in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Make a datetime timezone aware.

    SQLite drops tzinfo on the way back out, so naive values are read as UTC.
    Aware values are converted to UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def is_expired(deadline: datetime, at: Optional[datetime] = None) -> bool:
    """
    Check whether a deadline has passed.

    Args:
        deadline: The stored job deadline
        at: Reference time (defaults to now in UTC)

    Returns:
        True when the reference time is strictly after the deadline
    """
    reference = ensure_utc(at) if at is not None else now()
    return reference > ensure_utc(deadline)


def to_iso(dt: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string (``2026-01-13T12:00:00.000Z``)."""
    dt = ensure_utc(dt)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
