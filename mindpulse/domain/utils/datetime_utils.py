"""
Datetime utilities for consistent timezone handling.
"""

import datetime

UTC = datetime.timezone.utc


def now_utc() -> datetime.datetime:
    """Get current datetime in UTC."""
    return datetime.datetime.now(UTC)


def ensure_utc(value: datetime.datetime) -> datetime.datetime:
    """
    Attach UTC to naive datetimes and convert aware ones to UTC.

    SQLite drops tzinfo on round trips, so values read back from the store
    pass through here.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
