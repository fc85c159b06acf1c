"""
Clock utilities for trade timestamps and trailing windows.

All timestamps are timezone-aware UTC. Functions that read the wall clock
accept an explicit time so callers (and tests) can pin "now".
"""

from datetime import UTC, datetime
from typing import Optional


def ensure_utc(timestamp: datetime) -> datetime:
    """
    Convert a timestamp to aware UTC.

    Naive values are read as local wall-clock time, the same reading
    datetime.now() gives them.
    """
    return timestamp.astimezone(UTC)


def utc_now(now: Optional[datetime] = None) -> datetime:
    """
    Get the current time, preferring an explicitly supplied value.

    Args:
        now: Optional pinned current time, naive or aware

    Returns:
        Aware UTC datetime
    """
    if now is not None:
        return ensure_utc(now)

    return datetime.now(UTC)


def age_seconds(timestamp: datetime, now: Optional[datetime] = None) -> float:
    """
    Age of a timestamp in seconds relative to now.

    Negative when the timestamp lies in the future.
    """
    return (utc_now(now) - ensure_utc(timestamp)).total_seconds()


def within_window(timestamp: datetime, window_seconds: float,
                  now: Optional[datetime] = None) -> bool:
    """True if the timestamp is at most window_seconds old."""
    return age_seconds(timestamp, now) <= window_seconds


def format_trade_time(timestamp: datetime, local: bool = True) -> str:
    """
    Format a trade timestamp for console output.

    Args:
        timestamp: Trade timestamp
        local: Convert to the local timezone before formatting

    Returns:
        'YYYY-MM-DD HH:MM:SS' string
    """
    if local:
        timestamp = timestamp.astimezone()

    return timestamp.strftime("%Y-%m-%d %H:%M:%S")
