# backend/thumbnail_api/utils/time_utils.py
"""
Time utilities.

All timestamps produced by the service are timezone-aware UTC.
"""

import time
from datetime import datetime, timezone

UTC_TIMEZONE = timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC timestamp (timezone-aware).

    Returns:
        Current UTC datetime object
    """
    return datetime.now(UTC_TIMEZONE)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return utc_now().isoformat()


def monotonic_start() -> float:
    """Start marker for duration measurements (immune to wall-clock jumps)."""
    return time.perf_counter()


def elapsed_ms(start: float) -> float:
    """
    Milliseconds elapsed since a monotonic_start() marker.

    Args:
        start: Value previously returned by monotonic_start()

    Returns:
        Elapsed time in milliseconds rounded to two decimals
    """
    return round((time.perf_counter() - start) * 1000, 2)
