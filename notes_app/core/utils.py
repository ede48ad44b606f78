"""
Core Utilities.

Shared utility functions used across the application.
"""

import random
import string
import time
from datetime import datetime, timezone

_ID_ALPHABET = string.digits + string.ascii_lowercase


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values stored by the application are timezone-naive
    and assumed to be UTC.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def now_ms() -> int:
    """Return milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def generate_id(timestamp_ms: int | None = None) -> str:
    """
    Generate a note identifier.

    Combines the creation time in milliseconds with a random base36
    suffix, e.g. ``1718000000000_k3x9qa``.

    Args:
        timestamp_ms: Time component (defaults to now)

    Returns:
        Identifier string
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    suffix = "".join(random.choices(_ID_ALPHABET, k=6))
    return f"{timestamp_ms}_{suffix}"


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch milliseconds as a local date/time string."""
    local = datetime.fromtimestamp(timestamp_ms / 1000).astimezone()
    return local.strftime("%Y-%m-%d %H:%M:%S")
