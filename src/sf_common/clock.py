"""Wall-clock utilities.

Generators read time only through a ``Clock`` so tests can inject
scripted timestamps.
"""

import time
from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], int]


def current_millis() -> int:
    """Return whole milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def millis_to_datetime(timestamp_ms: int) -> datetime:
    """Convert Unix milliseconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
