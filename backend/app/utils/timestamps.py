"""
Timestamp and record id helpers.

WHAT: ISO timestamps and millisecond ids for published records
WHY: Browser client sorts and keys records by these values
HOW: UTC datetimes rendered with millisecond precision, ids from epoch millis
"""

import time
from datetime import datetime, timezone


def utc_timestamp(moment: datetime | None = None) -> str:
    """
    Render a UTC ISO-8601 timestamp like ``2024-05-01T12:00:00.123Z``.

    Args:
        moment: Datetime to render (defaults to now)

    Returns:
        Timestamp string with millisecond precision and a ``Z`` suffix
    """
    moment = moment or datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecordIdGenerator:
    """Epoch-millisecond ids that never repeat within one process."""

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        # Same millisecond (or clock stepped back): bump past the last id
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate
