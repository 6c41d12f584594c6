"""Start/end time parsing for log event searches."""

from __future__ import annotations

import time
from datetime import datetime

from .errors import InvalidTimeRangeError
from .types import TimeRange

DEFAULT_START_TIME = "30m"
MINUTE_MS = 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


def parse_timestamp(value: str) -> int:
    """Parse an ISO-8601 timestamp into epoch milliseconds. Naive values are local time."""
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidTimeRangeError(f"Invalid time '{value}': use ISO format or minutes ago (e.g. 30m)") from e
    return int(parsed.timestamp() * 1000)


def parse_start_time(value: str, now: int) -> int:
    """Resolve '<N>m' as N minutes before now, anything else as an absolute timestamp."""
    if value.endswith("m"):
        minutes = value[:-1].strip()
        if not minutes.isdigit():
            raise InvalidTimeRangeError(f"Invalid start time '{value}': expected a number of minutes like 30m")
        return now - int(minutes) * MINUTE_MS
    return parse_timestamp(value)


def resolve_time_range(start_time: str | None, end_time: str | None, now: int | None = None) -> TimeRange:
    current = now_ms() if now is None else now
    start = parse_start_time(start_time or DEFAULT_START_TIME, current)
    end = parse_timestamp(end_time) if end_time else current
    if start > end:
        raise InvalidTimeRangeError("Start time must be before end time")
    return {"start_time": start, "end_time": end}
