"""Type definitions for lazy-cwl."""

from __future__ import annotations

from typing import TypedDict


class LogGroupInfo(TypedDict):
    name: str
    arn: str | None
    stored_bytes: int
    retention_days: int | None


class LogEventInfo(TypedDict):
    timestamp: int
    message: str
    log_stream: str | None


class FilterResult(TypedDict):
    events: list[LogEventInfo]
    has_more: bool


class TimeRange(TypedDict):
    start_time: int  # epoch milliseconds
    end_time: int
