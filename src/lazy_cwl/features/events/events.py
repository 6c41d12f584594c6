"""Filtered log event search for CloudWatch Logs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import FilterResult, LogEventInfo, TimeRange

if TYPE_CHECKING:
    from mypy_boto3_logs.client import CloudWatchLogsClient
    from mypy_boto3_logs.type_defs import FilteredLogEventTypeDef

logger = logging.getLogger(__name__)


class EventsService(BaseAWSService):
    """Service for searching log events within a log group."""

    def __init__(self, logs_client: CloudWatchLogsClient) -> None:
        super().__init__(logs_client)

    def filter_events(self, log_group: str, filter_pattern: str, time_range: TimeRange) -> FilterResult:
        """Fetch one page of events matching `filter_pattern` in the given time range."""
        logger.debug("filter_log_events group=%s pattern=%r range=%s", log_group, filter_pattern, time_range)
        response = self._call(
            lambda: self.logs_client.filter_log_events(
                logGroupName=log_group,
                filterPattern=filter_pattern,
                startTime=time_range["start_time"],
                endTime=time_range["end_time"],
            )
        )
        return {
            "events": [_to_log_event_info(event) for event in response.get("events", [])],
            "has_more": bool(response.get("nextToken")),
        }


def _to_log_event_info(event: FilteredLogEventTypeDef) -> LogEventInfo:
    return {
        "timestamp": event.get("timestamp", 0),
        "message": event.get("message", ""),
        "log_stream": event.get("logStreamName"),
    }
