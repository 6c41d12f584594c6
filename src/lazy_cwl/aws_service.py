"""CloudWatch Logs service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import FilterResult, LogGroupInfo, TimeRange
from .features.events.events import EventsService
from .features.log_group.log_group import LogGroupService

if TYPE_CHECKING:
    from mypy_boto3_logs.client import CloudWatchLogsClient


class LogsService:
    """Service for interacting with AWS CloudWatch Logs."""

    def __init__(self, logs_client: CloudWatchLogsClient) -> None:
        self.logs_client = logs_client
        self._log_group = LogGroupService(logs_client)
        self._events = EventsService(logs_client)

    def find_log_groups(self, query: str = "") -> list[LogGroupInfo]:
        return self._log_group.find_log_groups(query)

    def filter_events(self, log_group: str, filter_pattern: str, time_range: TimeRange) -> FilterResult:
        """Search one page of events in a log group."""
        return self._events.filter_events(log_group, filter_pattern, time_range)
