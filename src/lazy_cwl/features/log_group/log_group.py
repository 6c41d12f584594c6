"""Log group discovery for CloudWatch Logs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ...core.base import BaseAWSService
from ...core.types import LogGroupInfo

if TYPE_CHECKING:
    from mypy_boto3_logs.client import CloudWatchLogsClient
    from mypy_boto3_logs.type_defs import LogGroupTypeDef

logger = logging.getLogger(__name__)

MAX_LOG_GROUPS = 50


class LogGroupService(BaseAWSService):
    """Service for CloudWatch log group operations."""

    def __init__(self, logs_client: CloudWatchLogsClient) -> None:
        super().__init__(logs_client)

    def find_log_groups(self, query: str = "", limit: int = MAX_LOG_GROUPS) -> list[LogGroupInfo]:
        """Return up to `limit` log groups whose name contains `query`."""
        kwargs: dict[str, Any] = {"limit": limit}
        if query:
            kwargs["logGroupNamePattern"] = query

        logger.debug("describe_log_groups %s", kwargs)
        response = self._call(lambda: self.logs_client.describe_log_groups(**kwargs))
        return [_to_log_group_info(group) for group in response.get("logGroups", [])]


def _to_log_group_info(group: LogGroupTypeDef) -> LogGroupInfo:
    return {
        "name": group["logGroupName"],
        "arn": group.get("arn"),
        "stored_bytes": group.get("storedBytes", 0),
        "retention_days": group.get("retentionInDays"),
    }
