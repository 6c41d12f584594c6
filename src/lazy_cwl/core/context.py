"""Context objects for passing shared state between components."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError

from ..aws_service import LogsService
from .errors import BackendError

if TYPE_CHECKING:
    from mypy_boto3_logs.client import CloudWatchLogsClient

    from .config import Settings
    from .store import ConfigStore


@dataclass
class AppContext:
    """Everything a command needs, built once in main().

    The CloudWatch Logs client is only created when a command first needs it,
    so favorites commands work without AWS credentials or a region.
    """

    settings: Settings
    store: ConfigStore
    logs_client_factory: Callable[[], CloudWatchLogsClient]

    @cached_property
    def logs_service(self) -> LogsService:
        try:
            return LogsService(self.logs_client_factory())
        except BotoCoreError as e:
            raise BackendError(str(e)) from e
