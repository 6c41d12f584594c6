"""Base classes for AWS services and UI components."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from botocore.exceptions import BotoCoreError, ClientError
from rich.console import Console

from .errors import BackendError
from .navigation import select_with_auto_pagination

if TYPE_CHECKING:
    from mypy_boto3_logs.client import CloudWatchLogsClient

T = TypeVar("T")


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, logs_client: CloudWatchLogsClient) -> None:
        self.logs_client = logs_client

    def _call(self, operation: Callable[[], T]) -> T:
        """Run an AWS call, translating botocore failures into BackendError."""
        try:
            return operation()
        except (ClientError, BotoCoreError) as e:
            raise BackendError(str(e)) from e


class BaseUIComponent:
    """Base class for UI components with common patterns."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select_with_nav(self, prompt: str, choices: list[dict[str, str]]) -> str | None:
        """Standard selection with exit navigation, paginated for long lists."""
        return select_with_auto_pagination(prompt, choices)
