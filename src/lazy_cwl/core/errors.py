"""Error types for lazy-cwl."""

from __future__ import annotations


class LazyCwlError(Exception):
    """Base class for errors reported to the user at the command boundary."""

    exit_code = 1
    hint: str | None = None


class LaunchFailure(LazyCwlError):
    """The log streaming subprocess could not be started."""

    hint = "Make sure AWS CLI is installed and properly configured."


class BackendError(LazyCwlError):
    """A CloudWatch Logs API call failed."""

    hint = "Make sure your AWS credentials are configured."


class NotFoundError(LazyCwlError):
    """A favorite keyword does not exist."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f'No favorite found with keyword "{keyword}"')
        self.keyword = keyword


class ChildProcessExitError(LazyCwlError):
    """The streaming subprocess exited with a non-zero code after starting."""

    def __init__(self, returncode: int) -> None:
        super().__init__(f"AWS CLI process exited with code {returncode}")
        self.returncode = returncode


class UserInterrupt(LazyCwlError):
    """Tailing was stopped with Ctrl+C. Not a failure."""

    exit_code = 0

    def __init__(self) -> None:
        super().__init__("Stopped tailing logs")


class InvalidTimeRangeError(LazyCwlError):
    """A start or end time could not be parsed."""


class ConfigStoreError(LazyCwlError):
    """The local favorites store is unreadable or fails validation."""
