"""Launching `aws logs tail --follow` as a child process."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from dataclasses import dataclass, field

from ...core.config import DEFAULT_AWS_CLI
from ...core.errors import LaunchFailure

logger = logging.getLogger(__name__)


def build_tail_command(
    log_group: str,
    filter_pattern: str | None = None,
    *,
    aws_cli: str = DEFAULT_AWS_CLI,
    profile: str | None = None,
    region: str | None = None,
) -> list[str]:
    """Build the argv for following a log group.

    The filter pattern is passed as a single raw argument; quoting is left to
    the exec call, which never goes through a shell.
    """
    if not log_group:
        raise ValueError("Log group name cannot be empty")

    argv = [aws_cli, "logs", "tail", log_group, "--follow"]
    if filter_pattern:
        argv += ["--filter-pattern", filter_pattern]
    if profile:
        argv += ["--profile", profile]
    if region:
        argv += ["--region", region]
    return argv


@dataclass
class TailSession:
    """One in-flight tail: the target log group and the child process streaming it."""

    log_group: str
    filter_pattern: str | None
    process: asyncio.subprocess.Process
    terminated: bool = field(default=False, init=False)

    @property
    def pid(self) -> int:
        return self.process.pid

    def terminate(self) -> bool:
        """Ask the child to stop. Only the first call signals it; returns whether this call did."""
        if self.terminated:
            return False
        self.terminated = True
        if self.process.returncode is not None:
            return False
        with suppress(ProcessLookupError):
            self.process.terminate()
        logger.debug("Sent terminate to pid=%s", self.pid)
        return True


async def launch_tail(argv: list[str], log_group: str, filter_pattern: str | None = None) -> TailSession:
    """Start the tail process with stdin detached and stdout/stderr piped."""
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise LaunchFailure(f"Error executing AWS CLI: {e}") from e

    logger.debug("Started tail pid=%s argv=%s", process.pid, argv)
    return TailSession(log_group=log_group, filter_pattern=filter_pattern, process=process)
