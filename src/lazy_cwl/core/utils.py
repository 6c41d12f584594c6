"""Utility functions for lazy-cwl."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from rich.console import Console
from rich.spinner import Spinner

console = Console()

SEPARATOR = "─"


def print_success(message: str) -> None:
    console.print(f"✅ {message}", style="green")


def print_separator(width: int = 50) -> None:
    console.print(SEPARATOR * width, style="dim")


@contextmanager
def show_spinner(message: str = "") -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    spinner = Spinner("dots", text=message, style="cyan")
    with console.status(spinner):
        yield


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch milliseconds as an ISO-8601 UTC string with millisecond precision."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
