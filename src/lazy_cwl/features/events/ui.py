"""UI components for filtered log event search."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ...core.base import BaseUIComponent
from ...core.types import LogEventInfo, TimeRange
from ...core.utils import format_timestamp, show_spinner
from .events import EventsService

console = Console()

SEPARATOR_WIDTH = 80


def format_log_event(event: LogEventInfo) -> Text:
    line = Text(format_timestamp(event["timestamp"]), style="dim")
    line.append(f" {event['message'].rstrip()}", style="default")
    return line


class EventsUI(BaseUIComponent):
    """UI component for displaying filtered log events."""

    def __init__(self, events_service: EventsService) -> None:
        super().__init__()
        self.events_service = events_service

    def show_filtered_events(self, log_group: str, filter_pattern: str, time_range: TimeRange) -> None:
        with show_spinner(f'Searching for "{filter_pattern}" in {log_group}...'):
            result = self.events_service.filter_events(log_group, filter_pattern, time_range)

        events = result["events"]
        if not events:
            console.print("No matching log events found.", style="yellow")
            return

        console.print(f"\nFound {len(events)} matching events:", style="green")
        console.print("─" * SEPARATOR_WIDTH, style="dim")

        for event in events:
            console.print(format_log_event(event), markup=False, highlight=False)

        if result["has_more"]:
            console.print(
                "\nMore results available. Refine your search or narrow the time window.",
                style="yellow",
            )
