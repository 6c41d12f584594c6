"""UI components for log group selection."""

from __future__ import annotations

from rich.console import Console

from ...core.base import BaseUIComponent
from ...core.navigation import handle_navigation
from ...core.types import LogGroupInfo
from ...core.utils import show_spinner
from .log_group import LogGroupService

console = Console()


def _format_size(stored_bytes: int) -> str:
    size = float(stored_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def format_log_group_choice(group: LogGroupInfo) -> dict[str, str]:
    details = [_format_size(group["stored_bytes"])]
    if group["retention_days"]:
        details.append(f"{group['retention_days']}d retention")
    return {"name": f"{group['name']}  ({', '.join(details)})", "value": group["name"]}


class LogGroupUI(BaseUIComponent):
    """UI component for finding and selecting log groups."""

    def __init__(self, log_group_service: LogGroupService) -> None:
        super().__init__()
        self.log_group_service = log_group_service

    def select_log_group(self, query: str = "") -> str:
        """Search log groups by name and let the user pick one. Returns "" if nothing was chosen."""
        with show_spinner("Searching for log groups..."):
            log_groups = self.log_group_service.find_log_groups(query)

        if not log_groups:
            console.print(f'No log groups found matching "{query}"', style="yellow")
            return ""

        choices = [format_log_group_choice(group) for group in log_groups]
        selected = self.select_with_nav("Select a log group to tail:", choices)

        if not handle_navigation(selected):
            return ""

        return selected or ""
