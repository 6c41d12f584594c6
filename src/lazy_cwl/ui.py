"""UI layer - handles all user interaction and display logic."""

from __future__ import annotations

from functools import cached_property

from rich.console import Console

from .core.base import BaseUIComponent
from .core.context import AppContext
from .core.navigation import ask_text, confirm
from .core.time_range import resolve_time_range
from .features.events.ui import EventsUI
from .features.favorites.favorites import FavoritesService
from .features.favorites.ui import FavoritesUI
from .features.log_group.ui import LogGroupUI
from .features.tail.controller import TailController
from .features.tail.ui import TailUI

console = Console()


class LogsNavigator(BaseUIComponent):
    """Navigator for interactive CloudWatch Logs exploration."""

    def __init__(self, context: AppContext, controller: TailController | None = None) -> None:
        super().__init__()
        self.context = context
        self.favorites_service = FavoritesService(context.store)
        self._favorites_ui = FavoritesUI(self.favorites_service)
        self._tail_ui = TailUI(context.settings, self.favorites_service, controller)

    @cached_property
    def _log_group_ui(self) -> LogGroupUI:
        return LogGroupUI(self.context.logs_service._log_group)

    @cached_property
    def _events_ui(self) -> EventsUI:
        return EventsUI(self.context.logs_service._events)

    def select_log_group(self, query: str = "") -> str:
        return self._log_group_ui.select_log_group(query)

    def offer_favorite(self, log_group: str) -> bool:
        """Ask whether to save `log_group` as a favorite. Returns False if the prompt was cancelled."""
        return self._favorites_ui.prompt_add_favorite(log_group)

    def ask_filter_pattern(self) -> tuple[bool, str | None]:
        """Ask for an optional filter pattern. Returns (proceed, pattern)."""
        use_filter = confirm("Would you like to filter logs with a keyword?")
        if use_filter is None:
            return False, None
        if not use_filter:
            return True, None
        pattern = ask_text("Enter text to filter logs:", "Filter pattern cannot be empty")
        if pattern is None:
            return False, None
        return True, pattern

    async def tail_log_group(self, log_group: str, filter_pattern: str | None = None) -> None:
        await self._tail_ui.tail(log_group, filter_pattern)

    async def tail_favorite(self, keyword: str, filter_pattern: str | None = None) -> None:
        await self._tail_ui.tail_favorite(keyword, filter_pattern)

    def show_filtered_events(
        self, log_group_or_favorite: str, filter_pattern: str, start_time: str | None, end_time: str | None
    ) -> None:
        """Search a log group (or favorite) for a pattern within a time window."""
        log_group = self.favorites_service.resolve_or_passthrough(log_group_or_favorite)
        self.favorites_service.save_recent_search(filter_pattern)
        time_range = resolve_time_range(start_time, end_time)
        self._events_ui.show_filtered_events(log_group, filter_pattern, time_range)

    def add_favorite(self, keyword: str, log_group: str) -> None:
        self._favorites_ui.add_favorite(keyword, log_group)

    def remove_favorite(self, keyword: str) -> None:
        self._favorites_ui.remove_favorite(keyword)

    def show_favorites(self) -> None:
        self._favorites_ui.show_favorites()

    def show_recent_searches(self) -> None:
        self._favorites_ui.show_recent_searches()
