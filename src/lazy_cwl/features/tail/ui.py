"""UI component for streaming a log group."""

from __future__ import annotations

import shlex

from rich.console import Console

from ...core.base import BaseUIComponent
from ...core.config import Settings
from ..favorites.favorites import FavoritesService
from .controller import TailController
from .launcher import build_tail_command, launch_tail

console = Console()


class TailUI(BaseUIComponent):
    """Prints the tail banner, records the filter, then hands over to the controller."""

    def __init__(
        self,
        settings: Settings,
        favorites_service: FavoritesService,
        controller: TailController | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.favorites_service = favorites_service
        self.controller = controller or TailController()

    async def tail(self, log_group: str, filter_pattern: str | None = None) -> None:
        """Stream `log_group` until the child exits or the user presses Ctrl+C."""
        console.print(f"\nTailing logs for {log_group}", style="blue")
        if filter_pattern:
            console.print(f'Filtering for: "{filter_pattern}"', style="yellow")
            self.favorites_service.save_recent_search(filter_pattern)
        console.print("Press Ctrl+C to exit\n", style="dim")

        argv = build_tail_command(
            log_group,
            filter_pattern,
            aws_cli=self.settings.aws_cli,
            profile=self.settings.profile,
            region=self.settings.region,
        )
        console.print("Starting streaming logs...", style="green")
        console.print(f"Executing: {shlex.join(argv)}", style="dim", markup=False, highlight=False)

        session = await launch_tail(argv, log_group, filter_pattern)
        await self.controller.run(session)

    async def tail_favorite(self, keyword: str, filter_pattern: str | None = None) -> None:
        log_group = self.favorites_service.resolve(keyword)
        console.print(f'Using favorite "{keyword}" for log group: {log_group}', style="green")
        await self.tail(log_group, filter_pattern)
