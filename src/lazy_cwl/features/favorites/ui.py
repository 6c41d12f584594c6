"""UI components for favorites and recent searches."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ...core.base import BaseUIComponent
from ...core.navigation import ask_text, confirm
from ...core.utils import print_separator, print_success
from .favorites import FavoritesService

console = Console()


class FavoritesUI(BaseUIComponent):
    """UI component for managing favorites and showing recent searches."""

    def __init__(self, favorites_service: FavoritesService) -> None:
        super().__init__()
        self.favorites_service = favorites_service

    def add_favorite(self, keyword: str, log_group: str) -> None:
        self.favorites_service.add(keyword, log_group)
        print_success(f'Added "{log_group}" to favorites with keyword "{keyword}"')

    def remove_favorite(self, keyword: str) -> None:
        self.favorites_service.remove(keyword)
        print_success(f'Removed favorite with keyword "{keyword}"')

    def prompt_add_favorite(self, log_group: str) -> bool:
        """Offer to save the selected log group as a favorite. Returns False if a prompt was cancelled."""
        add = confirm("Would you like to add this log group to favorites?")
        if add is None:
            return False
        if not add:
            return True
        keyword = ask_text("Enter a keyword for this favorite:", "Keyword cannot be empty")
        if keyword is None:
            return False
        self.add_favorite(keyword.strip(), log_group)
        return True

    def show_favorites(self) -> None:
        favorites = self.favorites_service.list_favorites()

        if not favorites:
            console.print("No favorites saved yet.", style="yellow")
            console.print("Add a favorite with: [blue]lazy-cwl favorite <keyword> <logGroupName>[/blue]")
            return

        console.print("\nYour Favorites:", style="bold")
        print_separator()
        for keyword, log_group in favorites.items():
            line = Text(keyword.ljust(15), style="green")
            line.append(f" {log_group}")
            console.print(line)
        print_separator()
        console.print("\nUse [blue]lazy-cwl -f <keyword>[/blue] to quickly tail a favorite log group")

    def show_recent_searches(self) -> None:
        recent = self.favorites_service.list_recent_searches()

        if not recent:
            console.print("No recent searches.", style="yellow")
            return

        console.print("\nRecent Searches:", style="bold")
        print_separator()
        for index, search in enumerate(recent, start=1):
            line = Text(str(index).ljust(3), style="blue")
            line.append(f" {search}")
            console.print(line)
        print_separator()
        console.print('\nUse [blue]lazy-cwl filter <logGroup> "<search-text>"[/blue] to search logs')
