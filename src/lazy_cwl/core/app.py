"""Main application logic for lazy-cwl CLI."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import TYPE_CHECKING

from rich.console import Console

from ..core.errors import LazyCwlError, UserInterrupt

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ui import LogsNavigator

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def search_and_tail(navigator: LogsNavigator, query: str = "") -> None:
    """Pick a log group, optionally save it and choose a filter, then tail it."""
    log_group = navigator.select_log_group(query)
    if not log_group:
        return

    if not navigator.offer_favorite(log_group):
        return

    proceed, filter_pattern = navigator.ask_filter_pattern()
    if not proceed:
        return

    asyncio.run(navigator.tail_log_group(log_group, filter_pattern))


def quick_tail(navigator: LogsNavigator, keyword: str, filter_pattern: str | None = None) -> None:
    asyncio.run(navigator.tail_favorite(keyword, filter_pattern))


def get_command_handlers() -> dict[str, Callable[[LogsNavigator, argparse.Namespace], None]]:
    """Get mapping of command names to their handlers."""
    return {
        "search": lambda nav, args: search_and_tail(nav, getattr(args, "query", "") or ""),
        "filter": lambda nav, args: nav.show_filtered_events(
            args.log_group, args.filter_pattern, args.start_time, args.end_time
        ),
        "favorite": lambda nav, args: nav.add_favorite(args.keyword, args.log_group),
        "list-favorites": lambda nav, _args: nav.show_favorites(),
        "remove-favorite": lambda nav, args: nav.remove_favorite(args.keyword),
        "recent": lambda nav, _args: nav.show_recent_searches(),
        "quick-tail": lambda nav, args: quick_tail(nav, args.favorite_keyword, args.tail_pattern),
    }


def run_command(navigator: LogsNavigator, command: str, args: argparse.Namespace) -> int:
    """Run one command and turn its outcome into a process exit code."""
    handler = get_command_handlers()[command]
    try:
        handler(navigator, args)
    except UserInterrupt as e:
        console.print(f"\n{e}", style="dim")
        return e.exit_code
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!", style="cyan")
        return 0
    except LazyCwlError as e:
        logger.debug("Command %s failed", command, exc_info=True)
        err_console.print(f"\n❌ Error: {e}", style="red")
        if e.hint:
            err_console.print(e.hint, style="yellow")
        return e.exit_code
    except Exception as e:
        logger.debug("Command %s failed", command, exc_info=True)
        err_console.print(f"\n❌ Error: {e}", style="red")
        return 1
    return 0
