import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

if TYPE_CHECKING:
    from mypy_boto3_logs.client import CloudWatchLogsClient

from .core.app import run_command
from .core.config import Settings, configure_logging
from .core.context import AppContext
from .core.store import ConfigStore
from .ui import LogsNavigator

try:
    __version__ = version("lazy-cwl")
except PackageNotFoundError:
    __version__ = "dev"

COMMANDS = {"search", "filter", "favorite", "fav", "list-favorites", "ls", "remove-favorite", "rm", "recent"}

# Global options that consume the following word as their value.
VALUE_OPTIONS = {"--profile", "--region", "-f", "--favorite", "-k", "--keyword"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazy-cwl", description="CloudWatch Log Tailer - interactively find, filter and tail CloudWatch logs"
    )
    parser.add_argument("--version", action="version", version=f"lazy-cwl {__version__}")
    parser.add_argument("--profile", help="AWS profile to use for authentication", type=str, default=None)
    parser.add_argument("--region", help="AWS region to query", type=str, default=None)
    parser.add_argument("--debug", help="Print debug logs to stderr", action="store_true")
    parser.add_argument(
        "-f", "--favorite", dest="favorite_keyword", metavar="KEYWORD", help="Quickly tail logs from a favorite log group"
    )
    parser.add_argument(
        "-k", "--keyword", dest="tail_pattern", metavar="PATTERN", help="Search logs for specific text while tailing"
    )

    subparsers = parser.add_subparsers(title="commands")

    search = subparsers.add_parser("search", help="Search log groups and tail logs")
    search.add_argument("query", nargs="?", default="", help="Search string for log groups")
    search.set_defaults(command="search")

    filter_cmd = subparsers.add_parser("filter", help="Search logs for specific text within a log group")
    filter_cmd.add_argument("log_group", metavar="logGroupName", help="Log group to search in (or favorite keyword)")
    filter_cmd.add_argument("filter_pattern", metavar="filterPattern", help="Text pattern to search for")
    filter_cmd.add_argument(
        "-s", "--start-time", default="30m", help='Start time in ISO format or minutes ago (e.g., "30m")'
    )
    filter_cmd.add_argument("-e", "--end-time", default=None, help="End time in ISO format (defaults to now)")
    filter_cmd.set_defaults(command="filter")

    favorite = subparsers.add_parser("favorite", aliases=["fav"], help="Add a log group to favorites")
    favorite.add_argument("keyword", help="Short keyword to identify the log group")
    favorite.add_argument("log_group", metavar="logGroupName", help="Full name of the log group")
    favorite.set_defaults(command="favorite")

    list_favorites = subparsers.add_parser("list-favorites", aliases=["ls"], help="List all favorite log groups")
    list_favorites.set_defaults(command="list-favorites")

    remove_favorite = subparsers.add_parser("remove-favorite", aliases=["rm"], help="Remove a log group from favorites")
    remove_favorite.add_argument("keyword", help="Keyword of the favorite to remove")
    remove_favorite.set_defaults(command="remove-favorite")

    recent = subparsers.add_parser("recent", help="List recent searches")
    recent.set_defaults(command="recent")

    return parser


def _normalize_argv(argv: list[str]) -> list[str]:
    """A bare first word after the global options that is not a command is a search query."""
    index = 0
    while index < len(argv) and argv[index].startswith("-"):
        index += 2 if argv[index] in VALUE_OPTIONS else 1
    if index < len(argv) and argv[index] not in COMMANDS:
        return [*argv[:index], "search", *argv[index:]]
    return argv


def _resolve_command(parser: argparse.ArgumentParser, args: argparse.Namespace) -> str:
    command = getattr(args, "command", None)
    if command:
        return command
    if args.favorite_keyword:
        return "quick-tail"
    if args.tail_pattern:
        parser.error("-k/--keyword requires -f/--favorite")
    return "search"


def main(argv: list[str] | None = None) -> None:
    """Interactive CloudWatch Logs tailing tool."""
    parser = build_parser()
    args = parser.parse_args(_normalize_argv(sys.argv[1:] if argv is None else argv))
    command = _resolve_command(parser, args)

    settings = Settings.from_args(args)
    configure_logging(settings.debug)

    context = AppContext(
        settings=settings,
        store=ConfigStore(settings.config_path),
        logs_client_factory=lambda: _create_logs_client(settings.profile, settings.region),
    )
    navigator = LogsNavigator(context)

    sys.exit(run_command(navigator, command, args))


def _create_logs_client(profile_name: str | None, region_name: str | None = None) -> "CloudWatchLogsClient":
    """Create optimized CloudWatch Logs client with connection pooling."""
    config = Config(
        max_pool_connections=5,
        retries={"max_attempts": 2, "mode": "adaptive"},
    )

    session = boto3.Session(profile_name=profile_name) if profile_name else boto3
    if region_name:
        return session.client("logs", config=config, region_name=region_name)
    return session.client("logs", config=config)


if __name__ == "__main__":
    main()
