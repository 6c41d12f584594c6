"""Runtime settings for lazy-cwl."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

CONFIG_ENV_VAR = "LAZY_CWL_CONFIG"
AWS_CLI_ENV_VAR = "LAZY_CWL_AWS_CLI"
DEFAULT_AWS_CLI = "aws"


def default_config_path() -> Path:
    return Path.home() / ".lazy-cwl" / "config.json"


@dataclass(frozen=True)
class Settings:
    """Settings resolved once at startup and passed to every command."""

    config_path: Path
    aws_cli: str = DEFAULT_AWS_CLI
    profile: str | None = None
    region: str | None = None
    debug: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from parsed CLI flags, falling back to environment variables."""
        env = os.environ if environ is None else environ
        config_path = Path(env[CONFIG_ENV_VAR]).expanduser() if env.get(CONFIG_ENV_VAR) else default_config_path()
        return cls(
            config_path=config_path,
            aws_cli=env.get(AWS_CLI_ENV_VAR) or DEFAULT_AWS_CLI,
            profile=getattr(args, "profile", None),
            region=getattr(args, "region", None),
            debug=bool(getattr(args, "debug", False)),
        )


def configure_logging(debug: bool) -> None:
    """Send lazy-cwl debug logs to stderr through rich when --debug is set."""
    logger = logging.getLogger("lazy_cwl")
    if not debug:
        logger.addHandler(logging.NullHandler())
        return

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
