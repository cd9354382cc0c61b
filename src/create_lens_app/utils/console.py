"""Shared rich console and logging setup."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "CREATE_LENS_APP_LOG_LEVEL"

console = Console()


def configure_logging(level: str | None = None) -> None:
    """Route log records through rich on stderr.

    The level defaults to $CREATE_LENS_APP_LOG_LEVEL, then WARNING.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
