"""Logging setup: one Rich handler on the root logger, writing to stderr.

``console`` is the stdout console the CLI prints listings to; log records go to
``err_console`` so they never interleave with command output.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "FOLIO_LOG_LEVEL"

console = Console()
err_console = Console(stderr=True)

_handler: RichHandler | None = None


def resolve_level(level_name: str | None = None) -> int:
    """Map a level name (argument, then ``FOLIO_LOG_LEVEL``) to a logging level; unknown names give INFO."""
    name = (level_name or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str | None = None) -> RichHandler:
    """Attach the Folio handler to the root logger (once) and set the level."""
    global _handler

    root = logging.getLogger()
    if _handler is None or _handler not in root.handlers:
        _handler = RichHandler(console=err_console, show_path=False, markup=False, rich_tracebacks=True)
        _handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_handler)

    root.setLevel(resolve_level(level_name))
    return _handler
