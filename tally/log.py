"""Logging setup: stdlib logging rendered by Rich on stderr."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from tally.environment import load_log_level


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route the root logger through a single RichHandler.

    Level comes from TALLY_LOG_LEVEL unless `verbose` forces DEBUG. Any
    handlers already on the root logger are replaced.
    """
    level_name = "DEBUG" if verbose else load_log_level()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
