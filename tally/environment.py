"""Environment-driven configuration for tally.

Everything is read at call time from os.environ (or an explicit env dict,
which the tests pass in). No config files.

    TALLY_VARIABLES  default bindings, e.g. "x=3,y=4"
    TALLY_LOG_LEVEL  root log level name, default WARNING
"""

from __future__ import annotations

import os
import re
from typing import Optional

VARIABLES_VAR = "TALLY_VARIABLES"
LOG_LEVEL_VAR = "TALLY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# NAME=VALUE with a one-letter name and an optionally signed integer
_BINDING_RE = re.compile(r"\s*([A-Za-z])\s*=\s*([+-]?[0-9]+)\s*")


def parse_binding(text: str) -> tuple[str, int]:
    """Parse one "x=3" binding.

    Raises:
        ValueError: Not a single-letter name followed by "=" and an integer.
    """
    match = _BINDING_RE.fullmatch(text)
    if not match:
        raise ValueError(f"Invalid binding {text!r}: expected NAME=INTEGER with a one-letter NAME")
    return match.group(1), int(match.group(2))


def parse_bindings(text: str) -> dict[str, int]:
    """Parse a comma-separated list of bindings; later names win."""
    bindings: dict[str, int] = {}
    for chunk in text.split(","):
        if not chunk.strip():
            continue
        name, value = parse_binding(chunk)
        bindings[name] = value
    return bindings


def load_bindings(env: Optional[dict[str, str]] = None) -> dict[str, int]:
    """Default bindings from TALLY_VARIABLES (empty when unset)."""
    env = os.environ if env is None else env
    return parse_bindings(env.get(VARIABLES_VAR, ""))


def load_log_level(env: Optional[dict[str, str]] = None) -> str:
    env = os.environ if env is None else env
    return env.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
