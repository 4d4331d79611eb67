"""Loguru setup for the library and the CLI."""

from __future__ import annotations

import os
import sys
from typing import Any, Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]
LogFilter = dict[str | None, str | int | bool]

LOG_FILTER_ENV = "TINYTS_LOG_FILTER"
_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


def parse_log_filter(filter_env: str | None = None) -> tuple[str, LogFilter]:
    """Parse a log filter spec, by default from TINYTS_LOG_FILTER.

    Format: "level" or "level,module=level,module=false", e.g.
    "debug,tinyts.surface=info" or "info,tinyts.core=false".

    Returns:
        (global_level, module_filter_dict)
    """
    if filter_env is None:
        filter_env = os.getenv(LOG_FILTER_ENV, "info")

    global_level = "info"
    modules: LogFilter = {}
    for part in filter_env.lower().split(","):
        part = part.strip()
        if not part:
            continue
        module, sep, level = part.partition("=")
        if not sep:
            global_level = part
            continue
        level = level.strip()
        modules[module.strip()] = False if level == "false" else level.upper()
    return global_level, modules


def _cli_sink() -> dict[str, Any]:
    # Check results own stdout; diagnostics go to stderr through rich
    handler = RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    return {"sink": handler, "format": "{message}"}


def _default_sink() -> dict[str, Any]:
    return {"sink": sys.stderr, "format": _DEFAULT_FORMAT}


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Route loguru output for a profile, once per process.

    `default` writes timestamped lines to stderr. `cli` renders through a
    rich handler. Levels come from TINYTS_LOG_FILTER (see parse_log_filter).
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = parse_log_filter()
    sink = _cli_sink() if profile == "cli" else _default_sink()

    logger.remove()
    logger.add(
        **sink,
        level=global_level.upper(),
        filter=module_filter,
        backtrace=False,
        diagnose=False,
    )

    _CONFIGURED_PROFILE = profile
