"""Runtime logging helpers."""

from __future__ import annotations

import os
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


def _build_cli_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(spec: str | None = None) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse a log filter, by default from the L1_LOG_FILTER env var.

    Format: "level" or "level,module1=level,module2=level"
    Examples:
        - "info" - global INFO level
        - "info,l1.program=debug" - global INFO, l1.program at DEBUG
        - "debug,l1.eval=false" - global DEBUG, l1.eval disabled

    Returns:
        (global_level, module_filter_dict)
    """
    filter_spec = (spec if spec is not None else os.getenv("L1_LOG_FILTER", "info")).lower()
    parts = [p.strip() for p in filter_spec.split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def configure_logging(*, profile: LogProfile = "default", log_filter: str | None = None) -> None:
    """Configure process-level logging once per profile.

    Levels come from log_filter, falling back to L1_LOG_FILTER:
    - "info" - global INFO level
    - "info,l1.program=debug" - global INFO with l1.program at DEBUG
    - "info,l1.eval=false" - global INFO, l1.eval disabled
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = parse_log_filter(log_filter)

    logger.remove()

    if profile == "cli":
        logger.add(
            _build_cli_handler(),
            level="TRACE",
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter={"": global_level.upper(), **module_filter},
        )
    else:
        logger.add(
            sys.stderr,
            level="TRACE",
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter={"": global_level.upper(), **module_filter},
        )

    _CONFIGURED_PROFILE = profile
