from __future__ import annotations

import logging
import os

import coloredlogs  # type: ignore[import]

LOG_LEVEL_ENV_VAR = "PRINTFLEET_LOGLEVEL"

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

# Loggers that only add noise at DEBUG; registry calls run under asyncio.run.
QUIET_LOGGERS = ("asyncio",)


def resolve_level(level: str | None = None) -> str:
    """Explicit level, then PRINTFLEET_LOGLEVEL, then LOGLEVEL, then INFO."""
    resolved = (
        level
        or os.environ.get(LOG_LEVEL_ENV_VAR)
        or os.environ.get("LOGLEVEL")
        or "INFO"
    )
    return resolved.upper()


def setup_logging(level: str | None = None) -> None:
    coloredlogs.install(
        level=resolve_level(level),
        fmt=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
