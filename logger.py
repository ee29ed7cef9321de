"""
logger.py

Responsibility: Configures Python logging for the command-line entry point.
Does NOT: decide what gets logged; modules use logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that log every request at INFO/DEBUG
_QUIET_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: str | None = None) -> int:
    """
    Maps a level name to a logging level.

    Falls back to the LOG_LEVEL environment variable, then to INFO. Unknown
    names also resolve to INFO.
    """
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    level_int = logging.getLevelName(level_name)
    return level_int if isinstance(level_int, int) else logging.INFO


def setup_logging(level: str | None = None) -> None:
    """
    Sends log records to stdout as ``[timestamp] [LEVEL] message``.

    Does nothing to the root logger if handlers are already installed
    (e.g. by pytest), apart from quietening the HTTP libraries.
    """
    level_int = resolve_level(level)
    logging.basicConfig(level=level_int, format=LOG_FORMAT, datefmt=DATE_FORMAT, stream=sys.stdout)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level_int, logging.WARNING))
