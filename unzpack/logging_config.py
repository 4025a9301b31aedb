"""Central logging configuration utilities for unzpack.

The library itself only emits records through module loggers; configuring
handlers is left to the application. The ``unzpack`` CLI calls
`configure_logging` on start.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .constants import LOG_LEVEL_ENV

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `UNZPACK_LOG_LEVEL`
    3. Fallback to `INFO`
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger without touching handler configuration."""
    return logging.getLogger(name or "unzpack")


__all__ = ["configure_logging", "get_logger"]
