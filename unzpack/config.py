"""Settings for the unzpack CLI sourced from the environment.

Library functions take their options as arguments and never read the
environment; only the command line front end builds `UnzpackSettings`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    COPY_BUFFER_SIZE_ENV,
    DEFAULT_COPY_BUFFER_SIZE,
    KEEP_ARCHIVE_ENV,
    LOG_LEVEL_ENV,
)


def env_bool(environ: Mapping[str, str], key: str, default: bool = False) -> bool:
    value = environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = environ.get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class UnzpackSettings:
    """Typed CLI settings sourced from the environment."""

    copy_buffer_size: int
    keep_archive: bool
    log_level: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "UnzpackSettings":
        environ = os.environ if environ is None else environ
        buffer_size = env_int(environ, COPY_BUFFER_SIZE_ENV, DEFAULT_COPY_BUFFER_SIZE)
        if buffer_size <= 0:
            buffer_size = DEFAULT_COPY_BUFFER_SIZE
        return cls(
            copy_buffer_size=buffer_size,
            keep_archive=env_bool(environ, KEEP_ARCHIVE_ENV, False),
            log_level=(environ.get(LOG_LEVEL_ENV) or "INFO").upper(),
        )
