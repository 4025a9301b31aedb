"""Shared CLI helpers for unzpack commands."""

import sys
from typing import Optional

from unzpack.constants import ExitCodes
from unzpack.errors import (
    InvalidArchiveError,
    TargetNotADirectoryError,
    UnsafePathError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to unzpack exit codes."""
    if isinstance(exc, InvalidArchiveError):
        return ExitCodes.INVALID_ARCHIVE
    if isinstance(exc, UnsafePathError):
        return ExitCodes.UNSAFE_PATH
    # Checked before OSError: it is also a NotADirectoryError.
    if isinstance(exc, TargetNotADirectoryError):
        return ExitCodes.NOT_A_DIRECTORY
    if isinstance(exc, OSError):
        return ExitCodes.IO_ERROR
    return None
