"""
Custom exception classes for unzpack.

Plain I/O failures are not wrapped: they surface as the builtin ``OSError``
family exactly as the operating system reported them.
"""


class UnzpackError(Exception):
    """Base exception class for unzpack errors."""
    pass


class InvalidArchiveError(UnzpackError):
    """Raised when a file is not a valid or recognized archive."""
    pass


class UnsafePathError(UnzpackError):
    """Raised when an archive entry would resolve outside the target root."""

    def __init__(self, entry_name: str, reason: str = "escapes the target directory") -> None:
        super().__init__(f"Unsafe archive entry path {entry_name!r}: {reason}")
        self.entry_name = entry_name
        self.reason = reason


class TargetNotADirectoryError(UnzpackError, NotADirectoryError):
    """Raised when the extraction target exists but is not a directory."""
    pass
