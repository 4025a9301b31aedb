"""
Constants and exit codes for unzpack.
"""

DEFAULT_COPY_BUFFER_SIZE = 1024 * 1024

# Entry names use '/' inside archives; '\\' is accepted from Windows-made zips.
ENTRY_SEPARATORS = ("/", "\\")

LOG_LEVEL_ENV = "UNZPACK_LOG_LEVEL"
COPY_BUFFER_SIZE_ENV = "UNZPACK_COPY_BUFFER_SIZE"
KEEP_ARCHIVE_ENV = "UNZPACK_KEEP_ARCHIVE"


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    IO_ERROR = 1
    INVALID_ARCHIVE = 2
    UNSAFE_PATH = 3
    NOT_A_DIRECTORY = 4
    UNEXPECTED_ERROR = 5
