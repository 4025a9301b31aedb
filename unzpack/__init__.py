"""unzpack - materialize in-memory archives onto the file system.

Provides:
* `persist` - write archive bytes to a file
* `extract` - safely extract a ZIP or tar file into a directory tree
* `unpack` - persist, extract and remove the intermediate file in one call
* A pluggable `ArchiveReader` interface with ZIP and tar implementations
* Thin CLI wrapper (`unzpack`)
"""

from ._version import __version__
from .archive import ArchiveEntry, ArchiveReader, TarArchiveReader, ZipArchiveReader, open_archive
from .core import Unzpack, extract, persist, unpack
from .errors import InvalidArchiveError, TargetNotADirectoryError, UnsafePathError, UnzpackError
from .logging_config import configure_logging  # noqa: F401
from .materializer import ExtractionResult, materialize

__all__ = [
    "__version__",
    "ArchiveEntry",
    "ArchiveReader",
    "ExtractionResult",
    "InvalidArchiveError",
    "TarArchiveReader",
    "TargetNotADirectoryError",
    "UnsafePathError",
    "Unzpack",
    "UnzpackError",
    "ZipArchiveReader",
    "configure_logging",
    "extract",
    "materialize",
    "open_archive",
    "persist",
    "unpack",
]
