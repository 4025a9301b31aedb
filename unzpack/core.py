"""
Persist archive bytes to a file, extract it, and clean up.

Typical use is an archive shipped as package data or produced in memory::

    from unzpack import Unzpack

    Unzpack.unpack(archive_bytes, "/tmp/assets.zip", "/srv/app/assets")

Every failure propagates to the caller unchanged. When extraction fails the
persisted archive file is left in place so it can be inspected.
"""

from __future__ import annotations

from pathlib import Path

from .archive import PathLike, open_archive
from .constants import DEFAULT_COPY_BUFFER_SIZE
from .logging_config import get_logger
from .materializer import ExtractionResult, materialize

_log = get_logger(__name__)


def persist(data: bytes, filepath: PathLike) -> Path:
    """Write `data` to `filepath`, creating or truncating the file.

    Args:
        data: The archive bytes (``bytes``, ``bytearray`` or ``memoryview``)
        filepath: Destination file; its parent directory must exist

    Returns:
        The path that was written
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"persist() expects a bytes-like buffer, got {type(data).__name__}")
    path = Path(filepath)
    with path.open("wb") as out_file:
        out_file.write(data)
    _log.info("Persisted %d bytes to %s", memoryview(data).nbytes, path)
    return path


def extract(
    filepath: PathLike,
    outdir: PathLike,
    *,
    buffer_size: int = DEFAULT_COPY_BUFFER_SIZE,
) -> ExtractionResult:
    """Extract the archive at `filepath` into `outdir`.

    The output directory is created when missing. Raises
    `TargetNotADirectoryError` if it exists but is not a directory,
    `InvalidArchiveError` for unreadable archives and `UnsafePathError` for
    entries that would land outside `outdir`.
    """
    archive_path = Path(filepath).resolve(strict=True)
    with open_archive(archive_path) as archive:
        result = materialize(archive, outdir, buffer_size=buffer_size)
    _log.info(
        "Extracted %s into %s (%d files, %d directories)",
        archive_path, result.root, result.files, result.directories,
    )
    return result


def unpack(
    data: bytes,
    filepath: PathLike,
    outdir: PathLike,
    *,
    remove_archive: bool = True,
    buffer_size: int = DEFAULT_COPY_BUFFER_SIZE,
) -> ExtractionResult:
    """Persist `data` at `filepath`, extract it into `outdir`, then delete `filepath`.

    Pass ``remove_archive=False`` to keep the intermediate archive file. It is
    never deleted when extraction fails.
    """
    persist(data, filepath)
    result = extract(filepath, outdir, buffer_size=buffer_size)
    if remove_archive:
        Path(filepath).unlink()
        _log.debug("Removed intermediate archive %s", filepath)
    return result


class Unzpack:
    """Namespace exposing the persist / extract / unpack operations."""

    persist = staticmethod(persist)
    extract = staticmethod(extract)
    unpack = staticmethod(unpack)


__all__ = ["Unzpack", "extract", "persist", "unpack"]
