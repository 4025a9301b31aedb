"""Reconstruct archive entries as files and directories under a target root."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from .archive import ArchiveEntry, ArchiveReader, PathLike
from .constants import DEFAULT_COPY_BUFFER_SIZE
from .errors import InvalidArchiveError, TargetNotADirectoryError, UnsafePathError
from .logging_config import get_logger
from .paths import resolve_within, sanitize_entry_name

_log = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Counters describing one completed extraction."""

    root: Path
    files: int = 0
    directories: int = 0
    bytes_written: int = 0


def prepare_target_root(outdir: PathLike) -> Path:
    """Create `outdir` when missing and return its canonical form.

    Raises `TargetNotADirectoryError` when the path exists as anything other
    than a directory.
    """
    outdir = Path(outdir)
    if not outdir.exists():
        outdir.mkdir(parents=True, exist_ok=True)
    root = outdir.resolve()
    if not root.is_dir():
        raise TargetNotADirectoryError(f'path "{root}" is not a directory')
    return root


def materialize(
    archive: ArchiveReader,
    root: PathLike,
    *,
    buffer_size: int = DEFAULT_COPY_BUFFER_SIZE,
) -> ExtractionResult:
    """Write every entry of `archive` below `root`, in archive order.

    The first failing entry aborts the run. Entries written before it are
    left on disk. Archive-level integrity is checked after the last entry.
    """
    root = prepare_target_root(root)
    result = ExtractionResult(root=root)

    for index in range(len(archive)):
        entry = archive.entry(index)
        relative = sanitize_entry_name(entry.name)
        target = resolve_within(root, relative, entry.name)

        if entry.is_directory:
            target.mkdir(parents=True, exist_ok=True)
            result.directories += 1
            _log.debug("Created directory %s", target)
            continue

        if target == root:
            raise UnsafePathError(entry.name, "file entry has an empty path")
        target.parent.mkdir(parents=True, exist_ok=True)
        written = _write_entry(archive, entry, target, buffer_size)
        result.bytes_written += written
        result.files += 1
        _log.debug("Wrote %s (%d bytes)", target, written)

    archive.verify()
    return result


def _write_entry(archive: ArchiveReader, entry: ArchiveEntry, target: Path, buffer_size: int) -> int:
    try:
        with entry.open() as src, target.open("wb") as dst:
            shutil.copyfileobj(src, dst, buffer_size)
            return dst.tell()
    except archive.format_errors as exc:
        raise InvalidArchiveError(f"Corrupted archive entry {entry.name!r}: {exc}") from exc


__all__ = ["ExtractionResult", "materialize", "prepare_target_root"]
