"""Archive readers: a small indexed view over container formats.

The materializer only needs an entry count and, per index, a name plus a
readable content stream. `ArchiveReader` captures that contract; concrete
readers delegate all decoding to the standard library.
"""

from __future__ import annotations

import errno
import gzip
import lzma
import os
import tarfile
import zipfile
import zlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import IO, Callable, Iterator, Tuple, Type, Union

from .constants import ENTRY_SEPARATORS
from .errors import InvalidArchiveError, UnsafePathError

PathLike = Union[str, "os.PathLike[str]"]

_VERIFY_CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class ArchiveEntry:
    """One named member of an archive."""

    name: str
    size: int = 0
    opener: Callable[[], IO[bytes]] = field(default=None, repr=False, compare=False)  # type: ignore[assignment]
    directory: bool = False

    @property
    def is_directory(self) -> bool:
        return self.directory or self.name.endswith(ENTRY_SEPARATORS)

    def open(self) -> IO[bytes]:
        """Open the entry's content stream. Streams are meant to be read once."""
        if self.opener is None:
            raise InvalidArchiveError(f"Archive entry {self.name!r} has no content stream")
        return self.opener()


class ArchiveReader(ABC):
    """Random-access view over an opened archive file."""

    # Exceptions the decoder raises while streaming corrupted member data.
    format_errors: Tuple[Type[BaseException], ...] = ()

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def entry(self, index: int) -> ArchiveEntry:
        """Return the entry stored at `index` (archive-storage order)."""

    @abstractmethod
    def close(self) -> None:
        ...

    def verify(self) -> None:
        """Check archive-level integrity once every entry has been read."""

    def __iter__(self) -> Iterator[ArchiveEntry]:
        for index in range(len(self)):
            yield self.entry(index)

    def __enter__(self) -> "ArchiveReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class ZipArchiveReader(ArchiveReader):
    """ZIP container reader backed by `zipfile`."""

    # Encrypted members raise RuntimeError, unknown compression methods NotImplementedError.
    format_errors = (zipfile.BadZipFile, zlib.error, EOFError, RuntimeError, NotImplementedError)

    def __init__(self, path: PathLike) -> None:
        super().__init__(path)
        try:
            self._zip = zipfile.ZipFile(self.path)
        except zipfile.BadZipFile as exc:
            raise InvalidArchiveError(f"Not a valid ZIP archive: {self.path}: {exc}") from exc
        self._members = self._zip.infolist()

    def __len__(self) -> int:
        return len(self._members)

    def entry(self, index: int) -> ArchiveEntry:
        info = self._members[index]
        return ArchiveEntry(
            name=info.filename,
            size=info.file_size,
            opener=partial(self._zip.open, info),
            directory=info.is_dir(),
        )

    def close(self) -> None:
        self._zip.close()


class TarArchiveReader(ArchiveReader):
    """Tar reader (plain, gzip, bzip2 or xz) backed by `tarfile`.

    Only regular files and directories are exposed. Links and special files
    could point anywhere on the file system, so they are refused.
    """

    format_errors = (tarfile.TarError, gzip.BadGzipFile, lzma.LZMAError, zlib.error, EOFError)

    def __init__(self, path: PathLike) -> None:
        super().__init__(path)
        try:
            self._tar = tarfile.open(self.path, "r:*")
        except tarfile.TarError as exc:
            raise InvalidArchiveError(f"Not a valid tar archive: {self.path}: {exc}") from exc
        try:
            self._members = self._tar.getmembers()
        except self.format_errors as exc:
            self._tar.close()
            raise InvalidArchiveError(f"Corrupted tar archive: {self.path}: {exc}") from exc

    def __len__(self) -> int:
        return len(self._members)

    def entry(self, index: int) -> ArchiveEntry:
        member = self._members[index]
        if member.isdir():
            return ArchiveEntry(name=member.name.rstrip("/") + "/", directory=True)
        if not member.isfile():
            raise UnsafePathError(member.name, "links and special files are not extracted")
        return ArchiveEntry(
            name=member.name,
            size=member.size,
            opener=partial(self._open_member, member),
        )

    def _open_member(self, member: tarfile.TarInfo) -> IO[bytes]:
        stream = self._tar.extractfile(member)
        if stream is None:
            raise InvalidArchiveError(f"Tar member {member.name!r} has no content")
        return stream

    def verify(self) -> None:
        """Drain the compressed stream so the gzip CRC trailer gets checked.

        `extractfile` stops at the member size and never reaches the trailer.
        """
        try:
            while self._tar.fileobj.read(_VERIFY_CHUNK_SIZE):
                pass
        except self.format_errors as exc:
            raise InvalidArchiveError(f"Corrupted tar archive: {self.path}: {exc}") from exc

    def close(self) -> None:
        self._tar.close()


def open_archive(path: PathLike) -> ArchiveReader:
    """Open `path` with the reader matching its contents (ZIP first, then tar)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    if zipfile.is_zipfile(path):
        return ZipArchiveReader(path)
    if path.is_file() and tarfile.is_tarfile(path):
        return TarArchiveReader(path)
    raise InvalidArchiveError(f"Unrecognized archive format: {path}")


__all__ = [
    "ArchiveEntry",
    "ArchiveReader",
    "TarArchiveReader",
    "ZipArchiveReader",
    "open_archive",
]
