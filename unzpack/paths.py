"""Path containment helpers for archive extraction."""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath

from .errors import UnsafePathError

_SEPARATOR_PATTERN = re.compile(r"[\\/]")
_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


def sanitize_entry_name(name: str) -> PurePosixPath:
    """Turn an archive entry name into a safe relative path.

    Empty and ``.`` segments are dropped. Absolute names, drive prefixes,
    NUL bytes and ``..`` segments are rejected with `UnsafePathError`.
    Any name starting with a letter and a colon (`a:b.txt` too) counts as a
    drive prefix and is refused, even where it is a legal POSIX name.
    The result may be empty, which denotes the target root itself.
    """
    if "\x00" in name:
        raise UnsafePathError(name, "contains a NUL byte")
    if name.startswith(("/", "\\")):
        raise UnsafePathError(name, "is an absolute path")
    if _DRIVE_PATTERN.match(name):
        raise UnsafePathError(name, "has a drive prefix")

    parts = []
    for segment in _SEPARATOR_PATTERN.split(name):
        if segment in ("", "."):
            continue
        if segment == "..":
            raise UnsafePathError(name, "contains a parent directory reference")
        parts.append(segment)
    return PurePosixPath(*parts)


def is_within(root: Path, target: Path) -> bool:
    """True when `target` is `root` or lies below it (segment-wise, not by prefix)."""
    return target == root or root in target.parents


def resolve_within(root: Path, relative: PurePosixPath, entry_name: str = "") -> Path:
    """Join `relative` onto the canonical `root` and enforce containment.

    The joined path is resolved, so symlinks already present in the output
    tree cannot redirect a write outside `root`.
    """
    target = root.joinpath(*relative.parts).resolve()
    if not is_within(root, target):
        raise UnsafePathError(entry_name or str(relative))
    return target


__all__ = ["is_within", "resolve_within", "sanitize_entry_name"]
