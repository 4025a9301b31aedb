"""Shared fixtures: in-memory archive builders and a stable temp dir on WSL."""

from __future__ import annotations

import io
import os
import platform
import sys
import tarfile
import tempfile
import zipfile

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def _is_wsl() -> bool:
    release = platform.release().lower()
    version = platform.version().lower()
    return "microsoft" in release or "microsoft" in version


if _is_wsl() and os.path.isdir("/tmp"):
    os.environ["TMPDIR"] = "/tmp"
    os.environ["TEMP"] = "/tmp"
    os.environ["TMP"] = "/tmp"
    tempfile.tempdir = "/tmp"


def build_zip(entries, compression=zipfile.ZIP_DEFLATED) -> bytes:
    """Build ZIP bytes from (name, content) pairs; content None means directory."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression) as archive:
        for name, content in entries:
            if content is None:
                archive.writestr(zipfile.ZipInfo(name), b"")
            else:
                archive.writestr(name, content)
    return buffer.getvalue()


def build_tar(entries, mode="w:gz") -> bytes:
    """Build tar bytes from (name, content) pairs; content None means directory."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode=mode) as archive:
        for name, content in entries:
            info = tarfile.TarInfo(name)
            if content is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                archive.addfile(info)
            else:
                info.size = len(content)
                archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@pytest.fixture
def zip_bytes():
    return build_zip


@pytest.fixture
def tar_bytes():
    return build_tar


@pytest.fixture
def sample_entries():
    return [
        ("README.md", b"hello"),
        ("assets/", None),
        ("assets/logo.png", bytes([1, 2, 3])),
    ]
