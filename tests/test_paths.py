from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from unzpack.errors import UnsafePathError
from unzpack.paths import is_within, resolve_within, sanitize_entry_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("README.md", "README.md"),
        ("assets/", "assets"),
        ("./assets//logo.png", "assets/logo.png"),
        ("win\\style\\path.txt", "win/style/path.txt"),
        ("a/./b/", "a/b"),
    ],
)
def test_sanitize_entry_name_normalizes(name, expected):
    assert sanitize_entry_name(name) == PurePosixPath(expected)


def test_sanitize_root_marker_is_empty():
    assert sanitize_entry_name("./").parts == ()


@pytest.mark.parametrize(
    "name",
    ["../x", "a/../../x", "a/..", "/etc/passwd", "\\server\\share", "C:\\x", "d:relative", "a:b.txt", "nul\x00byte"],
)
def test_sanitize_entry_name_rejects_escapes(name):
    with pytest.raises(UnsafePathError) as excinfo:
        sanitize_entry_name(name)
    assert excinfo.value.entry_name == name


def test_is_within_uses_path_segments():
    root = Path("/out")
    assert is_within(root, Path("/out"))
    assert is_within(root, Path("/out/a/b"))
    assert not is_within(root, Path("/outside/a"))
    assert not is_within(root, Path("/"))


def test_resolve_within_returns_canonical_child(tmp_path):
    root = tmp_path.resolve()
    target = resolve_within(root, PurePosixPath("a/b.txt"))
    assert target == root / "a" / "b.txt"


def test_resolve_within_rejects_symlinked_escape(tmp_path):
    root = (tmp_path / "out").resolve()
    root.mkdir()
    (tmp_path / "outside").mkdir()
    (root / "up").symlink_to(tmp_path / "outside", target_is_directory=True)

    with pytest.raises(UnsafePathError, match="up/x.txt"):
        resolve_within(root, PurePosixPath("up/x.txt"), "up/x.txt")
