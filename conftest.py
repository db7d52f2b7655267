"""Pytest configuration and shared fixtures for the file sweeper."""

# pylint: disable=wrong-import-position

import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from file_sweeper.config import SweepConfig


@pytest.fixture(name="sweep_tree")
def fixture_sweep_tree(tmp_path):
    """Populate a small tree with files at two levels plus an empty directory."""
    (tmp_path / "a.txt").write_text("Meow1")
    (tmp_path / "b.txt").write_text("hxh >>>")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "photo.jpg").write_text("jpg")
    (nested / "Notes.TXT").write_text("upper")
    (tmp_path / "empty").mkdir()
    return tmp_path


@pytest.fixture(name="make_config")
def fixture_make_config(tmp_path):
    """Return a factory building a SweepConfig rooted at tmp_path by default."""

    def _make(**overrides) -> SweepConfig:
        overrides.setdefault("root_path", tmp_path)
        return SweepConfig(**overrides)

    return _make


@pytest.fixture(name="undecodable_file")
def fixture_undecodable_file(tmp_path):
    """Create ``bad\\xff.txt`` in tmp_path, a name that is not valid UTF-8."""
    if sys.platform in {"win32", "darwin"}:
        pytest.skip("filesystem requires names to be valid Unicode")
    raw_path = os.path.join(os.fsencode(tmp_path), b"bad\xff.txt")
    try:
        fd = os.open(raw_path, os.O_CREAT | os.O_WRONLY, 0o644)
    except OSError as exc:
        pytest.skip(f"filesystem rejects undecodable names: {exc}")
    os.close(fd)
    return Path(os.fsdecode(raw_path))
