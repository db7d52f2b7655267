"""Shared assertion helpers for file sweeper tests."""

from __future__ import annotations

from pathlib import Path


def assert_equal(actual, expected, *, message: str | None = None) -> None:
    """Assert equality with a clearer error message."""
    failure_message = message or f"Expected {expected!r} but received {actual!r}"
    assert actual == expected, failure_message


def assert_present(*paths: Path) -> None:
    """Assert that every path still exists on disk."""
    missing = [str(path) for path in paths if not path.exists()]
    assert not missing, f"Expected paths to survive the sweep: {missing}"


def assert_removed(*paths: Path) -> None:
    """Assert that every path has been deleted."""
    remaining = [str(path) for path in paths if path.exists()]
    assert not remaining, f"Expected paths to be deleted: {remaining}"
