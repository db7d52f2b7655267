#!/usr/bin/env python3
"""
Recursively find files by extension or name substring and optionally delete them.

This is a thin wrapper around the file_sweeper package.
"""

from __future__ import annotations

from file_sweeper.cli import main

if __name__ == "__main__":  # pragma: no cover - script entry point
    try:
        raise SystemExit(main())
    except KeyboardInterrupt as exc:
        raise SystemExit("\nAborted by user.") from exc
