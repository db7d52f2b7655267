"""
Runtime configuration for file_sweeper.

Holds the immutable settings produced by argument parsing and shared
read-only by the walker and the executor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

DEFAULT_ROOT_PATH = Path(".")
EXTENSION_DELIMITER = ","


@dataclass(frozen=True)
class SweepConfig:
    """Settings for a single sweep run."""

    root_path: Path = DEFAULT_ROOT_PATH
    extensions: frozenset[str] = field(default_factory=frozenset)
    name_contains: str | None = None
    ignore_case: bool = False
    delete: bool = False
    dry_run: bool = False
    verbose: bool = False

    @property
    def should_scan(self) -> bool:
        """Return True when the tree has to be walked at all."""
        return self.dry_run or self.delete

    @property
    def removes_files(self) -> bool:
        """Return True when matched files are actually unlinked."""
        return self.delete and not self.dry_run

    @property
    def normalized_pattern(self) -> str | None:
        """Return the name pattern, lowercased when matching ignores case."""
        if self.name_contains is None:
            return None
        if self.ignore_case:
            return self.name_contains.lower()
        return self.name_contains


def parse_extensions(values: Iterable[str] | None) -> frozenset[str]:
    """Flatten repeated and comma-delimited extension values.

    Pieces are kept verbatim: no dot stripping and no case folding, so
    ``-e TXT`` only matches ``*.TXT``. An empty piece matches files that
    have no extension at all.
    """
    if not values:
        return frozenset()
    extensions: set[str] = set()
    for value in values:
        extensions.update(value.split(EXTENSION_DELIMITER))
    return frozenset(extensions)
