"""
Directory traversal and filtering for file_sweeper.

Walks a tree lazily and yields the entries that satisfy the sweep filter.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterator

from .config import SweepConfig


class EntryKind(enum.Enum):
    """File type of a traversed entry. Symlinks are never followed."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """A single filesystem node discovered during traversal."""

    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        """Return the final path component."""
        return self.path.name

    @property
    def display_name(self) -> str:
        """Return the name with undecodable bytes replaced by U+FFFD."""
        return display_text(self.name)

    @property
    def is_file(self) -> bool:
        """Return True for regular files."""
        return self.kind is EntryKind.FILE


def display_text(text: str) -> str:
    """Make filesystem-decoded text printable.

    Bytes that were not valid in the filesystem encoding come back from
    ``os.scandir`` as lone surrogates, which ``print`` cannot encode.
    """
    return os.fsencode(text).decode("utf-8", "replace")


def extension_of(filename: str) -> str:
    """Return the text after the last dot, or "" when there is no extension.

    Dotfiles such as ``.env`` have no extension and ``a.tar.gz`` yields ``gz``.
    An extension holding undecodable bytes is treated as no extension.
    """
    suffix = PurePath(filename).suffix[1:]
    if display_text(suffix) != suffix:
        return ""
    return suffix


def matches(config: SweepConfig, entry: Entry) -> bool:
    """Evaluate the sweep filter for one entry against the given config."""
    if not entry.is_file:
        return False

    if config.extensions and extension_of(entry.name) not in config.extensions:
        return False

    pattern = config.normalized_pattern
    if pattern is None:
        return True
    name = entry.display_name
    filename = name.lower() if config.ignore_case else name
    return pattern in filename


def _classify(dir_entry: os.DirEntry) -> EntryKind:
    """Determine the kind of a scandir entry without following symlinks.

    Raises:
        OSError: If the entry cannot be stat'ed (e.g. removed mid-walk).
    """
    if dir_entry.is_symlink():
        return EntryKind.SYMLINK
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def _scan_directory(directory: Path) -> list[Entry]:
    """Read one directory level, dropping children whose type cannot be read.

    Raises:
        OSError: If the directory itself cannot be opened.
    """
    children: list[Entry] = []
    with os.scandir(directory) as iterator:
        for dir_entry in iterator:
            try:
                kind = _classify(dir_entry)
            except OSError as exc:
                logging.debug("Skipping %s: %s", dir_entry.path, exc)
                continue
            children.append(Entry(path=Path(dir_entry.path), kind=kind))
    children.sort(key=lambda child: child.name)
    return children


def _root_entry(root: Path) -> Entry | None:
    """Build the entry for the walk root, or None when it is unreachable.

    The root itself is resolved through symlinks, unlike the entries below it.
    """
    try:
        if root.is_dir():
            kind = EntryKind.DIRECTORY
        elif root.is_file():
            kind = EntryKind.FILE
        elif root.is_symlink():
            kind = EntryKind.SYMLINK
        elif root.exists():
            kind = EntryKind.OTHER
        else:
            logging.debug("Root path %s does not exist", root)
            return None
    except OSError as exc:
        logging.debug("Cannot inspect root path %s: %s", root, exc)
        return None
    return Entry(path=root, kind=kind)


def iter_entries(root: Path) -> Iterator[Entry]:
    """Yield the root and every entry reachable below it, depth first.

    Each directory is listed in full (sorted by name) before its first
    subdirectory is entered. Errors on individual entries or directories
    are logged and skipped, so the walk as a whole never raises.
    """
    root_entry = _root_entry(root)
    if root_entry is None:
        return
    yield root_entry
    if root_entry.kind is not EntryKind.DIRECTORY:
        return

    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        try:
            children = _scan_directory(directory)
        except OSError as exc:
            logging.debug("Skipping unreadable directory %s: %s", directory, exc)
            continue
        subdirs: list[Path] = []
        for child in children:
            yield child
            if child.kind is EntryKind.DIRECTORY:
                subdirs.append(child.path)
        pending.extend(reversed(subdirs))


def iter_matches(config: SweepConfig) -> Iterator[Entry]:
    """Lazily yield the entries under config.root_path that pass the filter."""
    for entry in iter_entries(config.root_path):
        if matches(config, entry):
            yield entry
