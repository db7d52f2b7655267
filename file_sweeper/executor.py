"""
Action execution for file_sweeper.

Consumes the filtered entry stream and either previews or deletes each match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .config import SweepConfig
from .walker import Entry, display_text, iter_matches, matches


@dataclass
class SweepResult:
    """Outcome of one sweep run."""

    deleted: int = 0
    matched: int = 0
    errors: list[tuple[Path, OSError]] = field(default_factory=list)


def _delete_entry(entry: Entry, result: SweepResult) -> None:
    """Unlink a single file, recording failures instead of raising."""
    try:
        entry.path.unlink()
    except OSError as exc:
        logging.debug("Failed to delete %s: %s", display_text(str(entry.path)), exc)
        print(f"Error : {display_text(str(exc))}")
        result.errors.append((entry.path, exc))
    else:
        logging.debug("Deleted %s", display_text(str(entry.path)))
        result.deleted += 1


def print_summary(result: SweepResult) -> None:
    """Print the deleted-file count line."""
    print(f"[{result.deleted}] - Files deleted.")


def process_entries(entries: Iterable[Entry], config: SweepConfig) -> SweepResult:
    """Print or delete every entry that matches ``config`` when it is consumed.

    The filter is re-evaluated here against the config passed in, so a
    sequence produced under one config is narrowed by this one. Deletion
    errors are reported and skipped; the loop always runs to completion.
    """
    result = SweepResult()
    for entry in entries:
        if not matches(config, entry):
            continue
        result.matched += 1

        if config.should_scan:
            print(entry.display_name)
        if config.removes_files:
            _delete_entry(entry, result)

    if config.delete:
        print_summary(result)
    return result


def run_sweep(config: SweepConfig) -> SweepResult | None:
    """Walk and act on the tree, or do nothing when neither mode is enabled."""
    if not config.should_scan:
        logging.debug("Neither --delete nor --dry-run given; nothing to do.")
        return None
    logging.debug("Scanning %s", config.root_path)
    result = process_entries(iter_matches(config), config)
    logging.debug(
        "Matched %d file(s), deleted %d, %d error(s)",
        result.matched,
        result.deleted,
        len(result.errors),
    )
    return result
