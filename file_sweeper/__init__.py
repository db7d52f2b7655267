"""
File sweeper package.

Recursively find files by extension or name substring and optionally delete them.
"""

__version__ = "0.1.0"

from . import args_parser, cli, config, executor, walker
from .config import SweepConfig, parse_extensions
from .executor import SweepResult, process_entries, run_sweep
from .walker import (
    Entry,
    EntryKind,
    display_text,
    extension_of,
    iter_entries,
    iter_matches,
    matches,
)

__all__ = [
    "Entry",
    "EntryKind",
    "SweepConfig",
    "SweepResult",
    "__version__",
    "args_parser",
    "cli",
    "config",
    "display_text",
    "executor",
    "extension_of",
    "iter_entries",
    "iter_matches",
    "matches",
    "parse_extensions",
    "process_entries",
    "run_sweep",
    "walker",
]
