"""
Argument parsing for file_sweeper CLI.

Handles command-line argument definition and conversion into a SweepConfig.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from . import __version__
from .config import DEFAULT_ROOT_PATH, SweepConfig, parse_extensions


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Add traversal root and filtering arguments."""
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=DEFAULT_ROOT_PATH,
        help="The root directory for the search (default: current directory).",
    )
    parser.add_argument(
        "-e",
        "--extension",
        action="extend",
        nargs="+",
        metavar="EXT",
        help="Filter files by extension, e.g. txt,png. May be repeated.",
    )
    parser.add_argument(
        "-n",
        "--name-contains",
        metavar="SUBSTR",
        help="Filter files containing this pattern in their name.",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Perform a case-insensitive name search.",
    )


def add_action_arguments(parser: argparse.ArgumentParser) -> None:
    """Add action arguments."""
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete the found files.",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Show files that would be deleted without removing them.",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add logging and informational arguments."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def build_parser() -> argparse.ArgumentParser:
    """Create the ArgumentParser for the file_sweeper CLI."""
    parser = argparse.ArgumentParser(
        prog="file-sweeper",
        description="Recursively find files by extension or name and optionally delete them.",
    )
    add_filter_arguments(parser)
    add_action_arguments(parser)
    add_output_arguments(parser)
    return parser


def config_from_namespace(args: argparse.Namespace) -> SweepConfig:
    """Convert parsed arguments into an immutable SweepConfig."""
    return SweepConfig(
        root_path=args.path,
        extensions=parse_extensions(args.extension),
        name_contains=args.name_contains,
        ignore_case=args.ignore_case,
        delete=args.delete,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )


def parse_args(argv: list[str]) -> SweepConfig:
    """Parse command-line arguments for file_sweeper.

    Exits with status 2 on malformed input. The root path is not checked
    here; a missing directory simply yields no entries when walked.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return config_from_namespace(args)
