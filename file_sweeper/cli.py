"""
Command-line interface and main entry point for file_sweeper.

Wires argument parsing, logging setup and the sweep together.
"""

from __future__ import annotations

import logging
import sys

from .args_parser import parse_args
from .executor import run_sweep


def main(argv: list[str] | None = None) -> int:
    """Main entry point for file_sweeper CLI."""
    config = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    result = run_sweep(config)
    if result is not None and result.errors:
        logging.info("Completed with %d deletion error(s).", len(result.errors))
    return 0
