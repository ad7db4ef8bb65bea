"""Main walk-to-table pipeline and command-line entry point.

Runs the four stages in order:
  1. parser      -- walk lines -> {dotted key: value}
  2. tree        -- keys -> OID trie
  3. extraction  -- trie leaves -> tables
  4. formatting  -- tables -> text or HTML on stdout

Usage:
    snmp-walk-tables walk.txt              # fixed-width text
    snmp-walk-tables walk.txt html > walk.html
    python -m snmp_walk_tables.pipeline walk.txt text --log-level INFO
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from snmp_walk_tables.config import LOG_LEVELS, OUTPUT_FORMATS, default_format, default_log_level
from snmp_walk_tables.errors import InputError, ParseError
from snmp_walk_tables.extraction import extract_tables
from snmp_walk_tables.formatting import render
from snmp_walk_tables.parser import parse_lines, read_lines
from snmp_walk_tables.schema import Table
from snmp_walk_tables.tree import build_tree

logger = logging.getLogger(__name__)


def run(lines: Iterable[str]) -> dict[str, Table]:
    """Parse walk lines and return the extracted tables, keyed by table name."""
    key_values = parse_lines(lines)
    root = build_tree(key_values)
    return extract_tables(key_values, root)


def convert(path: Path, output_format: str = "text", sink: TextIO | None = None) -> dict[str, Table]:
    """Convert the walk file at path and render it to sink (stdout by default).

    Returns the extracted tables so callers can inspect what was rendered.
    """
    tables = run(read_lines(path))
    render(tables, output_format, sink if sink is not None else sys.stdout)
    return tables


def build_parser() -> argparse.ArgumentParser:
    """Command-line arguments: input path, optional format, optional log level."""
    parser = argparse.ArgumentParser(description="Convert an SNMP walk dump into text or HTML tables")
    parser.add_argument("input", type=Path, help="Path to the SNMP walk file")
    parser.add_argument(
        "format",
        nargs="?",
        choices=OUTPUT_FORMATS,
        default=default_format(),
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help="Logging verbosity on stderr (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, convert the walk file, and exit non-zero on failure."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        convert(args.input, args.format, sys.stdout)
    except InputError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except ParseError as exc:
        logger.error("Malformed walk file %s: %s", args.input, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
