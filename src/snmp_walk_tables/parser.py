"""Walk-file reading and key/value parsing.

A walk file holds one logical entry per one-or-more physical lines:

    IF-MIB::ifDescr.1 = STRING: eth0
    SNMPv2-MIB::sysDescr.0 = Linux router 5.15
    continued description text

"::" is normalised to "." first.  A line with exactly one "=" starts a new
entry; any other non-blank line extends the previous entry's value, joined by a
single space.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from snmp_walk_tables.errors import InputError, ParseError
from snmp_walk_tables.patterns import ASSIGNMENT, CONTINUATION_JOINER, KEY_SEPARATOR, OID_SEPARATOR

logger = logging.getLogger(__name__)


def normalise_line(line: str) -> str:
    """Drop the line terminator and replace every '::' with '.'."""
    return line.rstrip("\r\n").replace(OID_SEPARATOR, KEY_SEPARATOR)


def split_entry(line: str) -> tuple[str, str] | None:
    """Return (key, value) if the line holds exactly one '=', else None."""
    if line.count(ASSIGNMENT) != 1:
        return None
    key, value = line.split(ASSIGNMENT)
    return key.strip(), value.strip()


def parse_lines(lines: Iterable[str]) -> dict[str, str]:
    """Parse walk lines into an insertion-ordered {dotted key: value} dict.

    A repeated key overwrites the earlier value but keeps its original position.
    Raises ParseError if a continuation line appears before any key.
    """
    key_values: dict[str, str] = {}
    current_key: str | None = None

    for line_number, raw_line in enumerate(lines, start=1):
        line = normalise_line(raw_line)
        if not line.strip():
            logger.debug("Skipping blank line %d", line_number)
            continue

        entry = split_entry(line)
        if entry is not None:
            current_key, value = entry
            key_values[current_key] = value
            continue

        # Continuation of the previous entry's value
        if current_key is None:
            raise ParseError(f"continuation before first key at line {line_number}: {line!r}", line_number)
        key_values[current_key] = key_values[current_key] + CONTINUATION_JOINER + line

    logger.info("Parsed %d entries", len(key_values))
    return key_values


def read_lines(path: Path) -> list[str]:
    """Read every line of a walk file into memory (the file is closed on return)."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as fopen:
            # Split on line terminators only; form feeds and U+2028 stay inside values
            lines = [line.rstrip("\r\n") for line in fopen]
    except FileNotFoundError as exc:
        raise InputError(f"Input file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read input file {path}: {exc}") from exc
    logger.info("Read %d lines from %s", len(lines), path)
    return lines


def parse_file(path: Path) -> dict[str, str]:
    """Read and parse a walk file."""
    return parse_lines(read_lines(path))
