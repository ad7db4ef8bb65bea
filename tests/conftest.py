"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

SAMPLE_WALK = [
    "system.sysDescr.0 = Linux box",
    "ifTable.ifEntry.ifDescr.1 = eth0",
    "ifTable.ifEntry.ifDescr.2 = eth1",
    "ifTable.ifEntry.ifSpeed.1 = 1000",
    "ifTable.ifEntry.ifSpeed.2 = 100",
]


@pytest.fixture
def sample_lines() -> list[str]:
    """The interface-table walk used by the end-to-end scenarios."""
    return list(SAMPLE_WALK)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """The interface-table walk written to a temporary file."""
    path = tmp_path / "walk.txt"
    path.write_text("\n".join(SAMPLE_WALK) + "\n", encoding="utf-8")
    return path
