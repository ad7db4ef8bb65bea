"""Shared configuration for the SNMP walk-to-table converter.

Defaults can be overridden through environment variables, optionally set in a
.env file at the project root:

  SNMP_WALK_TABLES_FORMAT     -- default output format ("text" or "html")
  SNMP_WALK_TABLES_LOG_LEVEL  -- default log level (DEBUG, INFO, WARNING, ERROR)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

OUTPUT_FORMATS = ("text", "html")
DEFAULT_FORMAT = "text"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"

FORMAT_ENV_VAR = "SNMP_WALK_TABLES_FORMAT"
LOG_LEVEL_ENV_VAR = "SNMP_WALK_TABLES_LOG_LEVEL"


def _env_choice(var: str, choices: tuple[str, ...], default: str) -> str:
    """Return the environment value for var if it is one of choices, else default."""
    value = os.getenv(var, "").strip()
    if not value:
        return default
    if value not in choices:
        logger.warning("Ignoring %s=%r (expected one of %s); using %r", var, value, ", ".join(choices), default)
        return default
    return value


def default_format() -> str:
    """Output format used when none is given on the command line."""
    return _env_choice(FORMAT_ENV_VAR, OUTPUT_FORMATS, DEFAULT_FORMAT)


def default_log_level() -> str:
    """Log level used when --log-level is not given."""
    return _env_choice(LOG_LEVEL_ENV_VAR, LOG_LEVELS, DEFAULT_LOG_LEVEL)
