"""Shared configuration for the flattab converters.

Environment variables (read from the process environment, or from a ``.env``
file at the project root):

  FLATTAB_LOG_LEVEL   -- logging level for the command-line tools (default WARNING)
  FLATTAB_LOG_FORMAT  -- logging format string for the command-line tools
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ─── Output Defaults ──────────────────────────────────────────────────────────

# Text-table mode joins fields with a comma, like the original unjustify tool
TABLE_OUTPUT_DELIMITER = ","
TABLE_LINE_DELIMITER = "\n"

# Flatten mode joins fields with a single space
UNNEST_OUTPUT_DELIMITER = " "
UNNEST_LINE_DELIMITER = "\n"
UNNEST_ATTRIBUTE_SEPARATOR = "."
UNNEST_MISSING = ""


def log_level() -> int:
    """Return the numeric logging level named by FLATTAB_LOG_LEVEL (unknown names fall back to WARNING)."""
    name = os.getenv("FLATTAB_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: int = 0) -> None:
    """Configure root logging for a command-line entry point.

    Each ``-v`` lowers the threshold one step below the configured level.
    Log records go to stderr so stdout carries only table output.
    """
    level = max(logging.DEBUG, log_level() - 10 * verbose)
    logging.basicConfig(level=level, format=os.getenv("FLATTAB_LOG_FORMAT", DEFAULT_LOG_FORMAT))
