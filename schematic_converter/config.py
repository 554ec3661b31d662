"""Configuration constants and .env loading.

WHY: Centralizes the few tunable values (decode depth bound, log level)
and the fixed output naming so they are easy to find and override
without touching decoding or conversion logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level; the loader functions validate environment overrides and
raise a clear ValueError for bad values.

RULES:
- OUTPUT_EXTENSION is fixed: ".bo2"
- SCHEMATIC_MAX_DEPTH bounds list/compound nesting (default 512)
- SCHEMATIC_LOG_LEVEL sets the default logging level (default WARNING)
- Environment values are validated lazily, when the CLI asks for them
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

OUTPUT_EXTENSION = ".bo2"
"""Extension of the converted object file, including the dot."""

DEFAULT_MAX_DEPTH = 512
"""Maximum list/compound nesting accepted by the decoder."""

DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def load_max_depth() -> int:
    """Read the decode nesting bound from SCHEMATIC_MAX_DEPTH.

    RULES:
    - Missing or empty → DEFAULT_MAX_DEPTH
    - Must be a positive integer, otherwise ValueError
    """
    raw = os.getenv("SCHEMATIC_MAX_DEPTH", "").strip()
    if not raw:
        return DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        raise ValueError(
            "SCHEMATIC_MAX_DEPTH must be an integer, got '{}'".format(raw)
        ) from None
    if depth <= 0:
        raise ValueError("SCHEMATIC_MAX_DEPTH must be positive, got {}".format(depth))
    return depth


def load_log_level() -> int:
    """Read the logging level name from SCHEMATIC_LOG_LEVEL."""
    name = os.getenv("SCHEMATIC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError("Unknown SCHEMATIC_LOG_LEVEL '{}'".format(name))
    return level
