"""
Logging setup for scripts and applications embedding the pairing system.

Library modules only ever call logging.getLogger(__name__); handlers are
configured here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

from .errors import ConfigurationError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def parse_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[str, int] = logging.INFO) -> logging.Logger:
    """
    Send log records to stdout at `level` and return the pairing logger.
    """
    logging.basicConfig(
        level=parse_level(level),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    return logging.getLogger("pairing")
