"""
Logging utilities for applications embedding preference_similarity.

The package itself only installs a NullHandler; call setup_logging() to see
its debug output on a stream.
"""

import logging
import sys
from typing import TextIO

from preference_similarity.config import get_log_level
from preference_similarity.constants import LOG_FORMAT

PACKAGE_LOGGER = "preference_similarity"


def setup_logging(level: int | str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """
    Route preference_similarity log records to a stream.

    Args:
        level: Logging level (default: PREFERENCE_SIMILARITY_LOG_LEVEL setting)
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    if level is None:
        level = get_log_level()
    elif isinstance(level, str):
        level = level.strip().upper()

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)

    # Clear existing stream handlers so repeated calls don't duplicate output
    for handler in pkg_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)

    return pkg_logger
