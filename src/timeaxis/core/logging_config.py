"""Console logging setup for the timeaxis package."""

from __future__ import annotations

import logging
import sys

from timeaxis.core.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: int | str = LOG_LEVEL, stream=None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Safe to call more than once; previous handlers installed by this
    function are replaced rather than duplicated.

    Args:
        level: Minimum level for the package logger
        stream: Output stream (default: stderr)

    Returns:
        The configured "timeaxis" logger
    """
    package_logger = logging.getLogger("timeaxis")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_timeaxis_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._timeaxis_handler = True
    package_logger.addHandler(handler)

    return package_logger
