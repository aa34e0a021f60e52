"""
loguru sink setup for the CLI and for hosts that embed the adapter.
"""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=None) -> int:
    """
    Replace loguru's default handler with a single one at ``level``.

    Args:
        level: loguru level name (DEBUG, INFO, WARNING, ...)
        sink: where to write, defaults to stderr so block output on stdout stays clean

    Returns:
        the loguru handler id
    """
    logger.remove()
    return logger.add(sink or sys.stderr, level=level.upper(), format=LOG_FORMAT)
