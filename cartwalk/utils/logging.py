"""
Logging setup for cartwalk.

Usage:
    from cartwalk.utils.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from functools import cache

from cartwalk.utils.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level() -> int:
    return getattr(logging, LOG_LEVEL.upper(), logging.INFO)


def _configure_root_logger() -> None:
    """Configure root logger once; stdout is left for program output."""
    root = logging.getLogger()

    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "get_logger"]
