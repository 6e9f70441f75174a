"""Minimal logging utilities for rstlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from rstlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Opened token stream")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "rstlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'rstlex.mymodule'
    """
    if not (name == "rstlex" or name.startswith("rstlex.")):
        name = f"rstlex.{name}"
    return logging.getLogger(name)
