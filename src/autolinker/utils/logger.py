"""Minimal logging utilities for autolinker.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from autolinker.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Linkifying fragment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "autolinker." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("replacer")
        >>> logger.name
        'autolinker.replacer'
    """
    if not (name == "autolinker" or name.startswith("autolinker.")):
        name = f"autolinker.{name}"
    return logging.getLogger(name)
