"""Logging helper for inkline.

Example:
    >>> from inkline.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning line")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``inkline.``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("scanner").name
        'inkline.scanner'
    """
    if not (name == "inkline" or name.startswith("inkline.")):
        name = f"inkline.{name}"
    return logging.getLogger(name)
