"""Utility modules for inkline.

Provides:
- logger: get_logger for logging
"""

from inkline.utils.logger import get_logger

__all__ = [
    "get_logger",
]
