"""Utility modules for rstlex.

Provides:
- logger: get_logger for logging
"""

from rstlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
