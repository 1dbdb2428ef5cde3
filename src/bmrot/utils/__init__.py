"""Utility functions for bmrot.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics
"""

from bmrot.utils.logging import RotationStats, configure_logging

__all__ = [
    "RotationStats",
    "configure_logging",
]
