"""Core adminctl utilities.

This module exports configuration and logging helpers for use throughout
the application.
"""

from adminctl.core.config import Settings, get_settings
from adminctl.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
