"""
Utility modules for spamBench.

This module contains logging, configuration and file helpers.
"""

from .logger import get_logger, setup_logging
from .config import ConfigManager
from .helpers import ensure_directory, format_time, load_object, save_object

__all__ = [
    "get_logger",
    "setup_logging",
    "ConfigManager",
    "ensure_directory",
    "format_time",
    "load_object",
    "save_object",
]
