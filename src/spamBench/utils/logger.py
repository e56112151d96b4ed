"""
Logging utilities for spamBench.

This module contains logging configuration and utilities.
"""

import logging
import sys
from typing import Optional, Union
from pathlib import Path


LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name
        level: Logging level

    Returns:
        Logger instance
    """
    logger = logging.getLogger(f"spamBench.{name}")

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        logger.addHandler(console_handler)
        logger.setLevel(level)

        # File handlers from setup_logging live on the package logger
        logger.propagate = True

    return logger


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_format: Optional[str] = None
) -> None:
    """
    Setup logging for a benchmark run.

    Console output comes from the per-component handlers of get_logger; this
    adds an optional file handler on the package logger so every component
    also lands in the run log.

    Args:
        level: Logging level
        log_file: Optional log file path
        log_format: Optional custom log format
    """
    if log_format is None:
        log_format = LOG_FORMAT

    package_logger = logging.getLogger("spamBench")
    package_logger.setLevel(level)
    # Component loggers print to stdout themselves
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            package_logger.removeHandler(handler)
            handler.close()

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
        package_logger.addHandler(file_handler)
