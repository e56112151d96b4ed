"""
Helper utilities for spamBench.

This module contains various helper functions and utilities.
"""

from typing import Any, Union
from pathlib import Path
import joblib


def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure directory exists, create if it doesn't."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_object(obj: Any, path: Union[str, Path]) -> None:
    """Save object to file using joblib."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(obj, path)


def load_object(path: Union[str, Path]) -> Any:
    """Load object from file using joblib."""
    return joblib.load(path)


def format_time(seconds: float) -> str:
    """Format time in seconds to human readable format."""
    if seconds < 60:
        return f"{seconds:.2f}s"
    elif seconds < 3600:
        minutes = seconds / 60
        return f"{minutes:.2f}m"
    else:
        hours = seconds / 3600
        return f"{hours:.2f}h"
