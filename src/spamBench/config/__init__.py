"""
Configuration modules for spamBench.

This module contains the default run settings and the default model registry.
"""

from .default_config import DEFAULT_CONFIG
from .model_configs import MODEL_CONFIGS

__all__ = [
    "DEFAULT_CONFIG",
    "MODEL_CONFIGS",
]
