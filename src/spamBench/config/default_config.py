"""
Default configuration for spamBench.

This module contains the default configuration settings.
"""

from typing import Dict, Any

from .model_configs import MODEL_CONFIGS

DEFAULT_CONFIG: Dict[str, Any] = {
    # Data and output
    "data_path": None,
    "output_dir": "./results",

    # Partitioning
    "split_fraction": 0.8,
    "random_seed": 42,

    # Cross-validation
    "cv_folds": 5,
    "n_repeats": 1,
    "n_jobs": 1,

    # Model registry
    "models": MODEL_CONFIGS,

    # Reporting
    "generate_plots": False,
    "save_models": False,
}
