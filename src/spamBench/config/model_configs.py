"""
Model registry defaults for spamBench.

Each entry names a backend, the hyperparameter grid searched by
cross-validation and the parameters held fixed for every grid point.
"""

from typing import Any, Dict, List

MODEL_CONFIGS: List[Dict[str, Any]] = [
    {
        "name": "logistic",
        "backend": "logistic",
        "grid": {},
        "params": {
            "C": 1.0,
            "max_iter": 1000
        }
    },
    {
        "name": "randomforest",
        "backend": "randomforest",
        "grid": {
            "max_features": [6, 12, 18]
        },
        "params": {
            "n_estimators": 300,
            "criterion": "gini",
            "min_samples_leaf": 1
        }
    },
    {
        "name": "svm",
        "backend": "svm",
        "grid": {
            "C": [0.5, 1.0, 2.0]
        },
        "params": {
            "kernel": "rbf",
            # 'auto' resolves to 1 / n_features
            "gamma": "auto"
        }
    },
]
