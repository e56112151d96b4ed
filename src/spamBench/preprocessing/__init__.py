"""
Preprocessing modules for spamBench.

This module contains the train-only feature standardisation.
"""

from .standardizer import (
    FeatureStandardizer,
    FeatureTransform,
    apply_feature_transform,
    fit_feature_transform,
)

__all__ = [
    "FeatureStandardizer",
    "FeatureTransform",
    "apply_feature_transform",
    "fit_feature_transform",
]
