"""
Feature standardisation for spamBench.

Centering and scaling statistics are computed from the training partition
only. The fitted FeatureTransform is immutable and can be applied to any
feature table with the same columns, so the holdout never feeds back into
the statistics.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
import pandas as pd

from ..core.base import BasePreprocessor
from ..core.exceptions import ColumnMismatchError
from ..utils.logger import get_logger


def _frozen(values) -> np.ndarray:
    array = np.array(values, dtype=float)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class FeatureTransform:
    """Per-feature center and scale fitted on training features."""
    feature_names: Tuple[str, ...]
    center: np.ndarray
    scale: np.ndarray
    zero_variance: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'feature_names', tuple(self.feature_names))
        object.__setattr__(self, 'center', _frozen(self.center))
        object.__setattr__(self, 'scale', _frozen(self.scale))
        object.__setattr__(self, 'zero_variance', tuple(self.zero_variance))
        n = len(self.feature_names)
        if self.center.shape != (n,) or self.scale.shape != (n,):
            raise ValueError("center and scale must have one value per feature")
        if np.any(self.scale == 0):
            raise ValueError("scale values must be non-zero")

    @property
    def n_features(self) -> int:
        return len(self.feature_names)

    def check_columns(self, X: pd.DataFrame) -> None:
        """Raise ColumnMismatchError unless X has the fitted columns in the fitted order."""
        actual = tuple(str(c) for c in X.columns)
        if actual != self.feature_names:
            raise ColumnMismatchError(self.feature_names, actual)

    def apply(self, X: pd.DataFrame) -> pd.DataFrame:
        """Return (X - center) / scale as a new frame; X is left untouched."""
        self.check_columns(X)
        values = (X.to_numpy(dtype=float) - self.center) / self.scale
        return pd.DataFrame(values, index=X.index, columns=X.columns)

    def to_dict(self) -> dict:
        return {
            'feature_names': list(self.feature_names),
            'center': self.center.tolist(),
            'scale': self.scale.tolist(),
            'zero_variance': list(self.zero_variance),
        }


def fit_feature_transform(X: pd.DataFrame) -> FeatureTransform:
    """
    Compute per-column mean and sample standard deviation.

    A column with zero (or undefined) standard deviation gets scale 1, so
    its transformed values are x - center rather than NaN.
    """
    if X.shape[0] == 0:
        raise ValueError("Cannot fit a feature transform on an empty table")
    values = X.to_numpy(dtype=float)
    center = values.mean(axis=0)
    scale = values.std(axis=0, ddof=1) if X.shape[0] > 1 else np.zeros(X.shape[1])
    constant = ~np.isfinite(scale) | (scale == 0)
    scale = np.where(constant, 1.0, scale)
    names = [str(c) for c in X.columns]
    return FeatureTransform(
        feature_names=names,
        center=center,
        scale=scale,
        zero_variance=[name for name, flag in zip(names, constant) if flag],
    )


def apply_feature_transform(transform: FeatureTransform, X: pd.DataFrame) -> pd.DataFrame:
    """Functional form of FeatureTransform.apply."""
    return transform.apply(X)


class FeatureStandardizer(BasePreprocessor):
    """Preprocessor wrapper that fits a FeatureTransform once and reuses it."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.logger = get_logger("FeatureStandardizer")
        self.transform_: Optional[FeatureTransform] = None

    def fit(self, X: pd.DataFrame, y: Optional[np.ndarray] = None) -> 'FeatureStandardizer':
        """Fit centering/scaling statistics on training features."""
        self.transform_ = fit_feature_transform(X)
        if self.transform_.zero_variance:
            self.logger.warning(
                f"Zero-variance features scaled by 1: {list(self.transform_.zero_variance)}"
            )
        self.is_fitted = True
        self.logger.info(f"Feature transform fitted on {X.shape[0]} rows x {X.shape[1]} features")
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Apply the fitted statistics without refitting."""
        if not self.is_fitted:
            raise ValueError("Standardizer must be fitted before transforming")
        return self.transform_.apply(X)
