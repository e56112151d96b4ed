"""
Base model implementation for spamBench.

This module contains the base model class that all backends inherit from.
"""

from typing import Any, Dict, Optional, Tuple, Union
import pandas as pd
import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils.multiclass import unique_labels

from ..core.base import BaseModel as SpamBenchBaseModel, POSITIVE_LABEL


class BaseModel(SpamBenchBaseModel, ClassifierMixin, BaseEstimator):
    """Base model class for spamBench backends."""

    # Constructor parameters exposed through get_params/set_params
    _param_names: Tuple[str, ...] = ()

    def __init__(self, name: str, **kwargs):
        super().__init__(name, **kwargs)

    def fit(self, X: Union[pd.DataFrame, np.ndarray], y: np.ndarray, **kwargs) -> 'BaseModel':
        """Record feature names and classes; subclasses fit the estimator."""
        if hasattr(X, 'columns'):
            self.feature_names_ = [str(c) for c in X.columns]
        else:
            self.feature_names_ = None
        self.n_features_in_ = X.shape[1]
        self.classes_ = unique_labels(y)
        if len(self.classes_) != 2:
            raise ValueError(f"{self.name} only supports binary classification, got classes {self.classes_}")
        self.is_fitted = True
        return self

    def _check_fitted(self) -> None:
        if not self.is_fitted:
            raise ValueError("Model must be fitted before making predictions")

    def predict(self, X: pd.DataFrame) -> np.ndarray:
        """Make predictions on new data."""
        self._check_fitted()
        return self._estimator().predict(self._as_array(X))

    def predict_proba(self, X: pd.DataFrame) -> np.ndarray:
        """Predict class probabilities, columns ordered as classes_."""
        self._check_fitted()
        return self._estimator().predict_proba(self._as_array(X))

    def predict_positive_proba(self, X: pd.DataFrame, positive_label: str = POSITIVE_LABEL) -> np.ndarray:
        """Probability of the positive class for every row."""
        proba = self.predict_proba(X)
        classes = list(self.classes_)
        if positive_label not in classes:
            raise ValueError(f"Positive label '{positive_label}' not among fitted classes {classes}")
        return proba[:, classes.index(positive_label)]

    def get_feature_importance(self) -> Optional[np.ndarray]:
        """Get feature importance scores."""
        return None

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters for this estimator."""
        return {name: getattr(self, name) for name in self._param_names}

    @classmethod
    def check_param_names(cls, names) -> None:
        """Raise ValueError for names that are not constructor parameters."""
        unknown = sorted(set(names) - set(cls._param_names))
        if unknown:
            raise ValueError(
                f"Unknown parameter(s) {unknown} for {cls.__name__}; valid: {list(cls._param_names)}"
            )

    def set_params(self, **params) -> 'BaseModel':
        """Set constructor parameters; unknown names are rejected."""
        self.check_param_names(params)
        for key, value in params.items():
            setattr(self, key, value)
        return self

    def _estimator(self):
        raise NotImplementedError

    @staticmethod
    def _as_array(X) -> np.ndarray:
        return np.asarray(X, dtype=float)
