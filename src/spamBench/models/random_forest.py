"""
Random Forest classifier implementation for spamBench.

This module contains the tree-ensemble backend. The ensemble size, split
criterion and minimum leaf size are fixed; the number of candidate features
per split is the tuned parameter.
"""

from typing import List, Optional, Union
import pandas as pd
import numpy as np
from sklearn.ensemble import RandomForestClassifier as SklearnRandomForestClassifier

from .base_model import BaseModel


class RandomForestClassifier(BaseModel):
    """Random Forest classifier implementation."""

    _param_names = ('n_estimators', 'max_features', 'criterion', 'min_samples_leaf',
                    'max_depth', 'random_state', 'n_jobs')

    def __init__(self,
                 n_estimators: int = 300,
                 max_features: Union[str, int, float, None] = 'sqrt',
                 criterion: str = 'gini',
                 min_samples_leaf: int = 1,
                 max_depth: Optional[int] = None,
                 random_state: int = 42,
                 n_jobs: int = 1):
        super().__init__("RandomForest")
        self.n_estimators = n_estimators
        self.max_features = max_features
        self.criterion = criterion
        self.min_samples_leaf = min_samples_leaf
        self.max_depth = max_depth
        self.random_state = random_state
        self.n_jobs = n_jobs

        self.rf_ = None
        self.feature_importance_ = None

    def fit(self, X: pd.DataFrame, y: np.ndarray, **kwargs) -> 'RandomForestClassifier':
        """Fit the Random Forest classifier to the training data."""
        super().fit(X, y, **kwargs)

        max_features = self.max_features
        if isinstance(max_features, int) and max_features > self.n_features_in_:
            raise ValueError(
                f"max_features={max_features} exceeds the number of features ({self.n_features_in_})"
            )

        self.rf_ = SklearnRandomForestClassifier(
            n_estimators=self.n_estimators,
            max_features=max_features,
            criterion=self.criterion,
            min_samples_leaf=self.min_samples_leaf,
            max_depth=self.max_depth,
            random_state=self.random_state,
            n_jobs=self.n_jobs
        )
        self.rf_.fit(self._as_array(X), np.asarray(y))

        self.feature_importance_ = self.rf_.feature_importances_

        return self

    def _estimator(self):
        return self.rf_

    def get_feature_importance(self) -> Optional[np.ndarray]:
        """Get impurity-based feature importance scores."""
        return self.feature_importance_

    def get_feature_names_by_importance(self, top_k: Optional[int] = None) -> List[str]:
        """Get feature names sorted by importance."""
        if not self.is_fitted:
            raise ValueError("Model must be fitted before getting feature names")

        importance_indices = np.argsort(self.feature_importance_)[::-1]

        if top_k is not None:
            importance_indices = importance_indices[:top_k]

        names = self.feature_names_ or [f"feature_{i}" for i in range(self.n_features_in_)]
        return [names[i] for i in importance_indices]
