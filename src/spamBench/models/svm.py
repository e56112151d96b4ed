"""
Radial-basis SVM classifier.

Inputs are expected to be standardised already; the kernel width defaults
to 1 / n_features.
"""

import numpy as np
import pandas as pd
from typing import Optional, Union
from sklearn.svm import SVC as _SVC

from .base_model import BaseModel


class SVMClassifier(BaseModel):
    """
    SVM classifier wrapper.

    Probability estimates are enabled so the model can be scored by AUC.
    """

    _param_names = ('C', 'kernel', 'gamma', 'probability', 'random_state')

    def __init__(self, C: float = 1.0, kernel: str = 'rbf',
                 gamma: Union[str, float] = 'auto',
                 probability: bool = True, random_state: Optional[int] = 42):
        """
        Args:
            C: Penalty parameter
            kernel: Kernel type
            gamma: Kernel width; 'auto' resolves to 1 / n_features
            probability: Enable probability estimates
            random_state: Seed for the probability calibration
        """
        super().__init__("SVM")
        self.C = C
        self.kernel = kernel
        self.gamma = gamma
        self.probability = probability
        self.random_state = random_state

        self.svm_classifier_ = None
        self.gamma_ = None

    def fit(self, X: Union[np.ndarray, pd.DataFrame], y: Union[np.ndarray, pd.Series], **kwargs) -> 'SVMClassifier':
        super().fit(X, y)
        X_arr = self._as_array(X)
        self.gamma_ = self._resolve_gamma(X_arr)

        self.svm_classifier_ = _SVC(
            C=self.C,
            kernel=self.kernel,
            gamma=self.gamma_,
            probability=self.probability,
            random_state=self.random_state,
        )
        self.svm_classifier_.fit(X_arr, np.asarray(y))
        return self

    def _resolve_gamma(self, X: np.ndarray) -> float:
        """Numeric kernel width: 'auto' is 1 / n_features, 'scale' is 1 / (n_features * var(X))."""
        if self.gamma == 'auto':
            return 1.0 / self.n_features_in_
        if self.gamma == 'scale':
            variance = X.var()
            return 1.0 / (self.n_features_in_ * variance) if variance != 0 else 1.0
        return float(self.gamma)

    def _estimator(self):
        return self.svm_classifier_

    def get_feature_importance(self) -> Optional[np.ndarray]:
        """Only linear kernels carry per-feature weights."""
        if self.svm_classifier_ is None:
            raise ValueError("Model must be fitted before getting feature importance")
        if self.kernel != 'linear':
            return None
        return np.abs(self.svm_classifier_.coef_[0])
