"""
Logistic regression classifier (sklearn wrapper).
"""

from typing import Optional, Union
import numpy as np
import pandas as pd
from sklearn.linear_model import LogisticRegression

from .base_model import BaseModel


class LogisticRegressionClassifier(BaseModel):
    """
    Thin wrapper around sklearn LogisticRegression with the common interface:
    - predict
    - predict_proba
    - get_feature_importance (|coef|)
    """

    _param_names = ('C', 'solver', 'max_iter', 'tol', 'class_weight', 'random_state')

    def __init__(
        self,
        C: float = 1.0,
        solver: str = 'lbfgs',
        max_iter: int = 1000,
        tol: float = 1e-4,
        class_weight: Optional[Union[str, dict]] = None,
        random_state: Optional[int] = None
    ) -> None:
        super().__init__("LogisticRegression")
        self.C = C
        self.solver = solver
        self.max_iter = max_iter
        self.tol = tol
        self.class_weight = class_weight
        self.random_state = random_state

        self.model_: Optional[LogisticRegression] = None

    def fit(self, X: Union[np.ndarray, pd.DataFrame], y: Union[np.ndarray, pd.Series], **kwargs):
        super().fit(X, y)
        self.model_ = LogisticRegression(
            C=self.C,
            solver=self.solver,
            max_iter=self.max_iter,
            tol=self.tol,
            class_weight=self.class_weight,
            random_state=self.random_state,
        )
        self.model_.fit(self._as_array(X), np.asarray(y))
        return self

    def _estimator(self):
        return self.model_

    def get_feature_importance(self) -> np.ndarray:
        if self.model_ is None:
            raise ValueError("Model must be fitted before getting feature importance")
        # coef_ shape: (1, n_features) for binary
        return np.abs(self.model_.coef_.ravel())
