"""
Cross-validation evaluator for spamBench.

Resampling is an explicit step: given a model factory, one parameter
combination and the (already transformed) training data, it fits a fresh
model on every training fold and scores the matching validation fold.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple
import pandas as pd
import numpy as np
from joblib import Parallel, delayed
from sklearn.model_selection import RepeatedStratifiedKFold

from .base import BaseEvaluator, BaseModel, CVConfig
from .results import FoldMetrics, GridPointResult
from ..evaluation.metrics import MetricsCalculator
from ..utils.logger import get_logger


ModelFactoryFn = Callable[..., BaseModel]


def _fit_and_score_fold(
    model_factory: ModelFactoryFn,
    params: Dict[str, Any],
    X: pd.DataFrame,
    y: np.ndarray,
    train_idx: np.ndarray,
    val_idx: np.ndarray,
    fold: int,
    positive_label: str,
) -> Tuple[int, Optional[FoldMetrics], Optional[str]]:
    """Fit on one training fold and score its validation fold.

    Returns (fold, metrics, error); a failed fit or unusable scores yield
    metrics None and the error text so the caller can mark the grid point
    invalid.
    """
    try:
        model = model_factory(**params)
        model.fit(X.iloc[train_idx], y[train_idx])
        X_val = X.iloc[val_idx]
        y_pred = model.predict(X_val)
        y_score = np.asarray(model.predict_positive_proba(X_val, positive_label), dtype=float)
        if not np.all(np.isfinite(y_score)):
            raise ValueError(f"{int((~np.isfinite(y_score)).sum())} non-finite probabilities")
        scores = MetricsCalculator(positive_label=positive_label).fold_metrics(y[val_idx], y_pred, y_score)
    except Exception as exc:
        return fold, None, f"{type(exc).__name__}: {exc}"

    return fold, FoldMetrics(fold=fold, **scores), None


class StratifiedCVEvaluator(BaseEvaluator):
    """Repeated stratified k-fold evaluator."""

    def __init__(self, config: CVConfig):
        super().__init__(config)
        self.logger = get_logger("StratifiedCVEvaluator")
        self._validate_config(config)
        self.cv = RepeatedStratifiedKFold(
            n_splits=config.n_folds,
            n_repeats=config.n_repeats,
            random_state=config.random_state
        )

    @staticmethod
    def _validate_config(config: CVConfig) -> None:
        if config.n_folds < 2:
            raise ValueError(f"cv_folds must be at least 2, got {config.n_folds}")
        if config.n_repeats < 1:
            raise ValueError(f"n_repeats must be at least 1, got {config.n_repeats}")
        if config.n_jobs == 0:
            raise ValueError("n_jobs must be non-zero")

    def split(self, X: pd.DataFrame, y: np.ndarray) -> List[Tuple[np.ndarray, np.ndarray]]:
        """Fold indices; identical for every call with the same data and seed."""
        return list(self.cv.split(X, y))

    def evaluate(
        self,
        model_factory: ModelFactoryFn,
        X: pd.DataFrame,
        y: np.ndarray,
        params: Dict[str, Any],
        index: int = 0,
        folds: Optional[List[Tuple[np.ndarray, np.ndarray]]] = None,
    ) -> GridPointResult:
        """
        Cross-validate one parameter combination.

        Args:
            model_factory: Callable building an unfitted model from params
            X: Transformed training features
            y: Training labels
            params: Parameter combination to evaluate
            index: Position of this combination in its grid
            folds: Precomputed fold indices (computed here when omitted)

        Returns:
            GridPointResult with one FoldMetrics per fold, or the error of
            the first failing fold
        """
        y = np.asarray(y)
        if folds is None:
            folds = self.split(X, y)

        outcomes = Parallel(n_jobs=self.config.n_jobs)(
            delayed(_fit_and_score_fold)(
                model_factory, params, X, y, train_idx, val_idx, fold, self.config.positive_label
            )
            for fold, (train_idx, val_idx) in enumerate(folds)
        )

        errors = [(fold, err) for fold, _, err in outcomes if err is not None]
        if errors:
            fold, err = errors[0]
            message = f"fold {fold} failed: {err}"
            self.logger.warning(f"Grid point {index} {params} | {message}")
            self.results_ = GridPointResult(index=index, params=dict(params), error=message)
            return self.results_

        fold_metrics = tuple(m for _, m, _ in sorted(outcomes, key=lambda o: o[0]))
        self.results_ = GridPointResult(index=index, params=dict(params), folds=fold_metrics)
        if not self.results_.is_valid:
            self.logger.warning(f"Grid point {index} {params} | non-finite fold AUC")
        return self.results_
