"""
Result records produced by cross-validation and holdout evaluation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from sklearn.metrics import auc


RESAMPLE_METRICS = ('auc', 'sensitivity', 'specificity')


@dataclass(frozen=True)
class ConfusionCounts:
    """Confusion matrix cells with respect to the positive class."""
    tp: int
    fp: int
    tn: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    def as_dict(self) -> Dict[str, int]:
        return {'tp': self.tp, 'fp': self.fp, 'tn': self.tn, 'fn': self.fn}


@dataclass(frozen=True, eq=False)
class RocCurve:
    """ROC points ordered by decreasing threshold."""
    fpr: np.ndarray
    tpr: np.ndarray
    thresholds: np.ndarray

    @property
    def auc(self) -> float:
        """Trapezoidal area under the curve."""
        return float(auc(self.fpr, self.tpr))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fpr': self.fpr.tolist(),
            'tpr': self.tpr.tolist(),
            'thresholds': self.thresholds.tolist(),
        }


@dataclass(frozen=True)
class FoldMetrics:
    """Validation metrics of one cross-validation fold."""
    fold: int
    auc: float
    sensitivity: float
    specificity: float


@dataclass(frozen=True)
class GridPointResult:
    """Cross-validated metrics of one hyperparameter combination."""
    index: int
    params: Dict[str, Any]
    folds: Tuple[FoldMetrics, ...] = ()
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return (self.error is None and len(self.folds) > 0
                and all(np.isfinite(f.auc) for f in self.folds))

    def mean(self, metric: str) -> float:
        if not self.folds:
            return float('nan')
        return float(np.mean([getattr(f, metric) for f in self.folds]))

    def std(self, metric: str) -> float:
        if not self.folds:
            return float('nan')
        return float(np.std([getattr(f, metric) for f in self.folds]))

    @property
    def mean_auc(self) -> float:
        return self.mean('auc')

    @property
    def mean_sensitivity(self) -> float:
        return self.mean('sensitivity')


@dataclass(frozen=True)
class ResampleResult:
    """All grid points tried for one model and the one that was selected."""
    model_name: str
    backend: str
    grid_results: Tuple[GridPointResult, ...]
    best_index: int

    @property
    def best(self) -> GridPointResult:
        return self.grid_results[self.best_index]

    @property
    def best_params(self) -> Dict[str, Any]:
        return dict(self.best.params)

    def to_frame(self) -> pd.DataFrame:
        """Fold-level metrics of the selected grid point, one row per fold."""
        return pd.DataFrame([
            {'model': self.model_name, 'fold': f.fold, 'auc': f.auc,
             'sensitivity': f.sensitivity, 'specificity': f.specificity}
            for f in self.best.folds
        ], columns=['model', 'fold', *RESAMPLE_METRICS])

    def grid_frame(self) -> pd.DataFrame:
        """Mean metrics of every grid point, including failed ones."""
        rows = []
        for point in self.grid_results:
            row = {'model': self.model_name, 'grid_index': point.index,
                   'params': point.params, 'selected': point.index == self.best_index,
                   'error': point.error}
            for metric in RESAMPLE_METRICS:
                row[f'{metric}_mean'] = point.mean(metric)
            rows.append(row)
        return pd.DataFrame(rows)

    def summary(self) -> Dict[str, float]:
        out = {}
        for metric in RESAMPLE_METRICS:
            out[f'{metric}_mean'] = self.best.mean(metric)
            out[f'{metric}_std'] = self.best.std(metric)
        return out


@dataclass(frozen=True, eq=False)
class EvaluationReport:
    """Holdout metrics of one trained model."""
    model_name: str
    backend: str
    best_params: Dict[str, Any]
    confusion: ConfusionCounts
    accuracy: float
    precision: float
    recall: float
    f1: float
    auc: float
    roc_curve: RocCurve
    feature_importance: Optional[pd.Series] = None
    status: str = field(default="evaluated", init=False)

    def metrics(self) -> Dict[str, float]:
        return {'accuracy': self.accuracy, 'precision': self.precision,
                'recall': self.recall, 'f1': self.f1, 'auc': self.auc}


@dataclass(frozen=True)
class ModelFailure:
    """A registered model that could not be trained."""
    model_name: str
    backend: str
    reason: str
    status: str = field(default="failed", init=False)


ModelOutcome = Union[EvaluationReport, ModelFailure]


@dataclass
class BenchmarkResult:
    """Everything one harness run produced, keyed by model name in registry order."""
    outcomes: Dict[str, ModelOutcome] = field(default_factory=dict)
    resamples: Dict[str, ResampleResult] = field(default_factory=dict)
    fitted_models: Dict[str, Any] = field(default_factory=dict)

    @property
    def reports(self) -> Dict[str, EvaluationReport]:
        return {k: v for k, v in self.outcomes.items() if isinstance(v, EvaluationReport)}

    @property
    def failures(self) -> Dict[str, ModelFailure]:
        return {k: v for k, v in self.outcomes.items() if isinstance(v, ModelFailure)}

    def model_names(self) -> List[str]:
        return list(self.outcomes)
