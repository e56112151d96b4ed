"""
Grid-search model training for spamBench.

Every backend is trained the same way: each grid point is cross-validated by
StratifiedCVEvaluator, the best point is chosen by mean AUC (ties: mean
sensitivity, then grid order) and refit on the whole training partition.
"""

from functools import partial
from typing import Any, Dict, List, Optional, Sequence, Tuple
import pandas as pd
import numpy as np
from sklearn.model_selection import ParameterGrid

from .base import BaseModel, CVConfig, ModelConfig
from .cv_evaluator import StratifiedCVEvaluator
from .exceptions import TrainingFailedError
from .results import GridPointResult, ResampleResult
from ..models import ModelFactory
from ..utils.logger import get_logger


def expand_grid(grid: Optional[Dict[str, List[Any]]]) -> List[Dict[str, Any]]:
    """Enumerate grid points in a fixed order (keys sorted, values as listed)."""
    return list(ParameterGrid(grid or {}))


def select_best_grid_point(grid_results: Sequence[GridPointResult]) -> Optional[int]:
    """
    Position of the selected grid point, or None when no point is valid.

    Highest mean AUC wins; ties go to the higher mean sensitivity and then
    to the lowest grid index.
    """
    best = None
    for position, point in enumerate(grid_results):
        if not point.is_valid:
            continue
        key = (point.mean_auc, point.mean_sensitivity, -point.index)
        if best is None or key > best[0]:
            best = (key, position)
    return None if best is None else best[1]


class ModelTrainer:
    """Uniform fit(features, labels, grid, cv) contract over all backends."""

    def __init__(self, backend: str, name: Optional[str] = None,
                 fixed_params: Optional[Dict[str, Any]] = None):
        self.backend = backend
        self.name = name or backend
        self.fixed_params = dict(fixed_params or {})
        # Fail early on unknown backends and parameter names
        self.model_class = ModelFactory.get_backend(backend)
        self.model_class.check_param_names(self.fixed_params)
        self.logger = get_logger("ModelTrainer")

    @classmethod
    def from_config(cls, model_config: ModelConfig) -> 'ModelTrainer':
        return cls(model_config.backend, name=model_config.name, fixed_params=model_config.params)

    def check_grid(self, grid: Optional[Dict[str, List[Any]]]) -> None:
        """Raise ValueError if the grid names a parameter the backend does not take."""
        self.model_class.check_param_names(grid or {})

    def build_model(self, **params) -> BaseModel:
        """Unfitted backend model with fixed params overridden by grid params."""
        return ModelFactory.create_model(self.backend, **{**self.fixed_params, **params})

    def train(
        self,
        X: pd.DataFrame,
        y: np.ndarray,
        grid: Optional[Dict[str, List[Any]]],
        cv_config: CVConfig,
    ) -> Tuple[BaseModel, ResampleResult]:
        """
        Select hyperparameters by cross-validation and refit on all of X.

        Raises:
            TrainingFailedError: If no grid point yields a valid fit, or the
                final refit fails
            ValueError: If the grid names an unknown parameter
        """
        y = np.asarray(y)
        self.check_grid(grid)
        points = expand_grid(grid)
        evaluator = StratifiedCVEvaluator(cv_config)
        folds = evaluator.split(X, y)
        factory = partial(ModelFactory.create_model, self.backend, **self.fixed_params)

        self.logger.info(
            f"GridSearch | model={self.name} | backend={self.backend} | "
            f"grid_points={len(points)} | folds={len(folds)} | n_jobs={cv_config.n_jobs}"
        )

        grid_results = []
        for index, params in enumerate(points):
            point = evaluator.evaluate(factory, X, y, params, index=index, folds=folds)
            grid_results.append(point)
            if point.is_valid:
                self.logger.info(
                    f"GridSearch | {self.name} | point {index} {params} | "
                    f"auc={point.mean_auc:.4f} | sensitivity={point.mean_sensitivity:.4f}"
                )

        best_position = select_best_grid_point(grid_results)
        if best_position is None:
            reasons = "; ".join(p.error or "non-finite AUC" for p in grid_results)
            raise TrainingFailedError(self.backend, f"no valid grid point ({reasons})")

        resample = ResampleResult(
            model_name=self.name,
            backend=self.backend,
            grid_results=tuple(grid_results),
            best_index=best_position,
        )
        self.logger.info(
            f"GridSearch | {self.name} | best_params={resample.best_params} | "
            f"best_auc={resample.best.mean_auc:.4f}"
        )

        try:
            model = self.build_model(**resample.best_params)
            model.fit(X, y)
        except Exception as exc:
            raise TrainingFailedError(self.backend, f"final refit failed: {exc}") from exc

        return model, resample
