"""
Evaluation harness for spamBench.

Runs every registered model through the same protocol:

1. Apply the train-fitted FeatureTransform to train and holdout (no refit)
2. Train with ModelTrainer (cross-validated grid search)
3. Score the untouched holdout and compute confusion/ROC metrics

A TrainingFailedError for one model becomes a ModelFailure entry; the other
models are still evaluated. Models are not ranked here.
"""

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .base import CVConfig, ModelConfig
from .exceptions import ColumnMismatchError, TrainingFailedError
from .model_trainer import ModelTrainer
from .results import BenchmarkResult, EvaluationReport, ModelFailure
from ..data.dataset import Dataset
from ..evaluation.metrics import MetricsCalculator
from ..preprocessing.standardizer import FeatureTransform
from ..utils.logger import get_logger


class EvaluationHarness:
    """Train and score a registry of models on one train/holdout split."""

    def __init__(self, registry: Sequence[ModelConfig], cv_config: Optional[CVConfig] = None):
        names = [m.name for m in registry]
        if len(set(names)) != len(names):
            raise ValueError(f"Model names must be unique, got {names}")
        self.registry: List[ModelConfig] = list(registry)
        # Bad backend or parameter names abort before any model is trained
        for model_config in self.registry:
            ModelTrainer.from_config(model_config).check_grid(model_config.grid)
        self.cv_config = cv_config or CVConfig()
        self.metrics = MetricsCalculator(positive_label=self.cv_config.positive_label)
        self.logger = get_logger("EvaluationHarness")

    def run(self, train: Dataset, holdout: Dataset, transform: FeatureTransform) -> BenchmarkResult:
        """
        Evaluate every registered model.

        Args:
            train: Training partition (raw features)
            holdout: Holdout partition (raw features)
            transform: FeatureTransform fitted on train only

        Returns:
            BenchmarkResult with one outcome per registered model

        Raises:
            ColumnMismatchError: If either partition does not match the
                transform's columns
        """
        for name, part in (("train", train), ("holdout", holdout)):
            try:
                transform.check_columns(part.features)
            except ColumnMismatchError:
                self.logger.error(f"{name} features do not match the fitted transform")
                raise

        X_train = transform.apply(train.features)
        X_holdout = transform.apply(holdout.features)
        y_train = train.label_array()
        y_holdout = holdout.label_array()

        self.logger.info(
            f"Evaluating {len(self.registry)} model(s): train={len(y_train)}, holdout={len(y_holdout)}"
        )

        result = BenchmarkResult()
        for model_config in self.registry:
            trainer = ModelTrainer.from_config(model_config)
            try:
                model, resample = trainer.train(X_train, y_train, model_config.grid, self.cv_config)
                report = self.score_holdout(model_config, model, resample.best_params, X_holdout, y_holdout)
            except TrainingFailedError as exc:
                self.logger.error(f"{model_config.name} | {exc}")
                result.outcomes[model_config.name] = ModelFailure(
                    model_name=model_config.name,
                    backend=model_config.backend,
                    reason=exc.reason,
                )
                continue

            result.resamples[model_config.name] = resample
            result.fitted_models[model_config.name] = model
            result.outcomes[model_config.name] = report
            self.logger.info(
                f"{model_config.name} | holdout " +
                " | ".join(f"{k}={v:.4f}" for k, v in report.metrics().items())
            )

        return result

    def score_holdout(self, model_config: ModelConfig, model, best_params,
                      X_holdout: pd.DataFrame, y_holdout: np.ndarray) -> EvaluationReport:
        """
        Score a fitted model against the transformed holdout.

        Raises:
            TrainingFailedError: If the model cannot produce finite holdout
                probabilities
        """
        try:
            y_pred = model.predict(X_holdout)
            y_score = np.asarray(
                model.predict_positive_proba(X_holdout, self.cv_config.positive_label), dtype=float
            )
        except Exception as exc:
            raise TrainingFailedError(model_config.backend, f"holdout prediction failed: {exc}") from exc
        n_bad = int((~np.isfinite(y_score)).sum())
        if n_bad:
            raise TrainingFailedError(
                model_config.backend, f"{n_bad} non-finite holdout probabilities"
            )
        metrics = self.metrics.calculate_metrics(y_holdout, y_pred, y_score)

        importance = model.get_feature_importance()
        if importance is not None:
            importance = pd.Series(importance, index=X_holdout.columns, name=model_config.name)

        return EvaluationReport(
            model_name=model_config.name,
            backend=model_config.backend,
            best_params=dict(best_params),
            confusion=metrics['confusion'],
            accuracy=metrics['accuracy'],
            precision=metrics['precision'],
            recall=metrics['recall'],
            f1=metrics['f1'],
            auc=metrics['auc'],
            roc_curve=metrics['roc_curve'],
            feature_importance=importance,
        )
