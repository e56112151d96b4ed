"""Tests for grid search, model selection and refitting."""

from __future__ import annotations

import numpy as np
import pytest

from spamBench.core.base import CVConfig, ModelConfig
from spamBench.core.exceptions import TrainingFailedError
from spamBench.core.model_trainer import ModelTrainer, expand_grid, select_best_grid_point
from spamBench.core.results import FoldMetrics, GridPointResult
from spamBench.data.feature_names import N_FEATURES


def grid_point(index: int, auc: float, sensitivity: float, error: str = None) -> GridPointResult:
    if error:
        return GridPointResult(index=index, params={"i": index}, error=error)
    folds = tuple(FoldMetrics(fold=f, auc=auc, sensitivity=sensitivity, specificity=0.5) for f in range(3))
    return GridPointResult(index=index, params={"i": index}, folds=folds)


def test_highest_mean_auc_selected() -> None:
    points = [grid_point(0, 0.90, 0.9), grid_point(1, 0.95, 0.5), grid_point(2, 0.93, 0.99)]
    assert select_best_grid_point(points) == 1


def test_auc_tie_broken_by_sensitivity_then_index() -> None:
    points = [grid_point(0, 0.95, 0.80), grid_point(1, 0.95, 0.85), grid_point(2, 0.95, 0.85)]
    assert select_best_grid_point(points) == 1


def test_invalid_points_never_selected() -> None:
    points = [grid_point(0, 0.0, 0.0, error="fold 0 failed: boom"), grid_point(1, 0.6, 0.5)]
    assert select_best_grid_point(points) == 1
    assert select_best_grid_point([points[0]]) is None


def test_grid_expansion_order() -> None:
    points = expand_grid({"max_features": [6, 12, 18]})
    assert points == [{"max_features": 6}, {"max_features": 12}, {"max_features": 18}]
    assert expand_grid({}) == [{}]
    assert expand_grid(None) == [{}]


def test_logistic_trains_with_empty_grid(make_dataset) -> None:
    dataset = make_dataset()
    trainer = ModelTrainer("logistic")

    model, resample = trainer.train(dataset.features, dataset.label_array(), {}, CVConfig(n_folds=3))

    assert model.is_fitted
    assert resample.best_params == {}
    assert len(resample.grid_results) == 1
    assert len(resample.to_frame()) == 3
    proba = model.predict_positive_proba(dataset.features)
    assert proba.shape == (dataset.n_rows,)


def test_random_forest_importance_covers_every_feature(make_dataset) -> None:
    dataset = make_dataset()
    trainer = ModelTrainer.from_config(ModelConfig(
        name="rf", backend="randomforest",
        params={"n_estimators": 20}, grid={"max_features": [3, 6]},
    ))

    model, resample = trainer.train(dataset.features, dataset.label_array(),
                                    {"max_features": [3, 6]}, CVConfig(n_folds=3))

    assert resample.best_params["max_features"] in (3, 6)
    importance = model.get_feature_importance()
    assert importance.shape == (N_FEATURES,)
    assert importance.sum() == pytest.approx(1.0)
    assert model.n_estimators == 20


def test_every_grid_point_failing_raises(make_dataset) -> None:
    dataset = make_dataset()
    trainer = ModelTrainer("randomforest", fixed_params={"n_estimators": 5})

    with pytest.raises(TrainingFailedError) as excinfo:
        trainer.train(dataset.features, dataset.label_array(), {"max_features": [100]}, CVConfig(n_folds=3))

    assert excinfo.value.backend == "randomforest"
    assert "max_features=100" in excinfo.value.reason


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValueError):
        ModelTrainer("gradient_boosting")


def test_grid_params_override_fixed_params() -> None:
    trainer = ModelTrainer("svm", fixed_params={"C": 4.0, "gamma": "auto"})
    model = trainer.build_model(C=0.5)
    assert model.C == 0.5
    assert model.gamma == "auto"
    assert np.isclose(trainer.build_model().C, 4.0)


def test_misspelled_grid_parameter_rejected(make_dataset) -> None:
    dataset = make_dataset()
    trainer = ModelTrainer("randomforest", fixed_params={"n_estimators": 5})
    with pytest.raises(ValueError, match="max_feature"):
        trainer.train(dataset.features, dataset.label_array(), {"max_feature": [2, 4, 6]}, CVConfig(n_folds=3))


def test_misspelled_fixed_parameter_rejected() -> None:
    with pytest.raises(ValueError, match="n_estimator"):
        ModelTrainer("randomforest", fixed_params={"n_estimator": 5})
