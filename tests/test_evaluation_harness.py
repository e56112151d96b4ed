"""Tests for the train/holdout evaluation harness."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from spamBench.core.base import CVConfig, ModelConfig
from spamBench.core.evaluation_harness import EvaluationHarness
from spamBench.core.exceptions import ColumnMismatchError, TrainingFailedError
from spamBench.core.results import EvaluationReport, ModelFailure
from spamBench.data.dataset import Dataset
from spamBench.data.partitioner import StratifiedPartitioner
from spamBench.evaluation.reporter import ResultsReporter
from spamBench.models import MODEL_BACKENDS, LogisticRegressionClassifier
from spamBench.preprocessing.standardizer import fit_feature_transform


@pytest.fixture
def split(make_dataset):
    return StratifiedPartitioner(0.7, random_seed=5).split(make_dataset(n_spam=80, n_ham=120))


def test_every_model_gets_a_report(split, small_registry) -> None:
    transform = fit_feature_transform(split.train.features)
    result = EvaluationHarness(small_registry, CVConfig(n_folds=3)).run(split.train, split.holdout, transform)

    assert result.model_names() == ["logistic", "randomforest", "svm"]
    assert not result.failures
    for report in result.reports.values():
        assert report.confusion.total == split.holdout.n_rows
        assert 0.0 <= report.auc <= 1.0
        assert report.roc_curve.fpr[0] == 0.0 and report.roc_curve.tpr[-1] == 1.0

    assert result.reports["logistic"].feature_importance.index.tolist() == list(split.train.feature_names)
    assert result.reports["svm"].feature_importance is None
    assert result.reports["randomforest"].best_params["max_features"] in (2, 4)


def test_failed_model_does_not_stop_the_others(split, small_registry) -> None:
    registry = [
        small_registry[0],
        ModelConfig(name="broken_rf", backend="randomforest",
                    grid={"max_features": [500]}, params={"n_estimators": 5}),
        small_registry[2],
    ]
    transform = fit_feature_transform(split.train.features)
    result = EvaluationHarness(registry, CVConfig(n_folds=3)).run(split.train, split.holdout, transform)

    assert isinstance(result.outcomes["logistic"], EvaluationReport)
    assert isinstance(result.outcomes["svm"], EvaluationReport)
    failure = result.outcomes["broken_rf"]
    assert isinstance(failure, ModelFailure)
    assert "broken_rf" not in result.fitted_models

    table = ResultsReporter().build_report_table(result)
    row = table.set_index("model").loc["broken_rf"]
    assert row["status"] == "failed"
    assert np.isnan(row["auc"])
    assert "max_features" in row["error"]


def test_holdout_with_reordered_columns_rejected(split, small_registry) -> None:
    transform = fit_feature_transform(split.train.features)
    features = split.holdout.features
    shuffled = Dataset(
        features=features[list(reversed(features.columns))],
        labels=split.holdout.labels,
        row_ids=split.holdout.row_ids,
    )
    with pytest.raises(ColumnMismatchError):
        EvaluationHarness(small_registry[:1], CVConfig(n_folds=3)).run(split.train, shuffled, transform)


def test_holdout_is_not_used_for_fitting(split, small_registry) -> None:
    transform = fit_feature_transform(split.train.features)
    corrupted = Dataset(
        features=split.holdout.features + 1000.0,
        labels=split.holdout.labels,
        row_ids=split.holdout.row_ids,
    )
    harness = EvaluationHarness(small_registry[:1], CVConfig(n_folds=3))

    clean = harness.run(split.train, split.holdout, transform)
    shifted = harness.run(split.train, corrupted, transform)

    np.testing.assert_allclose(
        clean.fitted_models["logistic"].model_.coef_,
        shifted.fitted_models["logistic"].model_.coef_,
    )


def test_duplicate_model_names_rejected() -> None:
    registry = [ModelConfig(name="svm", backend="svm"), ModelConfig(name="svm", backend="svm")]
    with pytest.raises(ValueError):
        EvaluationHarness(registry)


def test_report_table_lists_confusion_counts(split, small_registry) -> None:
    transform = fit_feature_transform(split.train.features)
    result = EvaluationHarness(small_registry[:1], CVConfig(n_folds=3)).run(split.train, split.holdout, transform)
    table = ResultsReporter().build_report_table(result)

    row = table.iloc[0]
    assert row["tp"] + row["fp"] + row["tn"] + row["fn"] == split.holdout.n_rows
    assert isinstance(table, pd.DataFrame)


class NaNProbabilityClassifier(LogisticRegressionClassifier):
    """Fits normally but returns unusable probabilities."""

    def predict_proba(self, X):
        return np.full((len(X), 2), np.nan)


def test_nan_probability_backend_fails_alone(split, monkeypatch) -> None:
    monkeypatch.setitem(MODEL_BACKENDS, "nanlogit", NaNProbabilityClassifier)
    registry = [ModelConfig(name="nanlogit", backend="nanlogit"), ModelConfig(name="logistic", backend="logistic")]
    transform = fit_feature_transform(split.train.features)

    result = EvaluationHarness(registry, CVConfig(n_folds=3)).run(split.train, split.holdout, transform)

    failure = result.outcomes["nanlogit"]
    assert isinstance(failure, ModelFailure)
    assert "non-finite" in failure.reason
    assert isinstance(result.outcomes["logistic"], EvaluationReport)


def test_nan_holdout_probabilities_become_training_failure(split) -> None:
    transform = fit_feature_transform(split.train.features)
    X_train = transform.apply(split.train.features)
    X_holdout = transform.apply(split.holdout.features)
    model = NaNProbabilityClassifier().fit(X_train, split.train.label_array())
    model_config = ModelConfig(name="nanlogit", backend="logistic")

    harness = EvaluationHarness([ModelConfig(name="logistic", backend="logistic")])
    with pytest.raises(TrainingFailedError):
        harness.score_holdout(model_config, model, {}, X_holdout, split.holdout.label_array())


def test_misspelled_grid_parameter_rejected_before_training() -> None:
    registry = [ModelConfig(name="randomforest", backend="randomforest", grid={"max_feature": [2, 4, 6]})]
    with pytest.raises(ValueError, match="max_feature"):
        EvaluationHarness(registry)
