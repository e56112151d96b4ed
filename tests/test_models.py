"""Tests for the classifier backends."""

from __future__ import annotations

import numpy as np
import pytest

from spamBench.data.feature_names import N_FEATURES
from spamBench.models import (
    LogisticRegressionClassifier,
    ModelFactory,
    RandomForestClassifier,
    SVMClassifier,
)


@pytest.fixture
def training_data(make_dataset):
    dataset = make_dataset()
    return dataset.features, dataset.label_array()


def test_svm_default_kernel_width_is_inverse_feature_count(training_data) -> None:
    X, y = training_data
    model = SVMClassifier().fit(X, y)
    assert model.gamma_ == pytest.approx(1.0 / N_FEATURES)
    assert model.get_feature_importance() is None


def test_random_forest_importances_sum_to_one(training_data) -> None:
    X, y = training_data
    model = RandomForestClassifier(n_estimators=25, max_features=6).fit(X, y)
    importance = model.get_feature_importance()
    assert importance.shape == (N_FEATURES,)
    assert importance.sum() == pytest.approx(1.0)
    # Spam rows differ on the first five features
    assert set(model.get_feature_names_by_importance(top_k=1)) <= set(X.columns[:5])


def test_random_forest_rejects_too_many_candidate_features(training_data) -> None:
    X, y = training_data
    with pytest.raises(ValueError):
        RandomForestClassifier(n_estimators=5, max_features=N_FEATURES + 1).fit(X, y)


def test_positive_probability_follows_spam_column(training_data) -> None:
    X, y = training_data
    model = LogisticRegressionClassifier().fit(X, y)

    proba = model.predict_proba(X)
    spam = model.predict_positive_proba(X)

    assert list(model.classes_) == ["Not_Spam", "Spam"]
    np.testing.assert_allclose(spam, proba[:, 1])
    np.testing.assert_allclose(proba.sum(axis=1), 1.0)
    assert set(model.predict(X)) <= {"Spam", "Not_Spam"}


def test_models_require_two_classes(training_data) -> None:
    X, _ = training_data
    with pytest.raises(ValueError):
        LogisticRegressionClassifier().fit(X, np.array(["Spam"] * len(X)))


def test_predict_before_fit_rejected(training_data) -> None:
    X, _ = training_data
    with pytest.raises(ValueError):
        SVMClassifier().predict(X)


def test_factory_resolves_backends_case_insensitively() -> None:
    model = ModelFactory.create_model("RandomForest", n_estimators=10)
    assert isinstance(model, RandomForestClassifier)
    assert model.get_params()["n_estimators"] == 10
    with pytest.raises(ValueError):
        ModelFactory.create_model("xgboost")


def test_set_params_rejects_unknown_names() -> None:
    model = SVMClassifier()
    model.set_params(C=3.0)
    assert model.C == 3.0
    with pytest.raises(ValueError):
        model.set_params(degree=3)


def test_unknown_constructor_argument_rejected() -> None:
    with pytest.raises(TypeError):
        RandomForestClassifier(max_feature=6)
    with pytest.raises(ValueError):
        RandomForestClassifier.check_param_names(["max_feature"])
    RandomForestClassifier.check_param_names(["max_features", "n_estimators"])


def test_svm_explicit_kernel_width_is_kept(training_data) -> None:
    X, y = training_data
    model = SVMClassifier(gamma=0.25)
    assert model.gamma_ is None
    model.fit(X, y)
    assert model.gamma_ == pytest.approx(0.25)
    assert model.svm_classifier_.gamma == pytest.approx(0.25)
