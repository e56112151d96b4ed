"""Tests for confusion-matrix and ROC metrics."""

from __future__ import annotations

import numpy as np
import pytest

from spamBench.evaluation.metrics import MetricsCalculator


def test_confusion_metrics_on_920_row_holdout() -> None:
    y_true = np.array(["Spam"] * 400 + ["Not_Spam"] * 520)
    y_pred = np.array(["Spam"] * 380 + ["Not_Spam"] * 20 + ["Spam"] * 30 + ["Not_Spam"] * 490)
    y_score = np.where(y_pred == "Spam", 0.9, 0.1)

    metrics = MetricsCalculator().calculate_metrics(y_true, y_pred, y_score)

    assert metrics["confusion"].as_dict() == {"tp": 380, "fp": 30, "tn": 490, "fn": 20}
    assert metrics["accuracy"] == pytest.approx(870 / 920)
    assert metrics["accuracy"] == pytest.approx(0.9457, abs=1e-4)
    assert metrics["precision"] == pytest.approx(380 / 410)
    assert metrics["recall"] == pytest.approx(0.95)
    p, r = 380 / 410, 0.95
    assert metrics["f1"] == pytest.approx(2 * p * r / (p + r))


def test_auc_is_one_for_perfect_ranking() -> None:
    y_true = np.array(["Spam"] * 5 + ["Not_Spam"] * 7)
    y_score = np.concatenate([np.linspace(0.6, 0.99, 5), np.linspace(0.01, 0.5, 7)])
    y_pred = np.where(y_score > 0.5, "Spam", "Not_Spam")

    metrics = MetricsCalculator().calculate_metrics(y_true, y_pred, y_score)

    assert metrics["auc"] == pytest.approx(1.0)


def test_auc_near_half_for_random_scores() -> None:
    rng = np.random.default_rng(42)
    y_true = rng.choice(["Spam", "Not_Spam"], size=20000)
    y_score = rng.uniform(size=20000)

    curve = MetricsCalculator().roc_curve(y_true, y_score)

    assert curve.auc == pytest.approx(0.5, abs=0.02)


def test_roc_sweeps_every_distinct_score_in_descending_order() -> None:
    y_true = np.array(["Spam", "Not_Spam", "Spam", "Not_Spam"])
    y_score = np.array([0.9, 0.8, 0.7, 0.1])

    curve = MetricsCalculator().roc_curve(y_true, y_score)

    np.testing.assert_allclose(curve.fpr, [0.0, 0.0, 0.5, 0.5, 1.0])
    np.testing.assert_allclose(curve.tpr, [0.0, 0.5, 0.5, 1.0, 1.0])
    assert np.all(np.diff(curve.thresholds) < 0)
    # Trapezoids: 0.5 * 0.5 + 0.5 * 1.0
    assert curve.auc == pytest.approx(0.75)


def test_no_predicted_positives_gives_zero_precision() -> None:
    calc = MetricsCalculator()
    counts = calc.confusion_counts(["Spam", "Not_Spam"], ["Not_Spam", "Not_Spam"])
    rates = calc.rates(counts)
    assert rates["precision"] == 0.0
    assert rates["recall"] == 0.0
    assert rates["specificity"] == 1.0


def test_fold_metrics_report_sensitivity_and_specificity() -> None:
    y_true = ["Spam", "Spam", "Not_Spam", "Not_Spam"]
    y_pred = ["Spam", "Not_Spam", "Not_Spam", "Not_Spam"]
    scores = MetricsCalculator().fold_metrics(y_true, y_pred, [0.9, 0.4, 0.3, 0.2])
    assert scores == {"auc": 1.0, "sensitivity": 0.5, "specificity": 1.0}


def test_holdout_metrics_need_both_classes() -> None:
    with pytest.raises(ValueError):
        MetricsCalculator().calculate_metrics(["Spam"] * 3, ["Spam"] * 3, [0.9, 0.8, 0.7])
