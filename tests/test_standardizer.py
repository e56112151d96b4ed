"""Tests for the train-only feature standardisation."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from spamBench.core.exceptions import ColumnMismatchError
from spamBench.preprocessing.standardizer import (
    FeatureStandardizer,
    apply_feature_transform,
    fit_feature_transform,
)


def make_frame(n: int = 50, shift: float = 0.0, seed: int = 0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    return pd.DataFrame({
        "a": rng.normal(3.0 + shift, 2.0, size=n),
        "b": rng.exponential(1.0, size=n) + shift,
        "c": rng.uniform(-5, 5, size=n),
    })


def test_train_is_centered_and_scaled() -> None:
    train = make_frame()
    transform = fit_feature_transform(train)
    out = transform.apply(train)

    np.testing.assert_allclose(out.mean().to_numpy(), 0.0, atol=1e-10)
    np.testing.assert_allclose(out.std(ddof=1).to_numpy(), 1.0, atol=1e-10)
    assert out.shape == train.shape
    assert list(out.columns) == list(train.columns)


def test_zero_variance_column_uses_unit_scale() -> None:
    train = make_frame()
    train["const"] = 3.0
    transform = fit_feature_transform(train)

    assert transform.zero_variance == ("const",)
    assert transform.scale[-1] == 1.0
    out = transform.apply(train)
    np.testing.assert_allclose(out["const"].to_numpy(), 0.0)

    holdout = make_frame(n=5, seed=1)
    holdout["const"] = 5.0
    np.testing.assert_allclose(transform.apply(holdout)["const"].to_numpy(), 2.0)


def test_holdout_does_not_leak_into_statistics() -> None:
    train = make_frame()
    holdout = make_frame(n=30, shift=4.0, seed=1)

    transform = fit_feature_transform(train)
    center_before = transform.center.copy()
    scale_before = transform.scale.copy()
    transform.apply(holdout)

    np.testing.assert_array_equal(transform.center, center_before)
    np.testing.assert_array_equal(transform.scale, scale_before)

    leaky = fit_feature_transform(pd.concat([train, holdout], ignore_index=True))
    assert not np.allclose(leaky.center, transform.center)


def test_fitted_statistics_are_read_only() -> None:
    transform = fit_feature_transform(make_frame())
    with pytest.raises(ValueError):
        transform.center[0] = 10.0


def test_apply_is_pure_and_deterministic() -> None:
    train = make_frame()
    original = train.copy()
    transform = fit_feature_transform(train)

    first = apply_feature_transform(transform, train)
    second = apply_feature_transform(transform, train)

    pd.testing.assert_frame_equal(first, second)
    pd.testing.assert_frame_equal(train, original)


def test_column_count_mismatch_rejected() -> None:
    transform = fit_feature_transform(make_frame())
    with pytest.raises(ColumnMismatchError):
        transform.apply(make_frame()[["a", "b"]])


def test_column_order_mismatch_rejected() -> None:
    transform = fit_feature_transform(make_frame())
    with pytest.raises(ColumnMismatchError) as excinfo:
        transform.apply(make_frame()[["b", "a", "c"]])
    assert "position 0" in str(excinfo.value)


def test_standardizer_requires_fit() -> None:
    with pytest.raises(ValueError):
        FeatureStandardizer().transform(make_frame())


def test_standardizer_fit_transform_matches_function() -> None:
    train = make_frame()
    out = FeatureStandardizer().fit_transform(train)
    pd.testing.assert_frame_equal(out, fit_feature_transform(train).apply(train))
