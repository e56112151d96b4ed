"""Shared fixtures for spamBench tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import numpy as np
import pandas as pd
import pytest

from spamBench.core.base import ModelConfig, NEGATIVE_LABEL, POSITIVE_LABEL
from spamBench.data.dataset import Dataset, make_labels
from spamBench.data.feature_names import SPAMBASE_FEATURES


def _synthetic_rows(n_spam: int, n_ham: int, seed: int, shift: float) -> tuple:
    rng = np.random.default_rng(seed)
    n = n_spam + n_ham
    values = rng.normal(0.0, 1.0, size=(n, len(SPAMBASE_FEATURES)))
    labels = np.array([1] * n_spam + [0] * n_ham)
    # Spam rows are shifted on the first few features so models can learn
    values[labels == 1, :5] += shift
    order = rng.permutation(n)
    return values[order], labels[order]


@pytest.fixture
def make_dataset() -> Callable[..., Dataset]:
    def _make(n_spam: int = 60, n_ham: int = 90, seed: int = 0, shift: float = 1.5) -> Dataset:
        values, labels = _synthetic_rows(n_spam, n_ham, seed, shift)
        return Dataset(
            features=pd.DataFrame(values, columns=SPAMBASE_FEATURES),
            labels=make_labels(np.where(labels == 1, POSITIVE_LABEL, NEGATIVE_LABEL)),
            row_ids=np.arange(len(labels)),
        )
    return _make


@pytest.fixture
def write_data_file(tmp_path: Path) -> Callable[..., Path]:
    """Write rows (lists of field strings) or a synthetic table to a CSV file."""
    def _write(rows: Optional[List[List[str]]] = None, n_spam: int = 60, n_ham: int = 90,
               seed: int = 0, name: str = "spambase.data") -> Path:
        if rows is None:
            values, labels = _synthetic_rows(n_spam, n_ham, seed, shift=1.5)
            rows = [[f"{v:.6f}" for v in row] + [str(label)] for row, label in zip(values, labels)]
        path = tmp_path / name
        path.write_text("\n".join(",".join(row) for row in rows) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def small_registry() -> List[ModelConfig]:
    """Fast registry covering all three backends."""
    return [
        ModelConfig(name="logistic", backend="logistic"),
        ModelConfig(name="randomforest", backend="randomforest",
                    grid={"max_features": [2, 4]},
                    params={"n_estimators": 15, "criterion": "gini", "min_samples_leaf": 1}),
        ModelConfig(name="svm", backend="svm", grid={"C": [0.5, 1.0]}, params={"gamma": "auto"}),
    ]
