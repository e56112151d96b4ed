"""
In-memory data containers for spamBench.

A Dataset pairs a numeric feature table with a categorical label vector,
row-aligned by position. A Split holds the train and holdout Datasets cut
from one loaded Dataset.
"""

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np
import pandas as pd

from ..core.base import CLASS_LABELS


def make_labels(values: Sequence[str], name: str = "label") -> pd.Series:
    """Build a label vector with the fixed Not_Spam/Spam categories."""
    return pd.Series(pd.Categorical(values, categories=list(CLASS_LABELS)), name=name)


@dataclass(frozen=True, eq=False)
class Dataset:
    """Feature table plus label vector, row-aligned by position."""
    features: pd.DataFrame
    labels: pd.Series
    row_ids: np.ndarray

    def __post_init__(self):
        if len(self.features) != len(self.labels):
            raise ValueError(
                f"Feature rows ({len(self.features)}) do not match labels ({len(self.labels)})"
            )
        if len(self.row_ids) != len(self.labels):
            raise ValueError("row_ids must have one entry per row")
        if self.features.isnull().any().any():
            raise ValueError("Feature table contains missing values")

    @property
    def n_rows(self) -> int:
        return len(self.labels)

    @property
    def feature_names(self):
        return list(self.features.columns)

    def __len__(self) -> int:
        return self.n_rows

    def class_counts(self) -> Dict[str, int]:
        counts = self.labels.value_counts(sort=False)
        return {str(label): int(counts.get(label, 0)) for label in self.labels.cat.categories}

    def label_array(self) -> np.ndarray:
        """Labels as a plain object array, the form the models consume."""
        return np.asarray(self.labels.astype(str))

    def subset(self, positions: np.ndarray) -> 'Dataset':
        """New Dataset holding the given row positions, reindexed from 0."""
        positions = np.asarray(positions, dtype=int)
        return Dataset(
            features=self.features.iloc[positions].reset_index(drop=True),
            labels=self.labels.iloc[positions].reset_index(drop=True),
            row_ids=self.row_ids[positions].copy(),
        )


@dataclass(frozen=True)
class LoadSummary:
    """Integrity counts reported by the loader."""
    rows_read: int
    duplicates_removed: int
    rows_kept: int
    class_counts: Dict[str, int]


@dataclass(frozen=True, eq=False)
class Split:
    """Disjoint train/holdout partition of one Dataset."""
    train: Dataset
    holdout: Dataset
    train_index: np.ndarray
    holdout_index: np.ndarray
    split_fraction: float
    random_seed: int
