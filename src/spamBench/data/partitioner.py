"""
Stratified train/holdout partitioning for spamBench.

Each class is sampled separately at the split fraction so that train and
holdout keep the class balance of the full data set.
"""

import math
from typing import Dict

import numpy as np

from ..core.exceptions import InvalidSplitError
from ..utils.logger import get_logger
from .dataset import Dataset, Split


class StratifiedPartitioner:
    """Seeded stratified splitter."""

    def __init__(self, split_fraction: float = 0.8, random_seed: int = 42):
        self.split_fraction = split_fraction
        self.random_seed = random_seed
        self.logger = get_logger("StratifiedPartitioner")
        self._validate_fraction()

    def _validate_fraction(self) -> None:
        try:
            p = float(self.split_fraction)
        except (TypeError, ValueError):
            raise InvalidSplitError(f"split_fraction must be a number, got {self.split_fraction!r}")
        if not math.isfinite(p) or not 0 < p < 1:
            raise InvalidSplitError(f"split_fraction must be in (0, 1), got {self.split_fraction}")
        self.split_fraction = p

    def train_size_per_class(self, class_counts: Dict[str, int]) -> Dict[str, int]:
        """Number of train rows drawn from each class."""
        sizes = {}
        for label, n in class_counts.items():
            if n < 2:
                raise InvalidSplitError(f"Class '{label}' has {n} row(s); at least 2 are required")
            # Both partitions keep at least one row of every class
            sizes[label] = min(max(int(round(self.split_fraction * n)), 1), n - 1)
        return sizes

    def split(self, dataset: Dataset) -> Split:
        """
        Partition a dataset into train and holdout.

        The same seed, fraction and input always give the same row
        assignment: one generator is consumed class by class in category
        order.
        """
        labels = dataset.labels
        sizes = self.train_size_per_class(dataset.class_counts())
        rng = np.random.default_rng(self.random_seed)

        train_parts = []
        for label in labels.cat.categories:
            positions = np.flatnonzero((labels == label).to_numpy())
            chosen = rng.permutation(positions)[:sizes[str(label)]]
            train_parts.append(chosen)

        train_index = np.sort(np.concatenate(train_parts))
        holdout_mask = np.ones(dataset.n_rows, dtype=bool)
        holdout_mask[train_index] = False
        holdout_index = np.flatnonzero(holdout_mask)

        split = Split(
            train=dataset.subset(train_index),
            holdout=dataset.subset(holdout_index),
            train_index=train_index,
            holdout_index=holdout_index,
            split_fraction=self.split_fraction,
            random_seed=self.random_seed,
        )
        self.logger.info(
            f"Stratified split (p={self.split_fraction}, seed={self.random_seed}): "
            f"train={split.train.n_rows} {split.train.class_counts()}, "
            f"holdout={split.holdout.n_rows} {split.holdout.class_counts()}"
        )
        return split


def stratified_split(dataset: Dataset, split_fraction: float = 0.8, random_seed: int = 42) -> Split:
    """Functional form of StratifiedPartitioner.split."""
    return StratifiedPartitioner(split_fraction, random_seed).split(dataset)
