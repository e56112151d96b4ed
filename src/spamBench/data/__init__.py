"""
Data handling modules for spamBench.

This module contains the dataset containers, the loader and the stratified
partitioner.
"""

from .dataset import Dataset, LoadSummary, Split, make_labels
from .feature_names import SPAMBASE_FEATURES, SPAMBASE_LABEL
from .loader import DataLoader, load_dataset
from .partitioner import StratifiedPartitioner, stratified_split

__all__ = [
    "Dataset",
    "LoadSummary",
    "Split",
    "make_labels",
    "SPAMBASE_FEATURES",
    "SPAMBASE_LABEL",
    "DataLoader",
    "load_dataset",
    "StratifiedPartitioner",
    "stratified_split",
]
