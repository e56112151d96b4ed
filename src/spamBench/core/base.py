"""
Base classes and interfaces for spamBench.

This module defines the configuration records and the fundamental interfaces
that models, evaluators and preprocessors implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import pandas as pd
import numpy as np
from dataclasses import dataclass, field


NEGATIVE_LABEL = "Not_Spam"
POSITIVE_LABEL = "Spam"
CLASS_LABELS = (NEGATIVE_LABEL, POSITIVE_LABEL)


@dataclass
class ModelConfig:
    """One entry of the model registry."""
    name: str
    backend: str
    grid: Dict[str, List[Any]] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CVConfig:
    """Configuration for cross-validation."""
    n_folds: int = 5
    n_repeats: int = 1
    random_state: int = 42
    n_jobs: int = 1
    positive_label: str = POSITIVE_LABEL


@dataclass
class ExperimentConfig:
    """Complete configuration for a benchmark run."""
    data_path: Optional[str] = None
    output_dir: str = "./results"
    split_fraction: float = 0.8
    random_seed: int = 42
    cv_folds: int = 5
    n_repeats: int = 1
    n_jobs: int = 1
    models: List[ModelConfig] = field(default_factory=list)
    generate_plots: bool = False
    save_models: bool = False

    def cv_config(self) -> CVConfig:
        """Cross-validation settings derived from this experiment."""
        return CVConfig(
            n_folds=self.cv_folds,
            n_repeats=self.n_repeats,
            random_state=self.random_seed,
            n_jobs=self.n_jobs,
        )


class BaseModel(ABC):
    """Base class for all models in spamBench."""

    def __init__(self, name: str, **kwargs):
        self.name = name
        self.config = kwargs
        self.is_fitted = False
        self.feature_names_ = None
        self.classes_ = None

    @abstractmethod
    def fit(self, X: pd.DataFrame, y: np.ndarray, **kwargs) -> 'BaseModel':
        """Fit the model to the training data."""
        pass

    @abstractmethod
    def predict(self, X: pd.DataFrame) -> np.ndarray:
        """Make predictions on new data."""
        pass

    @abstractmethod
    def predict_proba(self, X: pd.DataFrame) -> np.ndarray:
        """Predict class probabilities."""
        pass

    @abstractmethod
    def get_feature_importance(self) -> Optional[np.ndarray]:
        """Get feature importance scores."""
        pass

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters for this estimator."""
        return self.config.copy() if deep else self.config

    def set_params(self, **params) -> 'BaseModel':
        """Set model parameters."""
        self.config.update(params)
        return self


class BaseEvaluator(ABC):
    """Base class for resampling evaluators."""

    def __init__(self, config: CVConfig):
        self.config = config
        self.results_ = None

    @abstractmethod
    def evaluate(self, model_factory, X: pd.DataFrame, y: np.ndarray,
                 params: Dict[str, Any], index: int = 0):
        """Evaluate one parameter combination by resampling."""
        pass

    def get_results(self):
        """Get the most recent evaluation result."""
        return self.results_


class BasePreprocessor(ABC):
    """Base class for all preprocessors in spamBench."""

    def __init__(self, **kwargs):
        self.config = kwargs
        self.is_fitted = False

    @abstractmethod
    def fit(self, X: pd.DataFrame, y: Optional[np.ndarray] = None) -> 'BasePreprocessor':
        """Fit the preprocessor to the data."""
        pass

    @abstractmethod
    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Transform the data."""
        pass

    def fit_transform(self, X: pd.DataFrame, y: Optional[np.ndarray] = None) -> pd.DataFrame:
        """Fit and transform the data."""
        return self.fit(X, y).transform(X)
