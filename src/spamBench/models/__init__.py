"""
Model implementations for spamBench.

This module contains the classifier backends available to the model registry.
"""

from .base_model import BaseModel
from .logistic_regression import LogisticRegressionClassifier
from .random_forest import RandomForestClassifier
from .svm import SVMClassifier


MODEL_BACKENDS = {
    'logistic': LogisticRegressionClassifier,
    'randomforest': RandomForestClassifier,
    'svm': SVMClassifier,
}


class ModelFactory:
    """Factory for creating models."""

    @staticmethod
    def create_model(backend: str, **params) -> BaseModel:
        """Create an unfitted model of the given backend."""
        model_class = ModelFactory.get_backend(backend)
        return model_class(**params)

    @staticmethod
    def get_backend(backend: str):
        try:
            return MODEL_BACKENDS[backend.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown model backend: {backend}. Available: {', '.join(MODEL_BACKENDS)}"
            ) from None


__all__ = [
    "BaseModel",
    "LogisticRegressionClassifier",
    "RandomForestClassifier",
    "SVMClassifier",
    "MODEL_BACKENDS",
    "ModelFactory",
]
