"""
spamBench v1.0

Binary classification benchmark harness for the Spambase table: stratified
train/holdout split, train-only standardisation, cross-validated grid search
over several classifier families and comparable holdout metrics.
"""

__version__ = "1.0.0"

# Core imports
from .core.base import CVConfig, ExperimentConfig, ModelConfig
from .core.exceptions import (
    ColumnMismatchError,
    InvalidSplitError,
    MalformedRowError,
    SpamBenchError,
    TrainingFailedError,
)
from .core.results import BenchmarkResult, EvaluationReport, ModelFailure, ResampleResult

# Data handling
from .data.dataset import Dataset, Split
from .data.loader import DataLoader
from .data.partitioner import StratifiedPartitioner

# Preprocessing
from .preprocessing.standardizer import FeatureStandardizer, FeatureTransform, fit_feature_transform

# Models
from .models import ModelFactory

# Training and evaluation
from .core.cv_evaluator import StratifiedCVEvaluator
from .core.model_trainer import ModelTrainer, select_best_grid_point
from .core.evaluation_harness import EvaluationHarness

# Reporting
from .evaluation.metrics import MetricsCalculator
from .evaluation.reporter import ResultsReporter
from .evaluation.visualizer import ResultsVisualizer

__all__ = [
    # Core
    "CVConfig",
    "ExperimentConfig",
    "ModelConfig",
    "ColumnMismatchError",
    "InvalidSplitError",
    "MalformedRowError",
    "SpamBenchError",
    "TrainingFailedError",
    "BenchmarkResult",
    "EvaluationReport",
    "ModelFailure",
    "ResampleResult",

    # Data
    "Dataset",
    "Split",
    "DataLoader",
    "StratifiedPartitioner",

    # Preprocessing
    "FeatureStandardizer",
    "FeatureTransform",
    "fit_feature_transform",

    # Models
    "ModelFactory",

    # Training and evaluation
    "StratifiedCVEvaluator",
    "ModelTrainer",
    "select_best_grid_point",
    "EvaluationHarness",

    # Reporting
    "MetricsCalculator",
    "ResultsReporter",
    "ResultsVisualizer",
]
