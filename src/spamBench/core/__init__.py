"""
Core functionality for spamBench.

Configuration records, the model interface, the error taxonomy and the result
records. The trainer, cross-validation evaluator and evaluation harness live in
their own modules (core.model_trainer, core.cv_evaluator,
core.evaluation_harness).
"""

from .base import (
    BaseEvaluator,
    BaseModel,
    BasePreprocessor,
    CVConfig,
    ExperimentConfig,
    ModelConfig,
    CLASS_LABELS,
    NEGATIVE_LABEL,
    POSITIVE_LABEL,
)
from .exceptions import (
    ColumnMismatchError,
    InvalidSplitError,
    MalformedRowError,
    SpamBenchError,
    TrainingFailedError,
)
from .results import (
    BenchmarkResult,
    ConfusionCounts,
    EvaluationReport,
    FoldMetrics,
    GridPointResult,
    ModelFailure,
    ResampleResult,
    RocCurve,
)

__all__ = [
    "BaseEvaluator",
    "BaseModel",
    "BasePreprocessor",
    "CVConfig",
    "ExperimentConfig",
    "ModelConfig",
    "CLASS_LABELS",
    "NEGATIVE_LABEL",
    "POSITIVE_LABEL",
    "ColumnMismatchError",
    "InvalidSplitError",
    "MalformedRowError",
    "SpamBenchError",
    "TrainingFailedError",
    "BenchmarkResult",
    "ConfusionCounts",
    "EvaluationReport",
    "FoldMetrics",
    "GridPointResult",
    "ModelFailure",
    "ResampleResult",
    "RocCurve",
]
