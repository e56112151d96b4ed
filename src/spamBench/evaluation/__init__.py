"""
Evaluation modules for spamBench.

This module contains evaluation metrics, visualization, and reporting utilities.
"""

from .metrics import MetricsCalculator
from .reporter import ResultsReporter
from .visualizer import ResultsVisualizer

__all__ = [
    "MetricsCalculator",
    "ResultsVisualizer",
    "ResultsReporter",
]
