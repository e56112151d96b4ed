"""
Evaluation metrics for spamBench.

Confusion-matrix and ROC metrics for binary classification with an explicit
positive class.
"""

from typing import Any, Dict, Sequence
import numpy as np
from sklearn.metrics import confusion_matrix, roc_curve

from ..core.base import NEGATIVE_LABEL, POSITIVE_LABEL
from ..core.results import ConfusionCounts, RocCurve
from ..utils.logger import get_logger


def _ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    return numerator / denominator if denominator else 0.0


class MetricsCalculator:
    """Calculator for binary classification metrics."""

    def __init__(self, positive_label: str = POSITIVE_LABEL, negative_label: str = NEGATIVE_LABEL):
        self.positive_label = positive_label
        self.negative_label = negative_label
        self.logger = get_logger("MetricsCalculator")

    def confusion_counts(self, y_true: Sequence, y_pred: Sequence) -> ConfusionCounts:
        """Count TP/FP/TN/FN with the configured positive class."""
        cm = confusion_matrix(
            np.asarray(y_true), np.asarray(y_pred),
            labels=[self.negative_label, self.positive_label]
        )
        tn, fp, fn, tp = (int(v) for v in cm.ravel())
        return ConfusionCounts(tp=tp, fp=fp, tn=tn, fn=fn)

    @staticmethod
    def rates(counts: ConfusionCounts) -> Dict[str, float]:
        """Accuracy, precision, recall, F1 and specificity from confusion counts."""
        precision = _ratio(counts.tp, counts.tp + counts.fp)
        recall = _ratio(counts.tp, counts.tp + counts.fn)
        return {
            'accuracy': _ratio(counts.tp + counts.tn, counts.total),
            'precision': precision,
            'recall': recall,
            'f1': _ratio(2 * precision * recall, precision + recall),
            'specificity': _ratio(counts.tn, counts.tn + counts.fp),
        }

    def roc_curve(self, y_true: Sequence, y_score: Sequence) -> RocCurve:
        """
        ROC curve over every distinct score.

        Thresholds sweep the distinct predicted probabilities in descending
        order; no intermediate point is dropped.
        """
        y_true_binary = (np.asarray(y_true) == self.positive_label).astype(int)
        fpr, tpr, thresholds = roc_curve(
            y_true_binary, np.asarray(y_score, dtype=float), drop_intermediate=False
        )
        return RocCurve(fpr=fpr, tpr=tpr, thresholds=thresholds)

    def calculate_metrics(self, y_true: Sequence, y_pred: Sequence, y_score: Sequence) -> Dict[str, Any]:
        """
        Calculate holdout metrics for binary classification.

        Args:
            y_true: True labels
            y_pred: Predicted labels
            y_score: Predicted probability of the positive class

        Returns:
            Dictionary with accuracy, precision, recall, f1, specificity,
            auc, the confusion counts and the ROC curve
        """
        y_true = np.asarray(y_true)
        if len(np.unique(y_true)) != 2:
            raise ValueError("Holdout metrics need both classes present in y_true")

        counts = self.confusion_counts(y_true, y_pred)
        metrics: Dict[str, Any] = self.rates(counts)
        curve = self.roc_curve(y_true, y_score)
        metrics['auc'] = curve.auc
        metrics['confusion'] = counts
        metrics['roc_curve'] = curve
        return metrics

    def fold_metrics(self, y_true: Sequence, y_pred: Sequence, y_score: Sequence) -> Dict[str, float]:
        """AUC, sensitivity and specificity for one validation fold."""
        counts = self.confusion_counts(y_true, y_pred)
        rates = self.rates(counts)
        y_true = np.asarray(y_true)
        if len(np.unique(y_true)) < 2:
            fold_auc = float('nan')
        else:
            fold_auc = self.roc_curve(y_true, y_score).auc
        return {
            'auc': fold_auc,
            'sensitivity': rates['recall'],
            'specificity': rates['specificity'],
        }
