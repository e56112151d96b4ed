"""
Results reporting utilities for spamBench.

This module turns a BenchmarkResult into tables and files. Failed models
keep their own row with empty metrics and the failure reason, so they are
never mistaken for a model that scored zero.
"""

from typing import Any, Dict, Union
import pandas as pd
import numpy as np
from pathlib import Path
import json

from ..core.results import BenchmarkResult, EvaluationReport, RESAMPLE_METRICS
from ..utils.logger import get_logger


REPORT_METRICS = ('accuracy', 'precision', 'recall', 'f1', 'auc')


class ResultsReporter:
    """Reporter for spamBench results."""

    def __init__(self):
        self.logger = get_logger("ResultsReporter")

    def build_report_table(self, result: BenchmarkResult) -> pd.DataFrame:
        """One row per registered model: status, holdout metrics or failure reason."""
        rows = []
        for name, outcome in result.outcomes.items():
            row: Dict[str, Any] = {'model': name, 'backend': outcome.backend, 'status': outcome.status}
            if isinstance(outcome, EvaluationReport):
                row.update(outcome.metrics())
                row.update(outcome.confusion.as_dict())
                row['best_params'] = json.dumps(outcome.best_params, sort_keys=True)
                row['error'] = None
            else:
                row.update({metric: np.nan for metric in REPORT_METRICS})
                row['error'] = outcome.reason
            rows.append(row)
        columns = ['model', 'backend', 'status', *REPORT_METRICS,
                   'tp', 'fp', 'tn', 'fn', 'best_params', 'error']
        return pd.DataFrame(rows, columns=columns)

    def build_resample_table(self, result: BenchmarkResult) -> pd.DataFrame:
        """Long-form fold metrics of the selected grid point of every trained model."""
        frames = [resample.to_frame() for resample in result.resamples.values()]
        if not frames:
            return pd.DataFrame(columns=['model', 'fold', *RESAMPLE_METRICS])
        return pd.concat(frames, ignore_index=True)

    def summarize_resamples(self, result: BenchmarkResult) -> pd.DataFrame:
        """Mean and std of every resampled metric per model."""
        rows = [{'model': name, **resample.summary()} for name, resample in result.resamples.items()]
        return pd.DataFrame(rows)

    def build_grid_table(self, result: BenchmarkResult) -> pd.DataFrame:
        frames = [resample.grid_frame() for resample in result.resamples.values()]
        if not frames:
            return pd.DataFrame()
        table = pd.concat(frames, ignore_index=True)
        table['params'] = table['params'].map(lambda p: json.dumps(p, sort_keys=True))
        return table

    def build_feature_importance_table(self, result: BenchmarkResult) -> pd.DataFrame:
        series = [r.feature_importance for r in result.reports.values() if r.feature_importance is not None]
        if not series:
            return pd.DataFrame()
        return pd.concat(series, axis=1)

    def roc_points(self, result: BenchmarkResult) -> Dict[str, Dict[str, Any]]:
        return {name: report.roc_curve.to_dict() for name, report in result.reports.items()}

    def save_results(self, result: BenchmarkResult, output_dir: Union[str, Path]) -> Dict[str, Path]:
        """
        Write all result tables to output_dir.

        Returns:
            Mapping of artifact name to written path
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        written = {}

        report_table = self.build_report_table(result)
        written['report'] = output_dir / "evaluation_report.csv"
        report_table.to_csv(written['report'], index=False)

        written['resamples'] = output_dir / "resamples.csv"
        self.build_resample_table(result).to_csv(written['resamples'], index=False)

        written['resample_summary'] = output_dir / "resample_summary.csv"
        self.summarize_resamples(result).to_csv(written['resample_summary'], index=False)

        grid_table = self.build_grid_table(result)
        if not grid_table.empty:
            written['grid'] = output_dir / "grid_search.csv"
            grid_table.to_csv(written['grid'], index=False)

        importance = self.build_feature_importance_table(result)
        if not importance.empty:
            written['feature_importance'] = output_dir / "feature_importance.csv"
            importance.to_csv(written['feature_importance'], index_label='feature')

        written['roc_curves'] = output_dir / "roc_curves.json"
        self.save_results_json(self.roc_points(result), written['roc_curves'])

        written['results'] = output_dir / "results.json"
        self.save_results_json({
            'models': report_table.to_dict(orient='records'),
            'resamples': self.summarize_resamples(result).to_dict(orient='records'),
        }, written['results'])

        self.logger.info(f"Results written to {output_dir}")
        return written

    def format_report(self, result: BenchmarkResult) -> str:
        """Plain-text table of the holdout report for logging."""
        table = self.build_report_table(result)[['model', 'status', *REPORT_METRICS, 'error']]
        return table.to_string(index=False, float_format=lambda v: f"{v:.4f}", na_rep='-')

    def save_results_json(self,
                          results: Dict[str, Any],
                          output_path: Union[str, Path]) -> None:
        """Save results as JSON file."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        results_serializable = self._make_json_serializable(results)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results_serializable, f, indent=2)

        self.logger.info(f"Results saved as JSON: {output_path}")

    def _make_json_serializable(self, obj: Any) -> Any:
        """Convert numpy values and non-finite floats to JSON-friendly values."""
        if isinstance(obj, np.ndarray):
            return [self._make_json_serializable(v) for v in obj.tolist()]
        elif isinstance(obj, dict):
            return {str(key): self._make_json_serializable(value) for key, value in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_json_serializable(item) for item in obj]
        elif isinstance(obj, np.generic):
            return self._make_json_serializable(obj.item())
        elif isinstance(obj, float) and not np.isfinite(obj):
            return None
        else:
            return obj
