"""
Visualization utilities for spamBench.

ROC curves of the holdout predictions and the distribution of resampled
cross-validation metrics per model.
"""

from typing import Optional, Tuple, Union
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

from ..core.results import BenchmarkResult, RESAMPLE_METRICS
from ..utils.logger import get_logger
from .reporter import ResultsReporter


class ResultsVisualizer:
    """Visualizer for spamBench results."""

    def __init__(self, style: str = "whitegrid", figsize: Tuple[float, float] = (10, 8)):
        self.style = style
        self.figsize = figsize
        self.logger = get_logger("ResultsVisualizer")

        sns.set_style(style)

    def _setup_roc_axes(self,
                        figsize: Tuple[float, float] = (6.0, 6.0),
                        title: Optional[str] = None,
                        xlab: str = '1 - Specificity',
                        ylab: str = 'Sensitivity',
                        show_random: bool = True):
        """Create the ROC figure and axes with the shared styling."""
        fig, ax = plt.subplots(figsize=figsize)
        if show_random:
            ax.plot([0, 1], [0, 1], color='navy', lw=1.2, linestyle='--', alpha=0.6, label='Random')
        if title:
            ax.set_title(title)
        ax.set_xlim([0.0, 1.0])
        ax.set_ylim([0.0, 1.05])
        ax.set_xlabel(xlab)
        ax.set_ylabel(ylab)
        ax.grid(False)
        return fig, ax

    def plot_roc_curves(self, result: BenchmarkResult,
                        save_path: Union[str, Path]) -> Optional[Path]:
        """Overlay the holdout ROC curve of every evaluated model."""
        reports = result.reports
        if not reports:
            self.logger.warning("No evaluated models; skipping ROC plot")
            return None

        fig, ax = self._setup_roc_axes(title='Holdout ROC')
        palette = sns.color_palette(n_colors=len(reports))
        for color, (name, report) in zip(palette, reports.items()):
            curve = report.roc_curve
            ax.plot(curve.fpr, curve.tpr, color=color, lw=2, label=f"{name} (AUC = {report.auc:.3f})")
        ax.legend(loc='lower right')

        return self._save(fig, save_path)

    def plot_resample_distributions(self, result: BenchmarkResult,
                                    save_path: Union[str, Path]) -> Optional[Path]:
        """Box plots of fold AUC, sensitivity and specificity per model."""
        table = ResultsReporter().build_resample_table(result)
        if table.empty:
            self.logger.warning("No resample results; skipping resample plot")
            return None

        long_table = table.melt(id_vars=['model', 'fold'], value_vars=list(RESAMPLE_METRICS),
                                var_name='metric', value_name='value')
        fig, ax = plt.subplots(figsize=self.figsize)
        sns.boxplot(data=long_table, x='metric', y='value', hue='model', ax=ax)
        ax.set_title('Cross-validated metrics (selected grid point)')
        ax.set_xlabel('')
        ax.set_ylabel('Value')

        return self._save(fig, save_path)

    def _save(self, fig, save_path: Union[str, Path]) -> Path:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.tight_layout()
        fig.savefig(save_path, dpi=150)
        plt.close(fig)
        self.logger.info(f"Plot saved: {save_path}")
        return save_path
