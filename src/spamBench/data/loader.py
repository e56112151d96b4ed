"""
Data loading utilities for spamBench.

This module reads the headerless, comma-separated Spambase file into a
Dataset and reports basic integrity counts.
"""

from typing import List, Optional, Sequence, Tuple, Union
import pandas as pd
import numpy as np
from pathlib import Path

from ..core.base import NEGATIVE_LABEL, POSITIVE_LABEL
from ..core.exceptions import MalformedRowError
from ..utils.logger import get_logger
from .dataset import Dataset, LoadSummary, make_labels
from .feature_names import SPAMBASE_FEATURES, SPAMBASE_LABEL


class DataLoader:
    """Data loader for the fixed-schema Spambase table."""

    def __init__(self,
                 feature_names: Optional[Sequence[str]] = None,
                 label_name: str = SPAMBASE_LABEL,
                 n_features: int = len(SPAMBASE_FEATURES)):
        self.logger = get_logger("DataLoader")
        self.feature_names = list(feature_names) if feature_names is not None else list(SPAMBASE_FEATURES)
        self.label_name = label_name
        self._validate_names(n_features)

    def _validate_names(self, n_features: int) -> None:
        if len(self.feature_names) != n_features:
            raise ValueError(f"Expected {n_features} feature names, got {len(self.feature_names)}")
        if len(set(self.feature_names)) != len(self.feature_names):
            raise ValueError("Feature names must be unique")
        if self.label_name in self.feature_names:
            raise ValueError(f"Label name '{self.label_name}' clashes with a feature name")

    @property
    def n_fields(self) -> int:
        return len(self.feature_names) + 1

    def load_data(self, data_path: Union[str, Path]) -> Tuple[Dataset, LoadSummary]:
        """
        Load the data file into a Dataset.

        Args:
            data_path: Path to the comma-separated data file (no header)

        Returns:
            Tuple of (dataset, load summary)

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedRowError: If a row has the wrong field count, a
                non-numeric predictor or a label other than 0/1
        """
        data_path = Path(data_path)
        if not data_path.exists():
            raise FileNotFoundError(f"Data file not found: {data_path}")

        self.logger.info(f"Loading data from {data_path}")
        lines = pd.Series(data_path.read_text(encoding='utf-8').splitlines(), dtype=object)
        # Row indices are zero-based line numbers in the file
        lines = lines[lines.str.strip() != '']
        if lines.empty:
            raise ValueError(f"No data rows found in {data_path}")

        values = self._parse_lines(lines)
        rows_read = len(values)

        duplicated = values.duplicated(keep='first')
        n_duplicates = int(duplicated.sum())
        if n_duplicates:
            self.logger.warning(f"Removed {n_duplicates} exact duplicate rows")
        values = values[~duplicated]

        labels = np.where(values[self.label_name].to_numpy() == 1, POSITIVE_LABEL, NEGATIVE_LABEL)
        dataset = Dataset(
            features=values[self.feature_names].reset_index(drop=True).astype(float),
            labels=make_labels(labels, name=self.label_name),
            row_ids=values.index.to_numpy(dtype=int),
        )

        summary = LoadSummary(
            rows_read=rows_read,
            duplicates_removed=n_duplicates,
            rows_kept=dataset.n_rows,
            class_counts=dataset.class_counts(),
        )
        self._print_data_info(summary)
        return dataset, summary

    def _parse_lines(self, lines: pd.Series) -> pd.DataFrame:
        """Split lines into fields and convert them to numbers, failing on the first bad row."""
        field_counts = lines.str.count(',') + 1
        wrong_count = field_counts[field_counts != self.n_fields]
        if not wrong_count.empty:
            raise MalformedRowError(
                int(wrong_count.index[0]),
                f"expected {self.n_fields} fields, found {int(wrong_count.iloc[0])}"
            )

        fields = lines.str.split(',', expand=True)
        fields.columns = self.feature_names + [self.label_name]
        fields = fields.apply(lambda column: column.str.strip())

        values = fields.apply(lambda column: pd.to_numeric(column, errors='coerce'))
        invalid = ~np.isfinite(values.to_numpy(dtype=float))
        if invalid.any():
            row_pos, col_pos = np.argwhere(invalid)[0]
            column = fields.columns[col_pos]
            raise MalformedRowError(
                int(fields.index[row_pos]),
                f"non-numeric value '{fields.iat[row_pos, col_pos]}' in column '{column}'"
            )

        bad_label = ~values[self.label_name].isin([0, 1])
        if bad_label.any():
            row = values.index[bad_label.to_numpy()][0]
            raise MalformedRowError(
                int(row),
                f"label must be 0 or 1, found '{fields.at[row, self.label_name]}'"
            )

        return values

    def _print_data_info(self, summary: LoadSummary) -> None:
        """Log integrity counts; no return (user feedback only)."""
        self.logger.info("----------------------------")
        self.logger.info("Data Information:")
        self.logger.info(f"Rows read: {summary.rows_read}")
        self.logger.info(f"Duplicates removed: {summary.duplicates_removed}")
        self.logger.info(f"Rows kept: {summary.rows_kept}")
        self.logger.info(f"Label distribution: {summary.class_counts}")
        self.logger.info("----------------------------")


def load_dataset(data_path: Union[str, Path],
                 feature_names: Optional[List[str]] = None,
                 label_name: str = SPAMBASE_LABEL) -> Tuple[Dataset, LoadSummary]:
    """Convenience wrapper around DataLoader.load_data."""
    return DataLoader(feature_names=feature_names, label_name=label_name).load_data(data_path)
