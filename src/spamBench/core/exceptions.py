"""
Error taxonomy for spamBench.

Data-integrity errors (load, split, column mismatch) abort a run.
TrainingFailedError is caught by the evaluation harness and reported as a
failed model entry.
"""

from typing import Optional, Sequence


class SpamBenchError(Exception):
    """Base class for all spamBench errors."""


class MalformedRowError(SpamBenchError, ValueError):
    """A row of the input file cannot be parsed into the fixed schema."""

    def __init__(self, row_index: int, reason: str):
        self.row_index = row_index
        self.reason = reason
        super().__init__(f"Malformed row {row_index}: {reason}")


class InvalidSplitError(SpamBenchError, ValueError):
    """Split fraction or class sizes do not allow a stratified split."""


class ColumnMismatchError(SpamBenchError, ValueError):
    """Feature columns differ from the ones a transform was fitted on."""

    def __init__(self, expected: Sequence[str], actual: Sequence[str], message: Optional[str] = None):
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        if message is None:
            if len(self.expected) != len(self.actual):
                message = (f"Expected {len(self.expected)} feature columns, "
                           f"got {len(self.actual)}")
            else:
                first = next((i for i, (a, b) in enumerate(zip(self.expected, self.actual)) if a != b), None)
                if first is None:
                    message = "Feature columns differ from the fitted columns"
                else:
                    message = (f"Feature order differs at position {first}: "
                               f"expected '{self.expected[first]}', got '{self.actual[first]}'")
        super().__init__(message)


class TrainingFailedError(SpamBenchError, RuntimeError):
    """A backend produced no valid fit for any grid point."""

    def __init__(self, backend: str, reason: str):
        self.backend = backend
        self.reason = reason
        super().__init__(f"Training failed for backend '{backend}': {reason}")
