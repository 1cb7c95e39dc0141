"""Error taxonomy for dataset validation and correlation computation.

Every error is terminal for the call that raised it: no partial matrix is
returned and nothing is retried. Callers choose whether to try again with a
different missing-value policy or a different filter.
"""

from __future__ import annotations

from collections.abc import Sequence


class CorrelationError(Exception):
    """Base class for expected correlation failures."""


class DatasetSchemaError(CorrelationError):
    """Records do not conform to the dataset's declared schema."""


class InsufficientColumnsError(CorrelationError):
    """Fewer than two numeric columns are available."""

    def __init__(self, numeric_columns: Sequence[str]):
        self.numeric_columns = tuple(numeric_columns)
        super().__init__(
            f"At least 2 numeric columns are required, found {len(self.numeric_columns)}"
            + (f": {', '.join(self.numeric_columns)}" if self.numeric_columns else "")
        )


class MissingValueError(CorrelationError):
    """A numeric cell is missing while missing values are not allowed."""

    def __init__(self, row_index: int, column: str):
        self.row_index = row_index
        self.column = column
        super().__init__(f"Missing value in column '{column}' at row {row_index}")


class UndefinedCorrelationError(CorrelationError):
    """Pearson r cannot be computed for at least one column."""

    def __init__(self, columns: Sequence[str], reason: str):
        self.columns = tuple(columns)
        self.reason = reason
        super().__init__(f"Correlation undefined for {', '.join(self.columns)}: {reason}")
