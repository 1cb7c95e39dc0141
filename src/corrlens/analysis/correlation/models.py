"""Correlation Pydantic Models.

- CorrelationMatrix: square, symmetric Pearson matrix with unit diagonal
- RankedPair: one off-diagonal pair selected for a top-N report
- PairStatistics: RankedPair with sample size and significance
- CorrelationAnalysisResult: matrix plus rankings from one analysis run
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from datetime import datetime

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from corrlens.analysis.correlation.algorithms import classify_strength, upper_triangle_pairs
from corrlens.core.models.base import CorrelationStrength, MissingPolicy

# =============================================================================
# Matrix
# =============================================================================


class CorrelationMatrix(BaseModel):
    """Pearson correlation between every pair of numeric variables."""

    model_config = ConfigDict(frozen=True)

    variables: tuple[str, ...]
    values: tuple[tuple[float, ...], ...]

    # Metadata
    sample_size: int | None = None
    missing_policy: MissingPolicy | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> CorrelationMatrix:
        size = len(self.variables)
        if len(set(self.variables)) != size:
            raise ValueError("Variable names must be unique")
        if len(self.values) != size or any(len(row) != size for row in self.values):
            raise ValueError(f"Matrix must be {size}x{size}")
        for i in range(size):
            if self.values[i][i] != 1.0:
                raise ValueError(f"Diagonal entry for '{self.variables[i]}' must be 1.0")
            for j in range(size):
                v = self.values[i][j]
                if not math.isfinite(v) or not -1.0 <= v <= 1.0:
                    raise ValueError(
                        f"Value for ({self.variables[i]}, {self.variables[j]}) outside [-1, 1]: {v}"
                    )
                if v != self.values[j][i]:
                    raise ValueError(
                        f"Matrix not symmetric at ({self.variables[i]}, {self.variables[j]})"
                    )
        return self

    @classmethod
    def from_array(
        cls,
        variables: Sequence[str],
        array: np.ndarray,
        sample_size: int | None = None,
        missing_policy: MissingPolicy | None = None,
    ) -> CorrelationMatrix:
        return cls(
            variables=tuple(variables),
            values=tuple(tuple(float(v) for v in row) for row in array),
            sample_size=sample_size,
            missing_policy=missing_policy,
        )

    @classmethod
    def from_pairs(cls, pairs: Mapping[tuple[str, str], float]) -> CorrelationMatrix:
        """Build a matrix from off-diagonal pair values.

        Variables are ordered by first appearance. Every unordered pair must be
        given once, or twice with the same value.
        """
        variables: list[str] = []
        for a, b in pairs:
            for name in (a, b):
                if name not in variables:
                    variables.append(name)

        size = len(variables)
        index = {name: i for i, name in enumerate(variables)}
        array = np.full((size, size), np.nan)
        np.fill_diagonal(array, 1.0)
        for (a, b), value in pairs.items():
            if a == b:
                if value != 1.0:
                    raise ValueError(f"Self-correlation of '{a}' must be 1.0")
                continue
            i, j = index[a], index[b]
            if not np.isnan(array[i, j]) and array[i, j] != value:
                raise ValueError(f"Conflicting values for ({a}, {b})")
            array[i, j] = value
            array[j, i] = value

        if np.isnan(array).any():
            i, j = np.argwhere(np.isnan(array))[0]
            raise ValueError(f"No value given for ({variables[i]}, {variables[j]})")
        return cls.from_array(variables, array)

    def _index(self, name: str) -> int:
        try:
            return self.variables.index(name)
        except ValueError:
            raise KeyError(name) from None

    def value(self, a: str, b: str) -> float:
        """Correlation between variables ``a`` and ``b``."""
        return self.values[self._index(a)][self._index(b)]

    def __getitem__(self, key: tuple[str, str]) -> float:
        a, b = key
        return self.value(a, b)

    def __len__(self) -> int:
        return len(self.variables)

    def pairs(self) -> list[tuple[str, str, float]]:
        """Off-diagonal pairs, each once, names in lexicographic order."""
        return upper_triangle_pairs(self.variables, self.values)

    def to_numpy(self) -> np.ndarray:
        return np.array(self.values, dtype=float)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            self.to_numpy(), index=list(self.variables), columns=list(self.variables)
        )


# =============================================================================
# Ranked pairs
# =============================================================================


class RankedPair(BaseModel):
    """A variable pair with its correlation, ordered for top-N reporting."""

    model_config = ConfigDict(frozen=True)

    variable_a: str
    variable_b: str
    value: float

    @model_validator(mode="after")
    def _check_pair(self) -> RankedPair:
        if self.variable_a == self.variable_b:
            raise ValueError("A ranked pair needs two distinct variables")
        return self

    @property
    def strength(self) -> CorrelationStrength:
        return classify_strength(self.value)

    def as_tuple(self) -> tuple[str, str, float]:
        return (self.variable_a, self.variable_b, self.value)


class PairStatistics(RankedPair):
    """Ranked pair with significance of the Pearson coefficient."""

    sample_size: int
    p_value: float
    is_significant: bool  # p_value < significance level


# =============================================================================
# Analysis result
# =============================================================================


class CorrelationAnalysisResult(BaseModel):
    """Complete result of one correlation analysis run."""

    matrix: CorrelationMatrix
    top_positive: list[PairStatistics] = Field(default_factory=list)
    top_negative: list[PairStatistics] = Field(default_factory=list)
    top_absolute: list[PairStatistics] = Field(default_factory=list)

    # Row accounting
    total_rows: int  # Rows before any filter
    filtered_rows: int  # Rows after the predicate
    rows_used: int  # Complete cases that went into the matrix

    computed_at: datetime
