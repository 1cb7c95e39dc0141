"""Pure numeric correlation algorithms.

Computes Pearson correlation matrices on numpy arrays.
No models, no logging - just math.
"""

import math

import numpy as np

from corrlens.core.models.base import CorrelationStrength


def classify_strength(r: float) -> CorrelationStrength:
    """Classify correlation strength by absolute value."""
    abs_r = abs(r)
    if abs_r >= 0.9:
        return CorrelationStrength.VERY_STRONG
    elif abs_r >= 0.7:
        return CorrelationStrength.STRONG
    elif abs_r >= 0.5:
        return CorrelationStrength.MODERATE
    elif abs_r >= 0.3:
        return CorrelationStrength.WEAK
    return CorrelationStrength.NONE


def complete_rows(data: np.ndarray) -> np.ndarray:
    """Boolean mask of rows without NaN."""
    return ~np.isnan(data).any(axis=1)


def find_constant_columns(data: np.ndarray) -> list[int]:
    """Indices of columns whose values are all identical (zero variance)."""
    if data.shape[0] == 0:
        return list(range(data.shape[1]))
    return [i for i in range(data.shape[1]) if np.ptp(data[:, i]) == 0]


def pearson_matrix(data: np.ndarray) -> np.ndarray:
    """Compute the Pearson correlation matrix of the columns of ``data``.

    Each centered column is divided by its largest absolute value before the
    dot products, so very large or very small magnitudes neither overflow nor
    underflow.

    Args:
        data: 2D array, rows are observations, columns are variables.
            Must contain no NaN and no constant column.

    Returns:
        Square symmetric array with an exact unit diagonal. An entry that
        cannot be computed as a finite number is NaN.
    """
    n_cols = data.shape[1]
    result = np.eye(n_cols)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        centered = data - data.mean(axis=0)
        scaled = centered / np.abs(centered).max(axis=0)
        norms = np.sqrt(np.einsum("ij,ij->j", scaled, scaled))

        # Upper triangle only, mirrored
        for i in range(n_cols):
            for j in range(i + 1, n_cols):
                r = float(np.dot(scaled[:, i], scaled[:, j]) / (norms[i] * norms[j]))
                r = min(1.0, max(-1.0, r)) if math.isfinite(r) else math.nan
                result[i, j] = r
                result[j, i] = r
    return result
