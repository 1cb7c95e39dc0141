"""Correlation engine.

Turns a dataset into a Pearson correlation matrix and a matrix into ranked
pairs. Every call is a full, independent pass over immutable input; nothing
is cached or shared between calls.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from corrlens.analysis.correlation.algorithms import (
    complete_rows,
    find_constant_columns,
    order_pairs,
    pearson_matrix,
)
from corrlens.analysis.correlation.models import CorrelationMatrix, RankedPair
from corrlens.core.exceptions import (
    InsufficientColumnsError,
    MissingValueError,
    UndefinedCorrelationError,
)
from corrlens.core.logging import get_logger
from corrlens.core.models.base import MissingPolicy, RankDirection
from corrlens.sources.models import Dataset, Record

logger = get_logger(__name__)


def select_observations(
    dataset: Dataset,
    missing_policy: MissingPolicy | str,
) -> tuple[tuple[str, ...], np.ndarray]:
    """Numeric column names and the complete-case observation matrix.

    Raises:
        InsufficientColumnsError: Fewer than 2 numeric columns
        MissingValueError: A numeric cell is missing under FAIL_ON_MISSING
    """
    policy = MissingPolicy(missing_policy)
    names = dataset.numeric_columns
    if len(names) < 2:
        raise InsufficientColumnsError(names)

    data = dataset.numeric_array(names)
    missing = np.isnan(data)
    if policy == MissingPolicy.FAIL_ON_MISSING and missing.any():
        row, col = np.argwhere(missing)[0]
        raise MissingValueError(int(row), names[col])

    return names, data[complete_rows(data)]


def compute_matrix(
    dataset: Dataset,
    missing_policy: MissingPolicy | str,
) -> CorrelationMatrix:
    """Compute the Pearson correlation matrix of the dataset's numeric columns.

    Args:
        dataset: Input records with declared schema
        missing_policy: EXCLUDE_INCOMPLETE_ROWS or FAIL_ON_MISSING

    Returns:
        CorrelationMatrix over numeric columns in schema order

    Raises:
        InsufficientColumnsError: Fewer than 2 numeric columns
        MissingValueError: A numeric cell is missing under FAIL_ON_MISSING
        UndefinedCorrelationError: Fewer than 2 complete rows, a constant column,
            or a coefficient that is not a finite number
    """
    policy = MissingPolicy(missing_policy)
    names, observations = select_observations(dataset, policy)
    matrix = matrix_from_observations(names, observations, policy)
    logger.debug(
        "correlation_matrix_computed",
        variables=len(names),
        sample_size=matrix.sample_size,
        dropped_rows=len(dataset) - observations.shape[0],
        missing_policy=policy.value,
    )
    return matrix


def matrix_from_observations(
    names: Sequence[str],
    observations: np.ndarray,
    missing_policy: MissingPolicy | str,
) -> CorrelationMatrix:
    """Correlation matrix of complete-case observations from ``select_observations``.

    Raises:
        UndefinedCorrelationError: Fewer than 2 rows, a constant column, or a
            coefficient that is not a finite number
    """
    n_obs = observations.shape[0]
    if n_obs < 2:
        raise UndefinedCorrelationError(
            names, f"{n_obs} complete observation(s), at least 2 required"
        )

    constant = find_constant_columns(observations)
    if constant:
        raise UndefinedCorrelationError([names[i] for i in constant], "zero variance")

    values = pearson_matrix(observations)
    undefined = np.isnan(values).any(axis=0)
    if undefined.any():
        raise UndefinedCorrelationError(
            [name for name, bad in zip(names, undefined, strict=True) if bad],
            "coefficient is not a finite number",
        )

    return CorrelationMatrix.from_array(
        names,
        values,
        sample_size=n_obs,
        missing_policy=MissingPolicy(missing_policy),
    )


def rank_pairs(
    matrix: CorrelationMatrix,
    top_n: int,
    direction: RankDirection | str,
) -> list[RankedPair]:
    """Return the ``top_n`` strongest off-diagonal pairs.

    Each unordered pair appears once with its names in lexicographic order.
    Fewer than ``top_n`` pairs are returned when the matrix has fewer.

    Raises:
        ValueError: If ``top_n`` is not a positive integer or direction is unknown
    """
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 1:
        raise ValueError(f"top_n must be a positive integer, got {top_n!r}")
    direction = RankDirection(direction)

    ordered = order_pairs(matrix.pairs(), direction)
    return [RankedPair(variable_a=a, variable_b=b, value=v) for a, b, v in ordered[:top_n]]


def filter_then_recompute(
    dataset: Dataset,
    predicate: Callable[[Record], bool],
    missing_policy: MissingPolicy | str = MissingPolicy.EXCLUDE_INCOMPLETE_ROWS,
) -> CorrelationMatrix:
    """Keep records matching ``predicate`` and compute a fresh matrix."""
    filtered = dataset.filter(predicate)
    logger.debug("dataset_filtered", rows_before=len(dataset), rows_after=len(filtered))
    return compute_matrix(filtered, missing_policy)
