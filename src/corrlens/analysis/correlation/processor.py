"""Correlation analysis runner.

Wraps the engine for callers that want a complete result in one call:
optional filtering, the matrix, and top-N rankings with significance.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

import numpy as np
from scipy import stats

from corrlens.analysis.correlation.engine import (
    matrix_from_observations,
    rank_pairs,
    select_observations,
)
from corrlens.analysis.correlation.models import (
    CorrelationAnalysisResult,
    PairStatistics,
    RankedPair,
)
from corrlens.core.config import Settings, get_settings
from corrlens.core.exceptions import CorrelationError
from corrlens.core.logging import get_logger, log_context
from corrlens.core.models.base import MissingPolicy, RankDirection, Result
from corrlens.sources.models import Dataset, Record

logger = get_logger(__name__)


def _with_significance(
    pairs: Sequence[RankedPair],
    names: Sequence[str],
    observations: np.ndarray,
    significance_level: float,
) -> list[PairStatistics]:
    index = {name: i for i, name in enumerate(names)}
    enriched = []
    for pair in pairs:
        x = observations[:, index[pair.variable_a]]
        y = observations[:, index[pair.variable_b]]
        _, p_value = stats.pearsonr(x, y)
        p_value_float = float(np.asarray(p_value).item())
        enriched.append(
            PairStatistics(
                variable_a=pair.variable_a,
                variable_b=pair.variable_b,
                value=pair.value,
                sample_size=len(x),
                p_value=p_value_float,
                is_significant=bool(p_value_float < significance_level),
            )
        )
    return enriched


def analyze_correlations(
    dataset: Dataset,
    missing_policy: MissingPolicy | str | None = None,
    top_n: int | None = None,
    predicate: Callable[[Record], bool] | None = None,
    settings: Settings | None = None,
) -> Result[CorrelationAnalysisResult]:
    """Run a full correlation analysis on a dataset.

    Args:
        dataset: Dataset to analyze
        missing_policy: Missing-value policy (default from settings)
        top_n: Pairs per ranking (default from settings)
        predicate: Optional record filter applied before computing
        settings: Settings override (default: cached settings)

    Returns:
        Result containing CorrelationAnalysisResult, or the engine error message
    """
    settings = settings or get_settings()
    policy = MissingPolicy(missing_policy or settings.default_missing_policy)
    top_n = top_n if top_n is not None else settings.default_top_n

    with log_context(missing_policy=policy.value, filtered=predicate is not None):
        logger.info("correlation_analysis_started", rows=len(dataset))
        try:
            # One filter and one complete-case pass feed both matrix and p-values
            working = dataset.filter(predicate) if predicate is not None else dataset
            names, observations = select_observations(working, policy)
            matrix = matrix_from_observations(names, observations, policy)
        except CorrelationError as e:
            logger.warning("correlation_analysis_failed", error=str(e))
            return Result.fail(f"Correlation analysis failed: {e}")

        rankings = {
            direction: _with_significance(
                rank_pairs(matrix, top_n, direction),
                names,
                observations,
                settings.significance_level,
            )
            for direction in RankDirection
        }

        warnings = []
        dropped = len(working) - observations.shape[0]
        if dropped:
            warnings.append(f"Dropped {dropped} row(s) with missing numeric values")

        result = CorrelationAnalysisResult(
            matrix=matrix,
            top_positive=rankings[RankDirection.POSITIVE],
            top_negative=rankings[RankDirection.NEGATIVE],
            top_absolute=rankings[RankDirection.ABSOLUTE],
            total_rows=len(dataset),
            filtered_rows=len(working),
            rows_used=observations.shape[0],
            computed_at=datetime.now(UTC),
        )
        logger.info(
            "correlation_analysis_completed",
            variables=len(matrix),
            rows_used=result.rows_used,
            dropped_rows=dropped,
        )
        return Result.ok(result, warnings)
