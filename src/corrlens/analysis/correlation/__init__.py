"""Correlation analysis module.

- Engine: compute_matrix, rank_pairs, filter_then_recompute
- Runner: analyze_correlations (matrix + rankings + significance as a Result)
- Predicates for record filtering
"""

# Algorithms (pure computation)
from corrlens.analysis.correlation.algorithms import (
    classify_strength,
    order_pairs,
    pearson_matrix,
)

# Engine
from corrlens.analysis.correlation.engine import (
    compute_matrix,
    filter_then_recompute,
    matrix_from_observations,
    rank_pairs,
    select_observations,
)

# Pydantic Models
from corrlens.analysis.correlation.models import (
    CorrelationAnalysisResult,
    CorrelationMatrix,
    PairStatistics,
    RankedPair,
)

# Predicates
from corrlens.analysis.correlation.predicates import (
    Predicate,
    all_of,
    any_of,
    column_above,
    column_below,
    column_between,
    column_equals,
    column_in,
)
from corrlens.analysis.correlation.processor import analyze_correlations

__all__ = [
    # Main entry points
    "analyze_correlations",
    "compute_matrix",
    "rank_pairs",
    "filter_then_recompute",
    "matrix_from_observations",
    "select_observations",
    # Algorithms (pure computation)
    "classify_strength",
    "order_pairs",
    "pearson_matrix",
    # Pydantic Models
    "CorrelationMatrix",
    "RankedPair",
    "PairStatistics",
    "CorrelationAnalysisResult",
    # Predicates
    "Predicate",
    "all_of",
    "any_of",
    "column_above",
    "column_below",
    "column_between",
    "column_equals",
    "column_in",
]
