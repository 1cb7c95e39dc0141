"""Pure correlation algorithms.

These functions operate on numpy arrays and plain tuples.
No logging, no Pydantic models - just math.
"""

from corrlens.analysis.correlation.algorithms.numeric import (
    classify_strength,
    complete_rows,
    find_constant_columns,
    pearson_matrix,
)
from corrlens.analysis.correlation.algorithms.ranking import (
    canonical_pair,
    order_pairs,
    upper_triangle_pairs,
)

__all__ = [
    # Numeric
    "classify_strength",
    "complete_rows",
    "find_constant_columns",
    "pearson_matrix",
    # Ranking
    "canonical_pair",
    "order_pairs",
    "upper_triangle_pairs",
]
