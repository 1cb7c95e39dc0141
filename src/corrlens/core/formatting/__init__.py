"""Text formatting of correlation results."""

from corrlens.core.formatting.report import (
    matrix_table,
    ranking_table,
    render_analysis,
    render_matrix,
    render_ranking,
)

__all__ = [
    "matrix_table",
    "ranking_table",
    "render_analysis",
    "render_matrix",
    "render_ranking",
]
