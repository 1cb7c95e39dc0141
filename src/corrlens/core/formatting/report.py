"""Plain-text reports for correlation results.

Tables are built with rich and exported as text, so the same output works
in a terminal, a log file or a document.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from corrlens.analysis.correlation.models import (
    CorrelationAnalysisResult,
    CorrelationMatrix,
    PairStatistics,
    RankedPair,
)
from corrlens.core.config import get_settings

DEFAULT_WIDTH = 120


def _export(*renderables: object, width: int = DEFAULT_WIDTH) -> str:
    console = Console(
        file=io.StringIO(),
        record=True,
        width=width,
        color_system=None,
        force_terminal=False,
    )
    for renderable in renderables:
        console.print(renderable)
    return console.export_text()


def _precision(precision: int | None) -> int:
    return get_settings().report_precision if precision is None else precision


def matrix_table(matrix: CorrelationMatrix, precision: int | None = None) -> RichTable:
    """Build a rich table with one row and one column per variable."""
    digits = _precision(precision)
    table = RichTable(title="Correlation matrix")
    table.add_column("")
    for name in matrix.variables:
        table.add_column(escape(name), justify="right")
    for name, row in zip(matrix.variables, matrix.values, strict=True):
        table.add_row(escape(name), *(f"{v:.{digits}f}" for v in row))
    return table


def ranking_table(
    pairs: Sequence[RankedPair],
    title: str = "Ranked pairs",
    precision: int | None = None,
) -> RichTable:
    """Build a rich table of ranked pairs; p-values shown when available."""
    digits = _precision(precision)
    with_stats = bool(pairs) and all(isinstance(p, PairStatistics) for p in pairs)

    table = RichTable(title=title)
    table.add_column("#", justify="right")
    table.add_column("Variable A")
    table.add_column("Variable B")
    table.add_column("r", justify="right")
    table.add_column("Strength")
    if with_stats:
        table.add_column("p-value", justify="right")
        table.add_column("n", justify="right")

    for rank, pair in enumerate(pairs, start=1):
        cells = [
            str(rank),
            escape(pair.variable_a),
            escape(pair.variable_b),
            f"{pair.value:.{digits}f}",
            pair.strength.value,
        ]
        if isinstance(pair, PairStatistics) and with_stats:
            cells += [f"{pair.p_value:.3g}", str(pair.sample_size)]
        table.add_row(*cells)
    return table


def render_matrix(matrix: CorrelationMatrix, precision: int | None = None) -> str:
    return _export(matrix_table(matrix, precision))


def render_ranking(
    pairs: Sequence[RankedPair],
    title: str = "Ranked pairs",
    precision: int | None = None,
) -> str:
    return _export(ranking_table(pairs, title, precision))


def render_analysis(result: CorrelationAnalysisResult, precision: int | None = None) -> str:
    """Render the matrix and all three rankings of an analysis result."""
    summary = (
        f"Rows: {result.total_rows} total, {result.filtered_rows} after filter, "
        f"{result.rows_used} used"
    )
    return _export(
        summary,
        matrix_table(result.matrix, precision),
        ranking_table(result.top_positive, "Strongest positive", precision),
        ranking_table(result.top_negative, "Strongest negative", precision),
        ranking_table(result.top_absolute, "Strongest absolute", precision),
    )
