"""CSV loader.

Reads a CSV file through DuckDB's type sniffing and declares every column
DuckDB resolves to a numeric type as numeric.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import duckdb

from corrlens.core.logging import get_logger
from corrlens.sources.models import Dataset

logger = get_logger(__name__)

NUMERIC_TYPES = frozenset(
    {
        "TINYINT",
        "SMALLINT",
        "INTEGER",
        "BIGINT",
        "HUGEINT",
        "UTINYINT",
        "USMALLINT",
        "UINTEGER",
        "UBIGINT",
        "FLOAT",
        "REAL",
        "DOUBLE",
    }
)


def is_numeric_type(duckdb_type: str) -> bool:
    """Whether a DuckDB column type holds real numbers."""
    normalized = duckdb_type.upper()
    return normalized in NUMERIC_TYPES or normalized.startswith("DECIMAL")


def load_csv(path: str | Path, numeric_columns: Sequence[str] | None = None) -> Dataset:
    """Load a CSV file into a Dataset.

    Args:
        path: CSV file path
        numeric_columns: Explicit numeric columns; detected from DuckDB types if None

    Returns:
        Dataset with one record per CSV row

    Raises:
        FileNotFoundError: If the file does not exist
        DatasetSchemaError: If declared numeric columns hold non-numeric values
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    source = str(path).replace("'", "''")
    conn = duckdb.connect(":memory:")
    try:
        described = conn.execute(f"DESCRIBE SELECT * FROM read_csv_auto('{source}')").fetchall()
        df = conn.execute(f"SELECT * FROM read_csv_auto('{source}')").df()
    finally:
        conn.close()

    if numeric_columns is None:
        numeric_columns = [name for name, column_type, *_ in described if is_numeric_type(column_type)]

    dataset = Dataset.from_dataframe(df, numeric_columns=numeric_columns)
    logger.debug(
        "csv_loaded",
        path=str(path),
        rows=len(dataset),
        numeric_columns=list(dataset.numeric_columns),
    )
    return dataset
