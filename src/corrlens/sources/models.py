"""Dataset model.

A dataset is an ordered, immutable sequence of records with a declared
schema. The schema says which columns are numeric (and therefore take part
in correlation) and which are categorical. Type checks happen once, here,
so the analysis layer can trust its input.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from corrlens.core.exceptions import DatasetSchemaError
from corrlens.core.models.base import ColumnKind

Record = Mapping[str, Any]


def is_missing(value: Any) -> bool:
    """Whether a cell counts as missing (None, NaN or pandas.NA)."""
    if value is None or value is pd.NA:
        return True
    return isinstance(value, float | np.floating) and math.isnan(value)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, numbers.Real)


class ColumnSchema(BaseModel):
    """Name and kind of one dataset column."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ColumnKind

    @property
    def is_numeric(self) -> bool:
        return self.kind == ColumnKind.NUMERIC


class Dataset(BaseModel):
    """Immutable table of records with a declared column schema."""

    model_config = ConfigDict(frozen=True)

    columns: tuple[ColumnSchema, ...]
    records: tuple[Mapping[str, Any], ...] = ()

    @field_validator("records", mode="after")
    @classmethod
    def _freeze_records(cls, records: tuple[Mapping[str, Any], ...]) -> tuple[Record, ...]:
        return tuple(MappingProxyType(dict(record)) for record in records)

    @model_validator(mode="after")
    def _check_schema(self) -> Dataset:
        names = [column.name for column in self.columns]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise DatasetSchemaError(f"Duplicate column names: {', '.join(duplicates)}")

        expected = set(names)
        numeric = [column.name for column in self.columns if column.is_numeric]
        for index, record in enumerate(self.records):
            keys = set(record)
            if keys != expected:
                missing = sorted(expected - keys)
                extra = sorted(keys - expected)
                raise DatasetSchemaError(
                    f"Record {index} does not match schema"
                    + (f"; missing columns: {', '.join(missing)}" if missing else "")
                    + (f"; unknown columns: {', '.join(extra)}" if extra else "")
                )
            for name in numeric:
                value = record[name]
                if is_missing(value):
                    continue
                if not _is_number(value):
                    raise DatasetSchemaError(
                        f"Record {index}: numeric column '{name}' holds {type(value).__name__} "
                        f"value {value!r}"
                    )
                if not math.isfinite(value):
                    raise DatasetSchemaError(
                        f"Record {index}: numeric column '{name}' holds non-finite value {value!r}"
                    )
        return self

    # --- Construction -----------------------------------------------------

    @classmethod
    def from_records(
        cls,
        records: Iterable[Record],
        schema: Mapping[str, ColumnKind | str] | Sequence[ColumnSchema],
    ) -> Dataset:
        """Build a dataset from plain mappings and a schema.

        Args:
            records: Row mappings, column name to value
            schema: Either ColumnSchema objects or a name -> kind mapping (order kept)

        Returns:
            Validated Dataset
        """
        if isinstance(schema, Mapping):
            columns = tuple(
                ColumnSchema(name=name, kind=ColumnKind(kind)) for name, kind in schema.items()
            )
        else:
            columns = tuple(schema)
        return cls(columns=columns, records=tuple(dict(record) for record in records))

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        numeric_columns: Sequence[str] | None = None,
    ) -> Dataset:
        """Build a dataset from a DataFrame.

        Without ``numeric_columns`` every column with a numeric (non-boolean)
        dtype is declared numeric; all other columns are categorical.
        """
        names = [str(c) for c in df.columns]
        if numeric_columns is None:
            numeric = {str(c) for c in df.select_dtypes(include="number").columns}
        else:
            unknown = sorted(set(numeric_columns) - set(names))
            if unknown:
                raise DatasetSchemaError(f"Unknown numeric columns: {', '.join(unknown)}")
            numeric = set(numeric_columns)

        columns = tuple(
            ColumnSchema(
                name=name,
                kind=ColumnKind.NUMERIC if name in numeric else ColumnKind.CATEGORICAL,
            )
            for name in names
        )
        frame = df.copy()
        frame.columns = names
        records = tuple(
            {name: _to_python(value) for name, value in row.items()}
            for row in frame.to_dict(orient="records")
        )
        return cls(columns=columns, records=records)

    # --- Access -------------------------------------------------------------

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns)

    @property
    def numeric_columns(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns if column.is_numeric)

    @property
    def categorical_columns(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns if not column.is_numeric)

    def kind_of(self, name: str) -> ColumnKind:
        for column in self.columns:
            if column.name == name:
                return column.kind
        raise KeyError(name)

    def __len__(self) -> int:
        return len(self.records)

    def numeric_array(self, columns: Sequence[str] | None = None) -> np.ndarray:
        """Numeric cells as a float matrix (rows are records), NaN where missing."""
        names = tuple(columns) if columns is not None else self.numeric_columns
        for name in names:
            if self.kind_of(name) != ColumnKind.NUMERIC:
                raise DatasetSchemaError(f"Column '{name}' is not numeric")

        data = np.empty((len(self.records), len(names)), dtype=float)
        for i, record in enumerate(self.records):
            for j, name in enumerate(names):
                value = record[name]
                data[i, j] = np.nan if is_missing(value) else float(value)
        return data

    # --- Derivation ---------------------------------------------------------

    def filter(self, predicate: Callable[[Record], bool]) -> Dataset:
        """New dataset with the same schema and only matching records."""
        kept = tuple(record for record in self.records if predicate(record))
        return Dataset(columns=self.columns, records=kept)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([dict(r) for r in self.records], columns=list(self.column_names))


def _to_python(value: Any) -> Any:
    """Unwrap numpy scalars so records hold plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    return value
