"""Dataset model and loaders."""

from corrlens.sources.csv import load_csv
from corrlens.sources.models import ColumnSchema, Dataset, Record, is_missing

__all__ = [
    "ColumnSchema",
    "Dataset",
    "Record",
    "is_missing",
    "load_csv",
]
