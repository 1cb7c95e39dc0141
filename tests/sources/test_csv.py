"""Tests for CSV loading."""

import pytest

from corrlens.sources.csv import is_numeric_type, load_csv


@pytest.mark.parametrize(
    ("duckdb_type", "expected"),
    [
        ("BIGINT", True),
        ("DOUBLE", True),
        ("DECIMAL(10,2)", True),
        ("integer", True),
        ("VARCHAR", False),
        ("BOOLEAN", False),
        ("DATE", False),
    ],
)
def test_is_numeric_type(duckdb_type, expected):
    assert is_numeric_type(duckdb_type) is expected


def test_load_csv_detects_numeric_columns(tmp_path):
    path = tmp_path / "cars.csv"
    path.write_text(
        "model,mpg,hp\n"
        "Mazda RX4,21.0,110\n"
        "Datsun 710,22.8,93\n"
        "Duster 360,14.3,245\n"
        "Merc 240D,24.4,62\n"
    )

    dataset = load_csv(path)

    assert len(dataset) == 4
    assert dataset.numeric_columns == ("mpg", "hp")
    assert dataset.categorical_columns == ("model",)
    assert dataset.records[2]["hp"] == 245


def test_load_csv_with_empty_cells(tmp_path):
    path = tmp_path / "gaps.csv"
    path.write_text("a,b\n1.5,2.0\n2.5,\n3.5,4.0\n")

    dataset = load_csv(path, numeric_columns=["a", "b"])

    data = dataset.numeric_array()
    assert data.shape == (3, 2)
    assert data[0, 1] == 2.0


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "nope.csv")
