"""Shared pytest fixtures for all tests."""

import pytest

from corrlens.core.config import Settings
from corrlens.core.models.base import ColumnKind
from corrlens.sources.models import Dataset


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def linear_dataset() -> Dataset:
    """y = 2x + 1 and z = -x, plus a categorical label."""
    records = [
        {"x": float(x), "y": 2.0 * x + 1.0, "z": -float(x), "label": "even" if x % 2 == 0 else "odd"}
        for x in range(1, 11)
    ]
    return Dataset.from_records(
        records,
        {
            "x": ColumnKind.NUMERIC,
            "y": ColumnKind.NUMERIC,
            "z": ColumnKind.NUMERIC,
            "label": ColumnKind.CATEGORICAL,
        },
    )


@pytest.fixture
def cars_dataset() -> Dataset:
    """First rows of mtcars: mpg, cyl, hp, wt."""
    rows = [
        ("Mazda RX4", 21.0, 6, 110, 2.620),
        ("Mazda RX4 Wag", 21.0, 6, 110, 2.875),
        ("Datsun 710", 22.8, 4, 93, 2.320),
        ("Hornet 4 Drive", 21.4, 6, 110, 3.215),
        ("Hornet Sportabout", 18.7, 8, 175, 3.440),
        ("Valiant", 18.1, 6, 105, 3.460),
        ("Duster 360", 14.3, 8, 245, 3.570),
        ("Merc 240D", 24.4, 4, 62, 3.190),
        ("Merc 230", 22.8, 4, 95, 3.150),
        ("Merc 280", 19.2, 6, 123, 3.440),
        ("Merc 280C", 17.8, 6, 123, 3.440),
        ("Merc 450SE", 16.4, 8, 180, 4.070),
    ]
    records = [
        {"model": model, "mpg": mpg, "cyl": cyl, "hp": hp, "wt": wt}
        for model, mpg, cyl, hp, wt in rows
    ]
    return Dataset.from_records(
        records,
        {
            "model": ColumnKind.CATEGORICAL,
            "mpg": ColumnKind.NUMERIC,
            "cyl": ColumnKind.NUMERIC,
            "hp": ColumnKind.NUMERIC,
            "wt": ColumnKind.NUMERIC,
        },
    )
