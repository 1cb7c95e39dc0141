"""Tests for pure correlation algorithms."""

import numpy as np
import pytest

from corrlens.analysis.correlation.algorithms import (
    canonical_pair,
    classify_strength,
    complete_rows,
    find_constant_columns,
    order_pairs,
    pearson_matrix,
    upper_triangle_pairs,
)
from corrlens.core.models.base import CorrelationStrength, RankDirection


class TestPearsonMatrix:
    """Pearson matrix on plain arrays."""

    def test_matches_numpy_corrcoef(self):
        rng = np.random.default_rng(42)
        data = rng.normal(size=(200, 4))
        data[:, 1] += 0.8 * data[:, 0]

        result = pearson_matrix(data)

        np.testing.assert_allclose(result, np.corrcoef(data, rowvar=False), atol=1e-12)

    def test_symmetric_with_exact_unit_diagonal(self):
        rng = np.random.default_rng(7)
        result = pearson_matrix(rng.uniform(size=(50, 5)))

        assert np.array_equal(np.diag(result), np.ones(5))
        assert np.array_equal(result, result.T)

    def test_values_within_bounds(self):
        x = np.linspace(0.1, 0.3, 30)
        data = np.column_stack([x, 3 * x, -7 * x])

        result = pearson_matrix(data)

        assert result.max() <= 1.0
        assert result.min() >= -1.0
        assert result[0, 2] == pytest.approx(-1.0, abs=1e-9)


def test_find_constant_columns():
    data = np.array([[1.0, 5.0, 2.0], [2.0, 5.0, 2.0], [3.0, 5.0, 2.0]])

    assert find_constant_columns(data) == [1, 2]
    assert find_constant_columns(np.empty((0, 2))) == [0, 1]


def test_complete_rows():
    data = np.array([[1.0, 2.0], [np.nan, 1.0], [3.0, 4.0]])

    assert complete_rows(data).tolist() == [True, False, True]


@pytest.mark.parametrize(
    ("r", "expected"),
    [
        (0.95, CorrelationStrength.VERY_STRONG),
        (-0.9, CorrelationStrength.VERY_STRONG),
        (0.75, CorrelationStrength.STRONG),
        (-0.5, CorrelationStrength.MODERATE),
        (0.3, CorrelationStrength.WEAK),
        (0.1, CorrelationStrength.NONE),
    ],
)
def test_classify_strength(r, expected):
    assert classify_strength(r) == expected


class TestOrdering:
    """Pair ordering for each direction."""

    PAIRS = [("a", "b", 0.9), ("a", "c", -0.9), ("b", "c", 0.1), ("b", "d", 0.9)]

    def test_canonical_pair(self):
        assert canonical_pair("wt", "hp") == ("hp", "wt")
        assert canonical_pair("hp", "wt") == ("hp", "wt")

    def test_upper_triangle_uses_canonical_names(self):
        values = [[1.0, 0.4], [0.4, 1.0]]

        assert upper_triangle_pairs(["wt", "hp"], values) == [("hp", "wt", 0.4)]

    def test_positive(self):
        ordered = order_pairs(self.PAIRS, RankDirection.POSITIVE)

        assert ordered == [
            ("a", "b", 0.9),
            ("b", "d", 0.9),
            ("b", "c", 0.1),
            ("a", "c", -0.9),
        ]

    def test_negative(self):
        ordered = order_pairs(self.PAIRS, RankDirection.NEGATIVE)

        assert ordered[0] == ("a", "c", -0.9)
        assert ordered[-1] == ("b", "d", 0.9)

    def test_absolute_ties_are_lexicographic(self):
        ordered = order_pairs(self.PAIRS, RankDirection.ABSOLUTE)

        assert ordered == [
            ("a", "b", 0.9),
            ("a", "c", -0.9),
            ("b", "d", 0.9),
            ("b", "c", 0.1),
        ]


@pytest.mark.parametrize("scale", [1e200, 1e-200])
def test_extreme_magnitudes_keep_sign(scale):
    x = np.array([1.0, 2.0, 3.0, 4.0]) * scale
    data = np.column_stack([x, x, -x])

    result = pearson_matrix(data)

    assert result[0, 1] == pytest.approx(1.0, abs=1e-9)
    assert result[0, 2] == pytest.approx(-1.0, abs=1e-9)


def test_overflowing_column_yields_nan_not_clamped_value():
    data = np.column_stack([[1e308, 1.7e308, 1.5e308], [1.0, 2.0, 4.0]])

    result = pearson_matrix(data)

    assert np.isnan(result[0, 1])
    assert np.isnan(result[1, 0])
    assert np.array_equal(np.diag(result), np.ones(2))
