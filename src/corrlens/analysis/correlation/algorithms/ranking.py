"""Ordering of correlation pairs for top-N reports."""

from collections.abc import Iterable, Sequence

from corrlens.core.models.base import RankDirection

Pair = tuple[str, str, float]


def canonical_pair(a: str, b: str) -> tuple[str, str]:
    """Order two variable names lexicographically."""
    return (a, b) if a <= b else (b, a)


def upper_triangle_pairs(
    variables: Sequence[str], values: Sequence[Sequence[float]]
) -> list[Pair]:
    """One entry per unordered off-diagonal pair, names in canonical order."""
    pairs = []
    for i, a in enumerate(variables):
        for j in range(i + 1, len(variables)):
            first, second = canonical_pair(a, variables[j])
            pairs.append((first, second, values[i][j]))
    return pairs


def order_pairs(pairs: Iterable[Pair], direction: RankDirection) -> list[Pair]:
    """Sort pairs for the given direction, ties broken by (a, b)."""
    if direction == RankDirection.POSITIVE:
        return sorted(pairs, key=lambda p: (-p[2], p[0], p[1]))
    if direction == RankDirection.NEGATIVE:
        return sorted(pairs, key=lambda p: (p[2], p[0], p[1]))
    return sorted(pairs, key=lambda p: (-abs(p[2]), p[0], p[1]))
