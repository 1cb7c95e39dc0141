"""Record predicates for filter_then_recompute.

Numeric comparisons never match a record whose cell is missing.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import Any

from corrlens.sources.models import Record, is_missing

Predicate = Callable[[Record], bool]


def column_below(column: str, threshold: float) -> Predicate:
    """Match records where ``column`` < ``threshold``."""

    def predicate(record: Record) -> bool:
        value = record[column]
        return not is_missing(value) and value < threshold

    return predicate


def column_above(column: str, threshold: float) -> Predicate:
    """Match records where ``column`` > ``threshold``."""

    def predicate(record: Record) -> bool:
        value = record[column]
        return not is_missing(value) and value > threshold

    return predicate


def column_between(column: str, low: float, high: float, inclusive: bool = True) -> Predicate:
    """Match records where ``column`` lies between ``low`` and ``high``."""
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")

    def predicate(record: Record) -> bool:
        value = record[column]
        if is_missing(value):
            return False
        if inclusive:
            return low <= value <= high
        return low < value < high

    return predicate


def column_equals(column: str, expected: Any) -> Predicate:
    """Match records where ``column`` == ``expected``."""

    def predicate(record: Record) -> bool:
        return record[column] == expected

    return predicate


def column_in(column: str, allowed: Collection[Any]) -> Predicate:
    """Match records whose ``column`` value is one of ``allowed``."""
    allowed = frozenset(allowed)

    def predicate(record: Record) -> bool:
        value = record[column]
        return not is_missing(value) and value in allowed

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Match records accepted by every predicate."""

    def predicate(record: Record) -> bool:
        return all(p(record) for p in predicates)

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Match records accepted by at least one predicate."""

    def predicate(record: Record) -> bool:
        return any(p(record) for p in predicates)

    return predicate
