"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
domain module (sources, analysis, formatting).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self


# === Enums ===


class ColumnKind(str, Enum):
    """Declared kind of a dataset column."""

    NUMERIC = "numeric"  # Participates in correlation
    CATEGORICAL = "categorical"  # Carried along, usable in predicates


class MissingPolicy(str, Enum):
    """How missing numeric cells are handled before correlating."""

    EXCLUDE_INCOMPLETE_ROWS = "exclude_incomplete_rows"
    FAIL_ON_MISSING = "fail_on_missing"


class RankDirection(str, Enum):
    """Ordering used when ranking correlation pairs."""

    POSITIVE = "positive"  # Largest r first
    NEGATIVE = "negative"  # Smallest r first
    ABSOLUTE = "absolute"  # Largest |r| first


class CorrelationStrength(str, Enum):
    """Interpretation of |r|."""

    NONE = "none"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very_strong"
