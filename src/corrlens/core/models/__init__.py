"""Shared models."""

from corrlens.core.models.base import (
    ColumnKind,
    CorrelationStrength,
    MissingPolicy,
    RankDirection,
    Result,
)

__all__ = [
    "ColumnKind",
    "CorrelationStrength",
    "MissingPolicy",
    "RankDirection",
    "Result",
]
