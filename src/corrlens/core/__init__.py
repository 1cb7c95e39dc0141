"""Core module - configuration, logging, errors and shared models."""

from corrlens.core.config import Settings, get_settings
from corrlens.core.exceptions import (
    CorrelationError,
    DatasetSchemaError,
    InsufficientColumnsError,
    MissingValueError,
    UndefinedCorrelationError,
)
from corrlens.core.models.base import (
    ColumnKind,
    CorrelationStrength,
    MissingPolicy,
    RankDirection,
    Result,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "CorrelationError",
    "DatasetSchemaError",
    "InsufficientColumnsError",
    "MissingValueError",
    "UndefinedCorrelationError",
    # Models - enums
    "ColumnKind",
    "CorrelationStrength",
    "MissingPolicy",
    "RankDirection",
    # Models - base data structures
    "Result",
]
