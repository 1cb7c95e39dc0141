"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from corrlens.core.models.base import MissingPolicy


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: CORRLENS_
    """

    model_config = SettingsConfigDict(
        env_prefix="CORRLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Analysis
    default_missing_policy: MissingPolicy = Field(
        default=MissingPolicy.EXCLUDE_INCOMPLETE_ROWS,
        description="Missing-value policy used when the caller does not pass one",
    )
    default_top_n: int = Field(
        default=5,
        ge=1,
        description="Number of pairs kept in each ranking",
    )
    significance_level: float = Field(
        default=0.05,
        gt=0.0,
        lt=1.0,
        description="p-value below which a pair is flagged as significant",
    )

    # Report
    report_precision: int = Field(
        default=2,
        ge=0,
        description="Decimal places shown in text reports",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
