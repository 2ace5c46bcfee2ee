"""
Configuration management for preference_similarity.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from preference_similarity.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX
from preference_similarity.domain.models import DuplicatePolicy

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Every variable is prefixed with ``PREFERENCE_SIMILARITY_``
    (e.g. ``PREFERENCE_SIMILARITY_DUPLICATE_POLICY=forbid``).
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Level applied by setup_logging() when none is given",
    )
    duplicate_policy: DuplicatePolicy = Field(
        default=DuplicatePolicy.FIRST,
        description="Default handling of repeated (entity, item) preferences",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Strip and upper-case the level; reject unknown level names."""
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in _LEVEL_NAMES:
                raise ValueError(f"Unknown log level: {v!r}. Expected one of {_LEVEL_NAMES}")
        return v

    @field_validator("duplicate_policy", mode="before")
    @classmethod
    def lowercase_policy(cls, v: str | DuplicatePolicy) -> str | DuplicatePolicy:
        """Accept policy names case-insensitively."""
        if isinstance(v, str) and not isinstance(v, DuplicatePolicy):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def get_log_level() -> int:
    """Get the configured log level as a logging module constant."""
    return logging.getLevelName(get_settings().log_level)


def get_duplicate_policy() -> DuplicatePolicy:
    """Get the default duplicate policy for new preference stores."""
    return get_settings().duplicate_policy
