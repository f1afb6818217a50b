"""
Environment-variable settings for the e2e environment.

This is the only module that reads the process environment. Everything
downstream receives typed values from EnvironmentSettings.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core import METRICS_DEFAULT_REGION
from .errors import ConfigError, MissingEnvironmentVariable


class RegionSettings(BaseSettings):
    aws_region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION", "aws_region"),
        description="Primary region; AWS_REGION wins over AWS_DEFAULT_REGION.",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("aws_region", mode="before")
    @classmethod
    def _blank_region(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EnvironmentSettings(RegionSettings):
    cluster_name: str = Field(min_length=1)
    cluster_endpoint: str = Field(min_length=1)
    private_cluster: bool = Field(
        default=False,
        description="Presence-based: any value, including empty, enables it.",
    )
    enable_metrics: bool = False
    metrics_region: str = METRICS_DEFAULT_REGION
    interruption_queue: str | None = None
    git_ref: str = "n/a"
    e2e_log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("private_cluster", mode="before")
    @classmethod
    def _presence(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        # Field default bypasses validation, so any value seen here was set
        return value is not None

    @field_validator("metrics_region", mode="before")
    @classmethod
    def _default_metrics_region(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return METRICS_DEFAULT_REGION
        return value

    @field_validator("e2e_log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value}")
        return value

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.e2e_log_level)  # type: ignore[no-any-return]


def default_region() -> str | None:
    """Region from AWS_REGION or AWS_DEFAULT_REGION, if either is set."""
    return RegionSettings().aws_region  # type: ignore[call-arg]


def load_settings() -> EnvironmentSettings:
    """
    Reads EnvironmentSettings from the environment.

    Raises MissingEnvironmentVariable naming the first absent required
    variable, or ConfigError for any other invalid value.
    """
    try:
        return EnvironmentSettings()  # type: ignore[call-arg]
    except ValidationError as e:
        for err in e.errors():
            if err["type"] == "missing":
                raise MissingEnvironmentVariable(str(err["loc"][0]).upper()) from e
        first = e.errors()[0]
        raise ConfigError(
            f"invalid value for {str(first['loc'][0]).upper()}: {first['msg']}"
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> EnvironmentSettings:
    """Cache settings so the environment is read once per run."""

    return load_settings()
