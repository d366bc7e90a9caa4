"""commitpick Configuration Module.

All settings support environment variable overrides with COMMITPICK_ prefix.
For example, COMMITPICK_SEED=42 makes random selection deterministic.

Usage:
    from commitpick.config import settings

    print(settings.repo_path)
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("console", "json")


class CommitPickSettings(BaseSettings):
    """Configuration for commitpick."""

    model_config = SettingsConfigDict(env_prefix="COMMITPICK_")

    repo_path: str = Field(
        default=".",
        description="Repository used when none is given on the command line",
    )
    search_parent_directories: bool = Field(
        default=True,
        description="Accept any path inside a working tree as the repository",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for random commit selection (unseeded when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="console",
        description='Log output format ("console" or "json")',
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {', '.join(LOG_FORMATS)}, got {value}"
            )
        return value


# Module-level singleton instance
settings = CommitPickSettings()
