"""Application settings loaded from the environment.

Values come from ``UXKIT_*`` environment variables or a project-local
``.env`` file, validated at the edge by pydantic-settings so the rest
of the code receives typed values only.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uxkit.core.help_system import DEFAULT_TITLE


class AppSettings(BaseSettings):
    """Central configuration for the CLI entry point."""

    model_config = SettingsConfigDict(
        env_prefix="UXKIT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    prog_name: str = Field(
        default="uxkit",
        min_length=1,
        description="Program name shown in usage and help output.",
    )
    description: str = Field(
        default=DEFAULT_TITLE,
        description="One-line summary shown at the top of parser help.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Threshold for the uxkit logger (DEBUG, INFO, WARNING, ...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file receiving log records in addition to stderr.",
    )
    help_column_width: int = Field(
        default=20,
        ge=8,
        le=60,
        description="Column the command names are padded to in general help.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


def get_settings() -> AppSettings:
    """Build settings from the current environment."""
    return AppSettings()
