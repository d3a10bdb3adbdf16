"""Application configuration management using Pydantic Settings.

`Settings` loads values from environment variables and an optional `.env`
file. `get_settings` returns a cached singleton so the CLI and the trace
writer see the same configuration.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict


class Settings(BaseSettings):
    """Tunable parameters for trace generation and logging."""

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    TRACE_FILE_SUFFIX: str = Field(
        default=".run-timing.trace.json",
        description="Suffix appended to the results path to name the CLI output file",
    )
    DEFAULT_TRACE_FILENAME: str = Field(
        default="run-timing.trace.json",
        description="File name (relative to cwd) used when no trace path is given",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name and reject names `logging` does not know."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("TRACE_FILE_SUFFIX", "DEFAULT_TRACE_FILENAME")
    @classmethod
    def require_non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
