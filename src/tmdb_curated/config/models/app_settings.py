"""Logging and output configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tmdb_curated.shared.constants import Logging, TMDBConfig


class LoggingSettings(BaseModel):
    """Logging configuration.

    Controls the level of the ``tmdb_curated`` logger, the optional JSON
    log file and whether the console handler uses Rich.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="JSON-lines log file path")
    rich_console: bool = Field(default=True, description="Use Rich console output")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level


class OptionsSettings(BaseModel):
    """Defaults for the runtime API options."""

    date_format: str = Field(
        default=TMDBConfig.DEFAULT_DATE_FORMAT,
        description="strftime format used for DateResult.formatted",
    )


__all__ = [
    "LoggingSettings",
    "OptionsSettings",
]
