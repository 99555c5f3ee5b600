"""tmdb_curated Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tmdb_curated.config.models.api_settings import APISettings
from tmdb_curated.config.models.app_settings import LoggingSettings, OptionsSettings


class Settings(BaseSettings):
    """Settings facade providing unified configuration access.

    Environment variables use the ``TMDB_CURATED_`` prefix with ``__`` as
    the nesting delimiter, e.g. ``TMDB_CURATED_API__TMDB__TIMEOUT=10``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_CURATED_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    options: OptionsSettings = Field(default_factory=OptionsSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)
