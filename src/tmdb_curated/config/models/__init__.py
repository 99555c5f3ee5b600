"""Configuration models."""

from tmdb_curated.config.models.api_settings import APISettings, TMDBSettings
from tmdb_curated.config.models.app_settings import LoggingSettings, OptionsSettings
from tmdb_curated.config.models.settings import Settings

__all__ = [
    "APISettings",
    "LoggingSettings",
    "OptionsSettings",
    "Settings",
    "TMDBSettings",
]
