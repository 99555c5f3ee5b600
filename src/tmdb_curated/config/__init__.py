"""Configuration: file/environment settings and the runtime TMDB configuration."""

from tmdb_curated.config.loader import get_config, load_settings, reload_config
from tmdb_curated.config.manager import (
    APIOptions,
    TMDBConfigManager,
    TMDBRuntimeConfig,
    get_tmdb_consts,
    init_tmdb,
    tmdb_config,
    update_api_options,
)
from tmdb_curated.config.models import Settings, TMDBSettings

__all__ = [
    "APIOptions",
    "Settings",
    "TMDBConfigManager",
    "TMDBRuntimeConfig",
    "TMDBSettings",
    "get_config",
    "get_tmdb_consts",
    "init_tmdb",
    "load_settings",
    "reload_config",
    "tmdb_config",
    "update_api_options",
]
