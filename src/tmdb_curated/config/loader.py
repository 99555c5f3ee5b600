"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML
- Thread-safe singleton pattern for the Settings instance
"""

from __future__ import annotations

import importlib
import logging
import os
import threading
from pathlib import Path

import toml
from pydantic import ValidationError

from tmdb_curated.config.models.settings import Settings
from tmdb_curated.shared.errors import ApplicationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)

API_KEY_ENV = "TMDB_API_KEY"

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("config/config.toml"),
    Path("config.toml"),
)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking to load the settings once.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it if necessary."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()

        return self._instance

    def reload_config(self, config_path: str | Path | None = None) -> Settings:
        """Reload the global settings instance from .env, TOML and environment."""
        with self._lock:
            self._instance = load_settings(config_path)

        return self._instance


def _load_env_file(env_file: Path = Path(".env")) -> None:
    """Load environment variables from a .env file when one exists.

    Variables already present in the environment win over the file.
    """
    if not env_file.exists():
        logger.debug("No .env file at %s", env_file)
        return

    dotenv = importlib.import_module("dotenv")
    dotenv.load_dotenv(env_file, override=False)


def _apply_api_key_env(settings: Settings) -> Settings:
    """Fill the TMDB API key from ``TMDB_API_KEY`` when settings lack one."""
    if settings.api.tmdb.api_key:
        return settings

    api_key = os.getenv(API_KEY_ENV, "").strip()
    if api_key:
        settings.api.tmdb.api_key = api_key
    return settings


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional TOML file. When None, ``config/config.toml``
            and ``config.toml`` are tried before falling back to the
            environment alone.

    Returns:
        Settings instance loaded from the first available source

    Raises:
        ApplicationError: If the file is missing or fails validation
    """
    _load_env_file()

    try:
        if config_path:
            return _apply_api_key_env(Settings.from_toml_file(config_path))

        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return _apply_api_key_env(Settings.from_toml_file(default_path))

        return _apply_api_key_env(Settings())
    except FileNotFoundError as e:
        raise ApplicationError(
            code=ErrorCode.CONFIG_MISSING,
            message=str(e),
            context=ErrorContext(
                operation="load_settings",
                additional_data={"config_path": str(config_path)},
            ),
            original_error=e,
        ) from e
    except (ValidationError, toml.TomlDecodeError) as e:
        raise ApplicationError(
            code=ErrorCode.INVALID_CONFIG,
            message=f"Invalid configuration: {e}",
            context=ErrorContext(operation="load_settings"),
            original_error=e,
        ) from e


_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the global settings instance (thread-safe)."""
    return _loader.get_config()


def reload_config(config_path: str | Path | None = None) -> Settings:
    """Reload the global settings instance."""
    return _loader.reload_config(config_path)


__all__ = [
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
]
