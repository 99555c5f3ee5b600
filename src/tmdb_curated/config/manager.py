"""Runtime TMDB configuration.

``TMDBConfigManager`` performs the one-time initialization against TMDB
(image base URLs, genre lookup tables, watch provider list) and then
serves the resulting read-only ``TMDBRuntimeConfig`` to the raw and
curated layers.

Usage:
    >>> from tmdb_curated import init_tmdb
    >>> init_tmdb("my-api-key")
    >>> from tmdb_curated.services.curated.movies import movie_search_by_title
    >>> movie_search_by_title("Alien").data.results[0].title
    'Alien'
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from typing import Any

from tmdb_curated.config.loader import get_config as get_settings
from tmdb_curated.config.models.settings import Settings
from tmdb_curated.shared.constants import (
    DEFAULT_MOVIE_GENRES,
    DEFAULT_TV_GENRES,
    MediaType,
    TMDBConfig,
    TMDBErrorMessages,
    TMDBOperationNames,
)
from tmdb_curated.shared.errors import (
    ApplicationError,
    ErrorCode,
    ErrorContext,
    SecurityError,
    TMDBApiError,
)
from tmdb_curated.shared.logging import log_operation_success, log_operation_warning
from tmdb_curated.shared.models import WatchProvider

logger = logging.getLogger(__name__)


def _default_api_params() -> dict[str, Any]:
    return {"include_adult": TMDBConfig.DEFAULT_INCLUDE_ADULT}


@dataclass(frozen=True)
class APIOptions:
    """Options applied to every call.

    Attributes:
        date_format: strftime format for ``DateResult.formatted``
        default_api_params: Query parameters merged into every raw call
        extra: Any other caller-supplied options, kept for consumers
    """

    date_format: str = TMDBConfig.DEFAULT_DATE_FORMAT
    default_api_params: dict[str, Any] = field(default_factory=_default_api_params)
    extra: dict[str, Any] = field(default_factory=dict)

    def merged(self, **options: Any) -> APIOptions:
        """Return a copy with ``options`` merged in.

        ``default_api_params`` is merged key by key; unknown options land
        in ``extra``.
        """
        date_format = options.pop("date_format", self.date_format)
        params = dict(self.default_api_params)
        params.update(options.pop("default_api_params", None) or {})
        extra = {**self.extra, **options}
        return APIOptions(
            date_format=date_format,
            default_api_params=params,
            extra=extra,
        )


@dataclass(frozen=True)
class TMDBRuntimeConfig:
    """Configuration resolved by ``TMDBConfigManager.initialize``."""

    api_key: str = field(repr=False)
    api_url: str = TMDBConfig.BASE_URL
    img_url: str = TMDBConfig.DEFAULT_IMG_URL
    secure_img_url: str = TMDBConfig.DEFAULT_SECURE_IMG_URL
    tv_genres: dict[int, str] = field(default_factory=lambda: dict(DEFAULT_TV_GENRES))
    movie_genres: dict[int, str] = field(default_factory=lambda: dict(DEFAULT_MOVIE_GENRES))
    watch_providers: list[WatchProvider] = field(default_factory=list)
    api_options: APIOptions = field(default_factory=APIOptions)
    timeout: float = TMDBConfig.DEFAULT_REQUEST_TIMEOUT
    language: str = TMDBConfig.DEFAULT_LANGUAGE

    def genre_names(self, genre_ids: list[int] | None, media_type: str) -> list[str]:
        """Map genre ids to names, skipping ids the lookup table lacks."""
        table = self.movie_genres if media_type == MediaType.MOVIE else self.tv_genres
        return [table[genre_id] for genre_id in genre_ids or [] if genre_id in table]

    def to_consts(self) -> dict[str, Any]:
        """Expose the resolved values as a plain dictionary."""
        return {
            "api_url": self.api_url,
            "api_key": self.api_key,
            "img_url": self.img_url,
            "secure_img_url": self.secure_img_url,
            "tv_genres": dict(self.tv_genres),
            "movie_genres": dict(self.movie_genres),
            "watch_providers": list(self.watch_providers),
            "api_options": self.api_options,
        }


class TMDBConfigManager:
    """Thread-safe holder of the runtime TMDB configuration.

    The configuration is written once by ``initialize`` under a lock and
    only read afterwards; ``update_api_options`` swaps in a new frozen
    copy.
    """

    _instance: TMDBConfigManager | None = None
    _instance_lock = threading.Lock()

    def __new__(cls) -> TMDBConfigManager:
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._config = None
                    instance._lock = threading.RLock()
                    cls._instance = instance
        return cls._instance

    _config: TMDBRuntimeConfig | None
    _lock: threading.RLock

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    def initialize(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        **options: Any,
    ) -> TMDBRuntimeConfig:
        """Fetch TMDB configuration, genres and watch providers.

        Failures of the individual calls are logged and replaced by the
        built-in defaults, so initialization only fails for a missing key.

        Args:
            api_key: TMDB v3 API key; defaults to the key from settings
            settings: Settings to use instead of the global settings
            **options: API options, see ``APIOptions.merged``

        Returns:
            The new runtime configuration

        Raises:
            SecurityError: If no API key is available
        """
        # Deferred to break the manager -> raw -> http -> manager cycle
        from tmdb_curated.services.raw import configuration as raw_configuration

        settings = settings or get_settings()
        tmdb_settings = settings.api.tmdb
        api_key = (api_key or tmdb_settings.api_key or "").strip()
        if not api_key:
            raise SecurityError(
                code=ErrorCode.MISSING_CONFIG,
                message=TMDBErrorMessages.MISSING_API_KEY,
                context=ErrorContext(operation=TMDBOperationNames.INITIALIZE),
            )

        connection = {
            "api_key": api_key,
            "base_url": tmdb_settings.base_url,
            "timeout": tmdb_settings.timeout,
        }
        start_time = time.perf_counter()

        with self._lock:
            img_url, secure_img_url = self._load_image_base_urls(raw_configuration, connection)
            tv_genres = self._load_genres(raw_configuration, connection, MediaType.TV)
            movie_genres = self._load_genres(raw_configuration, connection, MediaType.MOVIE)
            watch_providers = self._load_watch_providers(
                raw_configuration,
                connection,
                region=tmdb_settings.watch_region,
                secure_img_url=secure_img_url,
            )

            api_options = APIOptions(
                date_format=settings.options.date_format,
                default_api_params={"include_adult": tmdb_settings.include_adult},
            ).merged(**options)

            self._config = TMDBRuntimeConfig(
                api_key=api_key,
                api_url=tmdb_settings.base_url,
                img_url=img_url,
                secure_img_url=secure_img_url,
                tv_genres=tv_genres,
                movie_genres=movie_genres,
                watch_providers=watch_providers,
                api_options=api_options,
                timeout=tmdb_settings.timeout,
                language=tmdb_settings.language,
            )

        log_operation_success(
            logger,
            TMDBOperationNames.INITIALIZE,
            (time.perf_counter() - start_time) * 1000,
            result_info={
                "tv_genres": len(tv_genres),
                "movie_genres": len(movie_genres),
                "watch_providers": len(watch_providers),
            },
        )
        return self._config

    def get_config(self) -> TMDBRuntimeConfig:
        """Return the runtime configuration.

        Raises:
            ApplicationError: If ``initialize`` has not been called
        """
        config = self._config
        if config is None:
            raise ApplicationError(
                code=ErrorCode.CONFIG_MISSING,
                message=TMDBErrorMessages.NOT_INITIALIZED,
                context=ErrorContext(operation="get_config"),
            )
        return config

    def update_api_options(self, **options: Any) -> APIOptions:
        """Merge ``options`` into the current API options."""
        with self._lock:
            config = self.get_config()
            api_options = config.api_options.merged(**options)
            self._config = replace(config, api_options=api_options)
        return api_options

    def reset(self) -> None:
        """Drop the runtime configuration."""
        with self._lock:
            self._config = None

    @staticmethod
    def _load_image_base_urls(raw_configuration: Any, connection: dict[str, Any]) -> tuple[str, str]:
        try:
            images = raw_configuration.get_tmdb_configuration(**connection).data.get("images") or {}
        except TMDBApiError as e:
            log_operation_warning(logger, e, "default image base URLs")
            images = {}
        img_url = images.get("base_url") or TMDBConfig.DEFAULT_IMG_URL
        secure_img_url = images.get("secure_base_url") or TMDBConfig.DEFAULT_SECURE_IMG_URL
        return img_url, secure_img_url

    @staticmethod
    def _load_genres(
        raw_configuration: Any,
        connection: dict[str, Any],
        media_type: str,
    ) -> dict[int, str]:
        defaults = DEFAULT_MOVIE_GENRES if media_type == MediaType.MOVIE else DEFAULT_TV_GENRES
        try:
            response = raw_configuration.get_genres(media_type=media_type, **connection)
        except TMDBApiError as e:
            log_operation_warning(logger, e, f"default {media_type} genres")
            return dict(defaults)

        genres = raw_configuration.convert_genres_to_map(response.data.get("genres"))
        return genres or dict(defaults)

    @staticmethod
    def _load_watch_providers(
        raw_configuration: Any,
        connection: dict[str, Any],
        *,
        region: str,
        secure_img_url: str,
    ) -> list[WatchProvider]:
        try:
            response = raw_configuration.get_watch_provider_list(
                media_type=MediaType.TV,
                region=region,
                **connection,
            )
        except TMDBApiError as e:
            log_operation_warning(logger, e, "an empty watch provider list")
            return []

        return raw_configuration.sort_watch_providers(
            response.data.get("results"),
            region=region,
            image_base_url=secure_img_url,
        )


tmdb_config = TMDBConfigManager()


def init_tmdb(api_key: str | None = None, **options: Any) -> TMDBRuntimeConfig:
    """Initialize the shared runtime configuration."""
    return tmdb_config.initialize(api_key, **options)


def get_tmdb_consts() -> dict[str, Any]:
    """Return the resolved runtime values as a dictionary."""
    return tmdb_config.get_config().to_consts()


def update_api_options(**options: Any) -> APIOptions:
    """Merge options into the shared runtime configuration."""
    return tmdb_config.update_api_options(**options)


__all__ = [
    "APIOptions",
    "TMDBConfigManager",
    "TMDBRuntimeConfig",
    "get_tmdb_consts",
    "init_tmdb",
    "tmdb_config",
    "update_api_options",
]
