"""Raw calls used while initializing the runtime configuration.

These run before a runtime configuration exists, so they take the API
key and base URL explicitly instead of reading them from
``tmdb_config``.
"""

from __future__ import annotations

from typing import Any

from tmdb_curated.helpers import build_image_url
from tmdb_curated.services.http import call_tmdb
from tmdb_curated.shared.constants import (
    DEFAULT_MOVIE_GENRES,
    DEFAULT_TV_GENRES,
    ImageSizes,
    MediaType,
    TMDBConfig,
    TMDBEndpoints,
)
from tmdb_curated.shared.models import RawResponse, WatchProvider

# Lowest priority for providers without a ranking in the requested region
_UNRANKED = 10_000


def _get(
    path: str,
    *,
    api_key: str,
    base_url: str,
    timeout: float,
    params: dict[str, Any] | None = None,
) -> RawResponse:
    query = dict(params or {})
    query["api_key"] = api_key
    return call_tmdb(f"{base_url.rstrip('/')}{path}", query, timeout=timeout)


def get_tmdb_configuration(
    api_key: str,
    *,
    base_url: str = TMDBConfig.BASE_URL,
    timeout: float = TMDBConfig.DEFAULT_REQUEST_TIMEOUT,
) -> RawResponse:
    """GET /configuration (image base URLs and sizes)."""
    return _get(
        TMDBEndpoints.CONFIGURATION,
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
    )


def get_genres(
    api_key: str,
    *,
    media_type: str = MediaType.MOVIE,
    base_url: str = TMDBConfig.BASE_URL,
    timeout: float = TMDBConfig.DEFAULT_REQUEST_TIMEOUT,
) -> RawResponse:
    """GET /genre/{media_type}/list."""
    return _get(
        TMDBEndpoints.GENRE_LIST.format(media_type=media_type),
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
    )


def get_tv_genres(api_key: str, **kwargs: Any) -> RawResponse:
    return get_genres(api_key, media_type=MediaType.TV, **kwargs)


def get_movie_genres(api_key: str, **kwargs: Any) -> RawResponse:
    return get_genres(api_key, media_type=MediaType.MOVIE, **kwargs)


def get_watch_provider_list(
    api_key: str,
    *,
    media_type: str = MediaType.TV,
    region: str = TMDBConfig.DEFAULT_WATCH_REGION,
    base_url: str = TMDBConfig.BASE_URL,
    timeout: float = TMDBConfig.DEFAULT_REQUEST_TIMEOUT,
) -> RawResponse:
    """GET /watch/providers/{media_type} for one region."""
    return _get(
        TMDBEndpoints.WATCH_PROVIDER_LIST.format(media_type=media_type),
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        params={"watch_region": region},
    )


def convert_genres_to_map(genres: list[dict[str, Any]] | None) -> dict[int, str]:
    """Turn TMDB's ``[{"id": 28, "name": "Action"}, ...]`` into ``{28: "Action"}``."""
    return {
        int(genre["id"]): genre.get("name", "")
        for genre in genres or []
        if genre.get("id") is not None
    }


def sort_watch_providers(
    results: list[dict[str, Any]] | None,
    *,
    region: str = TMDBConfig.DEFAULT_WATCH_REGION,
    image_base_url: str = TMDBConfig.DEFAULT_SECURE_IMG_URL,
) -> list[WatchProvider]:
    """Order providers by their display priority in ``region``.

    Each provider reports its rank in ``region``, or its global display
    priority when TMDB does not rank it there. Unranked providers sort
    last, ordered by that global priority.
    """

    def _regional(item: dict[str, Any]) -> int | None:
        return (item.get("display_priorities") or {}).get(region)

    def _reported(item: dict[str, Any]) -> int:
        regional = _regional(item)
        return (item.get("display_priority") or 0) if regional is None else regional

    def _priority(item: dict[str, Any]) -> tuple[int, int]:
        regional = _regional(item)
        return (
            _UNRANKED if regional is None else regional,
            item.get("display_priority") or 0,
        )

    ordered = sorted(results or [], key=_priority)
    return [
        WatchProvider(
            provider_id=item["provider_id"],
            provider=item.get("provider_name", ""),
            display_priority=_reported(item),
            logo_url=build_image_url(image_base_url, ImageSizes.SMALL, item.get("logo_path")),
        )
        for item in ordered
    ]


__all__ = [
    "DEFAULT_MOVIE_GENRES",
    "DEFAULT_TV_GENRES",
    "convert_genres_to_map",
    "get_genres",
    "get_movie_genres",
    "get_tmdb_configuration",
    "get_tv_genres",
    "get_watch_provider_list",
    "sort_watch_providers",
]
