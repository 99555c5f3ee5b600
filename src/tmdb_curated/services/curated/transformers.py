"""Payload transformers for the curated layer.

Pure functions converting TMDB JSON fragments into curated dataclasses.
They read genre tables and image base URLs from the runtime
configuration, so it must be initialized before they run.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from tmdb_curated.config.manager import tmdb_config
from tmdb_curated.helpers import format_image_url, image_url, parse_to_date
from tmdb_curated.shared.constants import ExternalLinks, ImageSizes, MediaType
from tmdb_curated.shared.models import (
    CastMember,
    CountryWatchProviders,
    Credits,
    CrewMember,
    MediaCredit,
    MediaCredits,
    PagedResults,
    Video,
    WatchProvider,
    WatchProviders,
)

T = TypeVar("T")

# TMDB offer type -> CountryWatchProviders attribute
WATCH_OFFER_TYPES: dict[str, str] = {
    "flatrate": "stream",
    "buy": "buy",
    "rent": "rent",
}

ENGLISH = "en"


def to_paged(data: dict[str, Any], transform: Callable[[dict[str, Any]], T]) -> PagedResults[T]:
    """Flatten a TMDB pagination envelope, transforming each result."""
    return PagedResults(
        page=data.get("page") or 1,
        total_pages=data.get("total_pages") or 0,
        total_results=data.get("total_results") or 0,
        results=[transform(item) for item in data.get("results") or []],
    )


def genre_names(genre_ids: list[int] | None, media_type: str) -> list[str]:
    """Names for ``genre_ids`` from the runtime genre lookup tables."""
    return tmdb_config.get_config().genre_names(genre_ids, media_type)


def genre_names_from_objects(genres: list[dict[str, Any]] | None) -> list[str]:
    """Names from a details payload's ``[{"id": .., "name": ..}]`` list."""
    return [genre.get("name", "") for genre in genres or []]


def english_image_urls(data: dict[str, Any], image_type: str) -> list[str]:
    """URLs (size 'm') of the English images of one type from an images payload."""
    file_paths = [
        image.get("file_path")
        for image in data.get(image_type) or []
        if image.get("iso_639_1") == ENGLISH
    ]
    if not file_paths:
        return []
    return format_image_url(file_paths, ImageSizes.MEDIUM)


def to_video(data: dict[str, Any]) -> Video:
    """Curate one entry of a videos payload."""
    key = data.get("key", "")
    site = data.get("site", "")
    video_url = ""
    thumbnail_url = ""
    if site == "YouTube":
        video_url = ExternalLinks.YOUTUBE_VIDEO.format(key=key)
        thumbnail_url = ExternalLinks.YOUTUBE_THUMBNAIL.format(key=key)
    elif site == "Vimeo":
        video_url = ExternalLinks.VIMEO_VIDEO.format(key=key)

    return Video(
        id=data.get("id", ""),
        key=key,
        name=data.get("name", ""),
        site=site,
        size=data.get("size") or 0,
        type=data.get("type", ""),
        language=data.get("iso_639_1", ""),
        country=data.get("iso_3166_1", ""),
        video_url=video_url,
        video_thumbnail_url=thumbnail_url,
    )


def to_videos(data: dict[str, Any] | None) -> list[Video]:
    return [to_video(item) for item in (data or {}).get("results") or []]


def to_credits(data: dict[str, Any]) -> Credits:
    """Curate a /movie/{id}/credits or /tv/{id}/credits payload."""
    cast = [
        CastMember(
            person_id=member["id"],
            name=member.get("name", ""),
            character_name=member.get("character", ""),
            credit_id=member.get("credit_id", ""),
            gender=member.get("gender") or 0,
            profile_url=image_url(member.get("profile_path")),
            order=member.get("order") or 0,
        )
        for member in data.get("cast") or []
    ]
    crew = [
        CrewMember(
            person_id=member["id"],
            name=member.get("name", ""),
            credit_id=member.get("credit_id", ""),
            job=member.get("job", ""),
            department=member.get("department", ""),
            gender=member.get("gender") or 0,
            profile_url=image_url(member.get("profile_path")),
        )
        for member in data.get("crew") or []
    ]
    return Credits(cast=cast, crew=crew)


def to_media_credit(
    data: dict[str, Any],
    media_type: str | None = None,
    *,
    is_cast: bool,
) -> MediaCredit:
    """Curate one credit of a person credits payload.

    ``media_type`` comes from the payload for combined credits.
    """
    media_type = media_type or data.get("media_type") or MediaType.MOVIE
    is_movie = media_type == MediaType.MOVIE
    return MediaCredit(
        id=data["id"],
        media_type=media_type,
        title=data.get("title" if is_movie else "name", ""),
        overview=data.get("overview", ""),
        release_date=parse_to_date(data.get("release_date" if is_movie else "first_air_date")),
        credit_id=data.get("credit_id", ""),
        genres=genre_names(data.get("genre_ids"), media_type),
        poster_url=image_url(data.get("poster_path")),
        backdrop_url=image_url(data.get("backdrop_path")),
        original_language=data.get("original_language", ""),
        character_name=data.get("character", "") if is_cast else None,
        job=None if is_cast else data.get("job", ""),
        department=None if is_cast else data.get("department", ""),
        episode_count=None if is_movie else data.get("episode_count"),
    )


def to_media_credits(data: dict[str, Any], media_type: str | None = None) -> MediaCredits:
    """Curate a person's movie, TV or combined credits payload."""
    return MediaCredits(
        cast=[to_media_credit(item, media_type, is_cast=True) for item in data.get("cast") or []],
        crew=[to_media_credit(item, media_type, is_cast=False) for item in data.get("crew") or []],
    )


def to_watch_provider(data: dict[str, Any]) -> WatchProvider:
    return WatchProvider(
        provider_id=data["provider_id"],
        provider=data.get("provider_name", ""),
        display_priority=data.get("display_priority") or 0,
        logo_url=image_url(data.get("logo_path"), ImageSizes.SMALL),
    )


def to_watch_providers(
    media_id: int,
    data: dict[str, Any],
    country_codes: tuple[str, ...] | list[str],
) -> WatchProviders:
    """Curate a watch/providers payload for the requested countries.

    Countries TMDB has no data for are left out of ``results``.
    """
    by_country = data.get("results") or {}
    results: dict[str, CountryWatchProviders] = {}
    for country_code in country_codes:
        country = by_country.get(country_code.upper())
        if not country:
            continue
        offers = {
            attribute: [to_watch_provider(item) for item in country.get(offer_type) or []]
            for offer_type, attribute in WATCH_OFFER_TYPES.items()
        }
        results[country_code.upper()] = CountryWatchProviders(
            just_watch_link=country.get("link", ""),
            **offers,
        )
    return WatchProviders(media_id=media_id, results=results)


__all__ = [
    "english_image_urls",
    "genre_names",
    "genre_names_from_objects",
    "to_credits",
    "to_media_credit",
    "to_media_credits",
    "to_paged",
    "to_video",
    "to_videos",
    "to_watch_provider",
    "to_watch_providers",
]
