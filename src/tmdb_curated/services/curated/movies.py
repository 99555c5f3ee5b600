"""Curated movie calls.

Every function wraps one raw movie call and returns a ``CuratedResponse``
holding the reshaped payload and the URL that was called.
"""

from __future__ import annotations

import logging
from typing import Any

from tmdb_curated.helpers import build_imdb_url, image_url, parse_to_date
from tmdb_curated.services.curated.transformers import (
    english_image_urls,
    genre_names,
    genre_names_from_objects,
    to_credits,
    to_media_credits,
    to_paged,
    to_videos,
    to_watch_providers,
)
from tmdb_curated.services.discover import CriteriaInput
from tmdb_curated.services.raw.movies import (
    raw_movie_discover,
    raw_movie_get_credits,
    raw_movie_get_details,
    raw_movie_get_images,
    raw_movie_get_now_playing,
    raw_movie_get_person_credits,
    raw_movie_get_popular,
    raw_movie_get_recommendations,
    raw_movie_get_upcoming,
    raw_movie_get_videos,
    raw_movie_search_by_title,
    raw_movie_watch_providers,
)
from tmdb_curated.shared.constants import MediaType, TMDBConfig
from tmdb_curated.shared.models import (
    Credits,
    CuratedResponse,
    MediaCredits,
    MovieDetails,
    MovieSummary,
    PagedResults,
    Video,
    WatchProviders,
)

logger = logging.getLogger(__name__)

MovieList = CuratedResponse[PagedResults[MovieSummary]]


def to_movie_summary(data: dict[str, Any]) -> MovieSummary:
    """Curate one movie entry of a search, list or discover payload."""
    return MovieSummary(
        id=data["id"],
        title=data.get("title", ""),
        overview=data.get("overview") or "",
        popularity=data.get("popularity") or 0.0,
        original_language=data.get("original_language") or "",
        release_date=parse_to_date(data.get("release_date")),
        poster_url=image_url(data.get("poster_path")),
        backdrop_url=image_url(data.get("backdrop_path")),
        genres=genre_names(data.get("genre_ids"), MediaType.MOVIE),
    )


def _movie_list(resp) -> MovieList:
    return CuratedResponse(data=to_paged(resp.data, to_movie_summary), api_call=resp.api_call)


def movie_get_images(movie_id: int, image_type: str = "posters") -> CuratedResponse[list[str]]:
    """English image URLs of a movie.

    Args:
        movie_id: TMDB movie id
        image_type: "posters", "backdrops" or "logos"

    Returns:
        URLs at size 'm'; empty when no English image of that type exists
    """
    resp = raw_movie_get_images(movie_id)
    return CuratedResponse(data=english_image_urls(resp.data, image_type), api_call=resp.api_call)


def movie_search_by_title(query: str, page: int = TMDBConfig.DEFAULT_PAGE) -> MovieList:
    """Search movies by title."""
    return _movie_list(raw_movie_search_by_title(query, page))


def movie_get_details(movie_id: int, *, with_videos: bool = False) -> CuratedResponse[MovieDetails]:
    """Full details of a movie.

    Args:
        movie_id: TMDB movie id
        with_videos: Embed the movie's videos in the same request

    Returns:
        ``MovieDetails``; ``videos`` stays empty unless ``with_videos``

    Raises:
        TMDBApiError: If the request fails (MEDIA_NOT_FOUND for unknown ids)
    """
    resp = raw_movie_get_details(movie_id, append_to_response="videos" if with_videos else None)
    data = resp.data
    imdb_id = data.get("imdb_id") or ""
    details = MovieDetails(
        id=data["id"],
        title=data.get("title", ""),
        tagline=data.get("tagline") or "",
        overview=data.get("overview") or "",
        status=data.get("status") or "",
        runtime=data.get("runtime") or 0,
        budget=data.get("budget") or 0,
        revenue=data.get("revenue") or 0,
        release_date=parse_to_date(data.get("release_date")),
        poster_url=image_url(data.get("poster_path")),
        backdrop_url=image_url(data.get("backdrop_path")),
        imdb_id=imdb_id,
        imdb_url=build_imdb_url(imdb_id),
        genres=genre_names_from_objects(data.get("genres")),
        videos=to_videos(data.get("videos")) if with_videos else [],
    )
    return CuratedResponse(data=details, api_call=resp.api_call)


def movie_get_videos(movie_id: int) -> CuratedResponse[list[Video]]:
    """Trailers, teasers and clips of a movie."""
    resp = raw_movie_get_videos(movie_id)
    return CuratedResponse(data=to_videos(resp.data), api_call=resp.api_call)


def movie_get_recommendations(movie_id: int, page: int = TMDBConfig.DEFAULT_PAGE) -> MovieList:
    return _movie_list(raw_movie_get_recommendations(movie_id, page))


def movie_get_person_credits(person_id: int) -> CuratedResponse[MediaCredits]:
    """Movie cast and crew credits of a person."""
    resp = raw_movie_get_person_credits(person_id)
    return CuratedResponse(data=to_media_credits(resp.data, MediaType.MOVIE), api_call=resp.api_call)


def movie_get_credits(movie_id: int) -> CuratedResponse[Credits]:
    """Cast and crew of a movie."""
    resp = raw_movie_get_credits(movie_id)
    return CuratedResponse(data=to_credits(resp.data), api_call=resp.api_call)


def movie_get_popular(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> MovieList:
    return _movie_list(raw_movie_get_popular(page, language))


def movie_get_now_playing(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> MovieList:
    return _movie_list(raw_movie_get_now_playing(page, language))


def movie_get_upcoming(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> MovieList:
    return _movie_list(raw_movie_get_upcoming(page, language))


def movie_get_watch_providers(
    movie_id: int,
    country_codes: tuple[str, ...] | list[str] = (TMDBConfig.DEFAULT_WATCH_REGION,),
) -> CuratedResponse[WatchProviders]:
    """Where a movie can be streamed, bought or rented.

    Args:
        movie_id: TMDB movie id
        country_codes: ISO 3166-1 codes to report; countries without
            provider data are omitted from the result

    Returns:
        ``WatchProviders`` keyed by upper-cased country code
    """
    resp = raw_movie_watch_providers(movie_id)
    providers = to_watch_providers(movie_id, resp.data, country_codes)
    missing = [code for code in country_codes if code.upper() not in providers.results]
    if missing:
        logger.debug("No watch providers for movie %s in %s", movie_id, missing)
    return CuratedResponse(data=providers, api_call=resp.api_call)


def movie_discover(criteria: CriteriaInput = None, page: int = TMDBConfig.DEFAULT_PAGE) -> MovieList:
    """Discover movies matching ``criteria``.

    Args:
        criteria: ``DiscoverCriteria`` or an equivalent dict; None means
            TMDB's default discover ordering
        page: Result page to return

    Raises:
        DomainError: If ``criteria`` fails validation
        TMDBApiError: If the request fails
    """
    return _movie_list(raw_movie_discover(criteria, page))


__all__ = [
    "movie_discover",
    "movie_get_credits",
    "movie_get_details",
    "movie_get_images",
    "movie_get_now_playing",
    "movie_get_person_credits",
    "movie_get_popular",
    "movie_get_recommendations",
    "movie_get_upcoming",
    "movie_get_videos",
    "movie_get_watch_providers",
    "movie_search_by_title",
    "to_movie_summary",
]
