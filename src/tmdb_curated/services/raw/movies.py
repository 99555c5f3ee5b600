"""Raw movie endpoints.

One function per TMDB movie endpoint. Each returns the decoded JSON and
the URL that was called, or raises ``TMDBApiError``.
"""

from __future__ import annotations

from tmdb_curated.services.discover import CriteriaInput, coerce_criteria
from tmdb_curated.services.http import api_tmdb
from tmdb_curated.shared.constants import MediaType, TMDBConfig, TMDBEndpoints
from tmdb_curated.shared.models import RawResponse


def raw_movie_search_by_title(query: str, page: int = TMDBConfig.DEFAULT_PAGE) -> RawResponse:
    """GET /search/movie."""
    return api_tmdb(TMDBEndpoints.SEARCH_MOVIE, {"query": query, "page": page})


def raw_movie_get_details(movie_id: int, append_to_response: str | None = None) -> RawResponse:
    """GET /movie/{movie_id}.

    Args:
        movie_id: TMDB movie id
        append_to_response: Sub-requests to embed, e.g. "videos"
    """
    return api_tmdb(
        TMDBEndpoints.MOVIE.format(movie_id=movie_id),
        {"append_to_response": append_to_response},
    )


def raw_movie_get_videos(movie_id: int) -> RawResponse:
    """GET /movie/{movie_id}/videos."""
    return api_tmdb(TMDBEndpoints.MOVIE_VIDEOS.format(movie_id=movie_id))


def raw_movie_get_recommendations(movie_id: int, page: int = TMDBConfig.DEFAULT_PAGE) -> RawResponse:
    """GET /movie/{movie_id}/recommendations."""
    return api_tmdb(
        TMDBEndpoints.MOVIE_RECOMMENDATIONS.format(movie_id=movie_id),
        {"page": page},
    )


def raw_movie_get_images(movie_id: int) -> RawResponse:
    """GET /movie/{movie_id}/images (posters, backdrops, logos)."""
    return api_tmdb(TMDBEndpoints.MOVIE_IMAGES.format(movie_id=movie_id))


def raw_movie_get_person_credits(person_id: int) -> RawResponse:
    """GET /person/{person_id}/movie_credits."""
    return api_tmdb(TMDBEndpoints.PERSON_MOVIE_CREDITS.format(person_id=person_id))


def raw_movie_get_credits(movie_id: int) -> RawResponse:
    """GET /movie/{movie_id}/credits."""
    return api_tmdb(TMDBEndpoints.MOVIE_CREDITS.format(movie_id=movie_id))


def raw_movie_get_upcoming(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> RawResponse:
    """GET /movie/upcoming."""
    return api_tmdb(TMDBEndpoints.MOVIE_UPCOMING, {"page": page, "language": language})


def raw_movie_get_now_playing(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> RawResponse:
    """GET /movie/now_playing."""
    return api_tmdb(TMDBEndpoints.MOVIE_NOW_PLAYING, {"page": page, "language": language})


def raw_movie_get_popular(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> RawResponse:
    """GET /movie/popular."""
    return api_tmdb(TMDBEndpoints.MOVIE_POPULAR, {"page": page, "language": language})


def raw_movie_watch_providers(movie_id: int) -> RawResponse:
    """GET /movie/{movie_id}/watch/providers (JustWatch data per country)."""
    return api_tmdb(TMDBEndpoints.MOVIE_WATCH_PROVIDERS.format(movie_id=movie_id))


def raw_movie_discover(criteria: CriteriaInput = None, page: int = TMDBConfig.DEFAULT_PAGE) -> RawResponse:
    """GET /discover/movie with the given criteria.

    Raises:
        DomainError: If ``criteria`` is a dict that fails validation
    """
    params = coerce_criteria(criteria).to_query_params(MediaType.MOVIE)
    params["page"] = page
    return api_tmdb(TMDBEndpoints.DISCOVER_MOVIE, params)


__all__ = [
    "raw_movie_discover",
    "raw_movie_get_credits",
    "raw_movie_get_details",
    "raw_movie_get_images",
    "raw_movie_get_now_playing",
    "raw_movie_get_person_credits",
    "raw_movie_get_popular",
    "raw_movie_get_recommendations",
    "raw_movie_get_upcoming",
    "raw_movie_get_videos",
    "raw_movie_search_by_title",
    "raw_movie_watch_providers",
]
