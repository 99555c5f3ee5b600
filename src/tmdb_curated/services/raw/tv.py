"""Raw TV endpoints."""

from __future__ import annotations

from urllib.parse import quote

from tmdb_curated.services.discover import CriteriaInput, coerce_criteria
from tmdb_curated.services.http import api_tmdb
from tmdb_curated.shared.constants import MediaType, TMDBConfig, TMDBEndpoints
from tmdb_curated.shared.models import RawResponse


def raw_tv_search_by_title(query: str, page: int = TMDBConfig.DEFAULT_PAGE) -> RawResponse:
    """GET /search/tv."""
    return api_tmdb(TMDBEndpoints.SEARCH_TV, {"query": query, "page": page})


def raw_tv_get_show_details(show_id: int, append_to_response: str | None = None) -> RawResponse:
    """GET /tv/{show_id}, optionally embedding e.g. "external_ids"."""
    return api_tmdb(
        TMDBEndpoints.TV.format(show_id=show_id),
        {"append_to_response": append_to_response},
    )


def raw_tv_get_episodes(show_id: int, season_num: int = 1) -> RawResponse:
    """GET /tv/{show_id}/season/{season_num} (season with its episodes)."""
    return api_tmdb(TMDBEndpoints.TV_SEASON.format(show_id=show_id, season_num=season_num))


def raw_tv_get_show_images(show_id: int) -> RawResponse:
    """GET /tv/{show_id}/images."""
    return api_tmdb(TMDBEndpoints.TV_IMAGES.format(show_id=show_id))


def raw_tv_get_external_ids(show_id: int) -> RawResponse:
    """GET /tv/{show_id}/external_ids (IMDb, TVDB, social ids)."""
    return api_tmdb(TMDBEndpoints.TV_EXTERNAL_IDS.format(show_id=show_id))


def raw_tv_get_show_credits(show_id: int) -> RawResponse:
    """GET /tv/{show_id}/credits."""
    return api_tmdb(TMDBEndpoints.TV_CREDITS.format(show_id=show_id))


def raw_tv_get_credit_details(credit_id: str) -> RawResponse:
    """GET /credit/{credit_id}."""
    return api_tmdb(TMDBEndpoints.CREDIT.format(credit_id=quote(str(credit_id), safe="")))


def raw_tv_get_person_credits(person_id: int) -> RawResponse:
    """GET /person/{person_id}/tv_credits."""
    return api_tmdb(TMDBEndpoints.PERSON_TV_CREDITS.format(person_id=person_id))


def raw_tv_get_popular(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> RawResponse:
    """GET /tv/popular."""
    return api_tmdb(TMDBEndpoints.TV_POPULAR, {"page": page, "language": language})


def raw_tv_watch_providers(show_id: int) -> RawResponse:
    """GET /tv/{show_id}/watch/providers."""
    return api_tmdb(TMDBEndpoints.TV_WATCH_PROVIDERS.format(show_id=show_id))


def raw_tv_discover(criteria: CriteriaInput = None, page: int = TMDBConfig.DEFAULT_PAGE) -> RawResponse:
    """GET /discover/tv with the given criteria; cast and crew filters are ignored."""
    params = coerce_criteria(criteria).to_query_params(MediaType.TV)
    params["page"] = page
    return api_tmdb(TMDBEndpoints.DISCOVER_TV, params)


__all__ = [
    "raw_tv_discover",
    "raw_tv_get_credit_details",
    "raw_tv_get_episodes",
    "raw_tv_get_external_ids",
    "raw_tv_get_person_credits",
    "raw_tv_get_popular",
    "raw_tv_get_show_credits",
    "raw_tv_get_show_details",
    "raw_tv_get_show_images",
    "raw_tv_search_by_title",
    "raw_tv_watch_providers",
]
