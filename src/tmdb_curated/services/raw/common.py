"""Raw person endpoints shared by movies and TV."""

from __future__ import annotations

from tmdb_curated.services.http import api_tmdb
from tmdb_curated.shared.constants import TMDBConfig, TMDBEndpoints
from tmdb_curated.shared.models import RawResponse


def raw_search_for_person(name: str, page: int = TMDBConfig.DEFAULT_PAGE) -> RawResponse:
    """GET /search/person."""
    return api_tmdb(TMDBEndpoints.SEARCH_PERSON, {"query": name, "page": page})


def raw_get_person_details(person_id: int) -> RawResponse:
    """GET /person/{person_id}."""
    return api_tmdb(TMDBEndpoints.PERSON.format(person_id=person_id))


def raw_get_person_images(person_id: int) -> RawResponse:
    """GET /person/{person_id}/images (profile images)."""
    return api_tmdb(TMDBEndpoints.PERSON_IMAGES.format(person_id=person_id))


def raw_get_person_combined_credits(person_id: int) -> RawResponse:
    """GET /person/{person_id}/combined_credits (movie and TV credits)."""
    return api_tmdb(TMDBEndpoints.PERSON_COMBINED_CREDITS.format(person_id=person_id))


__all__ = [
    "raw_get_person_combined_credits",
    "raw_get_person_details",
    "raw_get_person_images",
    "raw_search_for_person",
]
