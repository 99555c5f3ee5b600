"""Curated person calls shared by movies and TV.

Each function issues the matching raw call and keeps only the fields a
consuming application needs. Dates become ``DateResult`` values and image
paths become absolute URLs. ``TMDBApiError`` from the raw layer is
propagated unchanged.
"""

from __future__ import annotations

from typing import Any

from tmdb_curated.helpers import build_imdb_url, image_url, parse_to_date
from tmdb_curated.services.curated.transformers import to_media_credits, to_paged
from tmdb_curated.services.raw.common import (
    raw_get_person_combined_credits,
    raw_get_person_details,
    raw_get_person_images,
    raw_search_for_person,
)
from tmdb_curated.shared.constants import MediaType, TMDBConfig
from tmdb_curated.shared.models import (
    CuratedResponse,
    KnownFor,
    MediaCredits,
    PagedResults,
    PersonDetails,
    PersonImage,
    PersonSearchItem,
)


def _to_known_for(data: dict[str, Any]) -> KnownFor:
    media_type = data.get("media_type") or MediaType.MOVIE
    return KnownFor(
        id=data["id"],
        media_type=media_type,
        title=data.get("title") or data.get("name") or "",
        poster_url=image_url(data.get("poster_path")),
        backdrop_url=image_url(data.get("backdrop_path")),
    )


def _to_person_search_item(data: dict[str, Any]) -> PersonSearchItem:
    return PersonSearchItem(
        id=data["id"],
        name=data.get("name", ""),
        profile_image_url=image_url(data.get("profile_path")),
        known_for=[_to_known_for(item) for item in data.get("known_for") or []],
        popularity=data.get("popularity") or 0.0,
    )


def search_for_person_id(
    name: str,
    page: int = TMDBConfig.DEFAULT_PAGE,
) -> CuratedResponse[PagedResults[PersonSearchItem]]:
    """Search people by name, most popular first.

    Intended for looking up a person's id before requesting details or
    credits.

    Args:
        name: Name (or part of it) to search for
        page: Result page to return

    Returns:
        Paged ``PersonSearchItem`` results sorted by popularity descending

    Raises:
        TMDBApiError: If the search request fails
    """
    resp = raw_search_for_person(name, page)
    paged = to_paged(resp.data, _to_person_search_item)
    paged.results.sort(key=lambda person: person.popularity, reverse=True)
    return CuratedResponse(data=paged, api_call=resp.api_call)


def get_person_details(person_id: int) -> CuratedResponse[PersonDetails]:
    """Biographical details of a person, without their credits."""
    resp = raw_get_person_details(person_id)
    data = resp.data
    imdb_id = data.get("imdb_id") or ""
    details = PersonDetails(
        id=data["id"],
        name=data.get("name", ""),
        birthday=parse_to_date(data.get("birthday")),
        death_day=parse_to_date(data.get("deathday")),
        known_for_department=data.get("known_for_department") or "",
        biography=data.get("biography") or "",
        place_of_birth=data.get("place_of_birth") or "",
        imdb_id=imdb_id,
        imdb_url=build_imdb_url(imdb_id, person=True),
        profile_image=image_url(data.get("profile_path")),
    )
    return CuratedResponse(data=details, api_call=resp.api_call)


def get_person_images(person_id: int) -> CuratedResponse[list[PersonImage]]:
    """Profile images of a person, best rated first."""
    resp = raw_get_person_images(person_id)
    profiles = sorted(
        resp.data.get("profiles") or [],
        key=lambda image: image.get("vote_average") or 0,
        reverse=True,
    )
    images = [
        PersonImage(
            width=image.get("width") or 0,
            height=image.get("height") or 0,
            aspect_ratio=image.get("aspect_ratio") or 0.0,
            image_url=image_url(image.get("file_path")),
        )
        for image in profiles
    ]
    return CuratedResponse(data=images, api_call=resp.api_call)


def get_person_combined_credits(person_id: int) -> CuratedResponse[MediaCredits]:
    """Movie and TV credits of a person; each credit keeps its media type."""
    resp = raw_get_person_combined_credits(person_id)
    return CuratedResponse(data=to_media_credits(resp.data), api_call=resp.api_call)


__all__ = [
    "get_person_combined_credits",
    "get_person_details",
    "get_person_images",
    "search_for_person_id",
]
