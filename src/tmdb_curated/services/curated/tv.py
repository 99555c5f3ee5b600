"""Curated TV calls."""

from __future__ import annotations

import logging
from typing import Any

from tmdb_curated.helpers import average_of_list, build_imdb_url, image_url, parse_to_date
from tmdb_curated.services.curated.transformers import (
    english_image_urls,
    genre_names,
    genre_names_from_objects,
    to_credits,
    to_media_credits,
    to_paged,
    to_watch_providers,
)
from tmdb_curated.services.discover import CriteriaInput
from tmdb_curated.services.raw.tv import (
    raw_tv_discover,
    raw_tv_get_episodes,
    raw_tv_get_person_credits,
    raw_tv_get_popular,
    raw_tv_get_show_credits,
    raw_tv_get_show_details,
    raw_tv_get_show_images,
    raw_tv_search_by_title,
    raw_tv_watch_providers,
)
from tmdb_curated.shared.constants import MediaType, TMDBConfig
from tmdb_curated.shared.models import (
    Credits,
    CuratedResponse,
    MediaCredits,
    PagedResults,
    TVEpisode,
    TVSeason,
    TVSeasonDetails,
    TVShowDetails,
    TVSummary,
    WatchProviders,
)

logger = logging.getLogger(__name__)

TVList = CuratedResponse[PagedResults[TVSummary]]


def to_tv_summary(data: dict[str, Any]) -> TVSummary:
    """Curate one show entry of a search, popular or discover payload."""
    return TVSummary(
        id=data["id"],
        name=data.get("name", ""),
        original_name=data.get("original_name") or "",
        overview=data.get("overview") or "",
        first_air_date=parse_to_date(data.get("first_air_date")),
        backdrop_url=image_url(data.get("backdrop_path")),
        poster_url=image_url(data.get("poster_path")),
        genres=genre_names(data.get("genre_ids"), MediaType.TV),
        popularity=data.get("popularity") or 0.0,
        original_language=data.get("original_language") or "",
    )


def _to_season(data: dict[str, Any]) -> TVSeason:
    return TVSeason(
        id=data["id"],
        season_number=data.get("season_number") or 0,
        name=data.get("name") or "",
        overview=data.get("overview") or "",
        poster_url=image_url(data.get("poster_path")),
        episode_count=data.get("episode_count") or 0,
        air_date=parse_to_date(data.get("air_date")),
    )


def _to_episode(data: dict[str, Any]) -> TVEpisode:
    return TVEpisode(
        id=data["id"],
        name=data.get("name") or "",
        episode_number=data.get("episode_number") or 0,
        season_number=data.get("season_number") or 0,
        overview=data.get("overview") or "",
        air_date=parse_to_date(data.get("air_date")),
        runtime=data.get("runtime"),
        still_url=image_url(data.get("still_path")),
        vote_average=data.get("vote_average") or 0.0,
    )


def _tv_list(resp) -> TVList:
    return CuratedResponse(data=to_paged(resp.data, to_tv_summary), api_call=resp.api_call)


def tv_get_images(show_id: int, image_type: str = "posters") -> CuratedResponse[list[str]]:
    """English image URLs (size 'm') of a show for "posters", "backdrops" or "logos"."""
    resp = raw_tv_get_show_images(show_id)
    return CuratedResponse(data=english_image_urls(resp.data, image_type), api_call=resp.api_call)


def tv_search_by_title(query: str, page: int = TMDBConfig.DEFAULT_PAGE) -> TVList:
    """Search shows by name."""
    return _tv_list(raw_tv_search_by_title(query, page))


def tv_get_popular(
    page: int = TMDBConfig.DEFAULT_PAGE,
    language: str = TMDBConfig.DEFAULT_LANGUAGE,
) -> TVList:
    return _tv_list(raw_tv_get_popular(page, language))


def tv_discover(criteria: CriteriaInput = None, page: int = TMDBConfig.DEFAULT_PAGE) -> TVList:
    """Discover shows matching ``criteria``; cast and crew filters do not apply to TV.

    Raises:
        DomainError: If ``criteria`` fails validation
        TMDBApiError: If the request fails
    """
    return _tv_list(raw_tv_discover(criteria, page))


def tv_get_show_details(show_id: int) -> CuratedResponse[TVShowDetails]:
    """Full details of a show, external ids included.

    The external ids are embedded with ``append_to_response`` so a single
    request is made.

    Args:
        show_id: TMDB show id

    Returns:
        ``TVShowDetails``; ``avg_episode_run_time`` is the rounded mean of
        the listed episode run times, 0 when TMDB lists none

    Raises:
        TMDBApiError: If the request fails
    """
    resp = raw_tv_get_show_details(show_id, append_to_response="external_ids")
    data = resp.data
    external_ids = data.get("external_ids") or {}
    imdb_id = external_ids.get("imdb_id") or ""
    details = TVShowDetails(
        id=data["id"],
        name=data.get("name", ""),
        overview=data.get("overview") or "",
        status=data.get("status") or "",
        tag_line=data.get("tagline") or "",
        popularity=data.get("popularity") or 0.0,
        avg_episode_run_time=average_of_list(data.get("episode_run_time")),
        first_air_date=parse_to_date(data.get("first_air_date")),
        last_air_date=parse_to_date(data.get("last_air_date")),
        poster_url=image_url(data.get("poster_path")),
        backdrop_url=image_url(data.get("backdrop_path")),
        home_page=data.get("homepage") or "",
        number_of_episodes=data.get("number_of_episodes") or 0,
        number_of_seasons=data.get("number_of_seasons") or 0,
        genres=genre_names_from_objects(data.get("genres")),
        imdb_id=imdb_id,
        imdb_url=build_imdb_url(imdb_id),
        instagram_id=external_ids.get("instagram_id") or "",
        tvdb_id=external_ids.get("tvdb_id"),
        tv_rage_id=external_ids.get("tvrage_id"),
        twitter_id=external_ids.get("twitter_id") or "",
        facebook_id=external_ids.get("facebook_id") or "",
        seasons=[_to_season(season) for season in data.get("seasons") or []],
    )
    return CuratedResponse(data=details, api_call=resp.api_call)


def tv_get_show_credits(show_id: int) -> CuratedResponse[Credits]:
    """Cast and crew of a show."""
    resp = raw_tv_get_show_credits(show_id)
    return CuratedResponse(data=to_credits(resp.data), api_call=resp.api_call)


def tv_get_episodes(show_id: int, season_num: int = 1) -> CuratedResponse[TVSeasonDetails]:
    """One season of a show with its episodes."""
    resp = raw_tv_get_episodes(show_id, season_num)
    data = resp.data
    season = TVSeasonDetails(
        id=data["id"],
        season_number=data.get("season_number", season_num),
        name=data.get("name") or "",
        overview=data.get("overview") or "",
        poster_url=image_url(data.get("poster_path")),
        air_date=parse_to_date(data.get("air_date")),
        episodes=[_to_episode(episode) for episode in data.get("episodes") or []],
    )
    return CuratedResponse(data=season, api_call=resp.api_call)


def tv_get_person_credits(person_id: int) -> CuratedResponse[MediaCredits]:
    """TV cast and crew credits of a person."""
    resp = raw_tv_get_person_credits(person_id)
    return CuratedResponse(data=to_media_credits(resp.data, MediaType.TV), api_call=resp.api_call)


def tv_get_watch_providers(
    show_id: int,
    country_codes: tuple[str, ...] | list[str] = (TMDBConfig.DEFAULT_WATCH_REGION,),
) -> CuratedResponse[WatchProviders]:
    """Where a show can be streamed, bought or rented, per requested country."""
    resp = raw_tv_watch_providers(show_id)
    providers = to_watch_providers(show_id, resp.data, country_codes)
    missing = [code for code in country_codes if code.upper() not in providers.results]
    if missing:
        logger.debug("No watch providers for show %s in %s", show_id, missing)
    return CuratedResponse(data=providers, api_call=resp.api_call)


__all__ = [
    "to_tv_summary",
    "tv_discover",
    "tv_get_episodes",
    "tv_get_images",
    "tv_get_person_credits",
    "tv_get_popular",
    "tv_get_show_credits",
    "tv_get_show_details",
    "tv_get_watch_providers",
    "tv_search_by_title",
]
