"""Curated TMDB calls returning reshaped ``CuratedResponse`` values."""

from tmdb_curated.services.curated.common import (
    get_person_combined_credits,
    get_person_details,
    get_person_images,
    search_for_person_id,
)
from tmdb_curated.services.curated.movies import (
    movie_discover,
    movie_get_credits,
    movie_get_details,
    movie_get_images,
    movie_get_now_playing,
    movie_get_person_credits,
    movie_get_popular,
    movie_get_recommendations,
    movie_get_upcoming,
    movie_get_videos,
    movie_get_watch_providers,
    movie_search_by_title,
)
from tmdb_curated.services.curated.tv import (
    tv_discover,
    tv_get_episodes,
    tv_get_images,
    tv_get_person_credits,
    tv_get_popular,
    tv_get_show_credits,
    tv_get_show_details,
    tv_get_watch_providers,
    tv_search_by_title,
)

__all__ = [
    "get_person_combined_credits",
    "get_person_details",
    "get_person_images",
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
    "search_for_person_id",
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
