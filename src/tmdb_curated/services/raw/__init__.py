"""Raw TMDB calls: one function per endpoint, returning ``RawResponse``."""

from tmdb_curated.services.raw.common import (
    raw_get_person_combined_credits,
    raw_get_person_details,
    raw_get_person_images,
    raw_search_for_person,
)
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
from tmdb_curated.services.raw.tv import (
    raw_tv_discover,
    raw_tv_get_credit_details,
    raw_tv_get_episodes,
    raw_tv_get_external_ids,
    raw_tv_get_person_credits,
    raw_tv_get_popular,
    raw_tv_get_show_credits,
    raw_tv_get_show_details,
    raw_tv_get_show_images,
    raw_tv_search_by_title,
    raw_tv_watch_providers,
)

__all__ = [
    "raw_get_person_combined_credits",
    "raw_get_person_details",
    "raw_get_person_images",
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
    "raw_search_for_person",
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
