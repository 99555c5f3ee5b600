"""tmdb_curated: raw and curated access to The Movie Database (TMDB) API.

Initialize once with an API key, then call the curated functions:

    >>> from tmdb_curated import init_tmdb, movie_search_by_title
    >>> init_tmdb("my-api-key")
    >>> movie_search_by_title("Alien").data.results[0].title
    'Alien'
"""

from tmdb_curated.config.manager import (
    get_tmdb_consts,
    init_tmdb,
    tmdb_config,
    update_api_options,
)
from tmdb_curated.services.curated import (
    get_person_combined_credits,
    get_person_details,
    get_person_images,
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
    search_for_person_id,
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
from tmdb_curated.services.discover import DiscoverCriteria
from tmdb_curated.shared.errors import (
    ApplicationError,
    DomainError,
    ErrorCode,
    SecurityError,
    TMDBApiError,
    TMDBCuratedError,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "DiscoverCriteria",
    "DomainError",
    "ErrorCode",
    "SecurityError",
    "TMDBApiError",
    "TMDBCuratedError",
    "__version__",
    "get_person_combined_credits",
    "get_person_details",
    "get_person_images",
    "get_tmdb_consts",
    "init_tmdb",
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
    "tmdb_config",
    "tv_discover",
    "tv_get_episodes",
    "tv_get_images",
    "tv_get_person_credits",
    "tv_get_popular",
    "tv_get_show_credits",
    "tv_get_show_details",
    "tv_get_watch_providers",
    "tv_search_by_title",
    "update_api_options",
]
