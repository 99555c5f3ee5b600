"""
API Configuration Constants

This module contains all constants related to the TMDB v3 API:
base URLs, default query parameters, image sizes and the link templates
used by the curated layer.
"""

from typing import ClassVar


class APIConfig:
    """Base API configuration constants."""

    DEFAULT_REQUEST_TIMEOUT = 30  # seconds
    DEFAULT_PAGE = 1


class TMDBConfig(APIConfig):
    """TMDB API specific configuration."""

    BASE_URL = "https://api.themoviedb.org/3"

    # Fallbacks used when /configuration fails or omits image base URLs
    DEFAULT_IMG_URL = "http://image.tmdb.org/t/p/"
    DEFAULT_SECURE_IMG_URL = "https://image.tmdb.org/t/p/"

    HEADERS: ClassVar[dict[str, str]] = {
        "Accept": "application/json",
    }

    DEFAULT_LANGUAGE = "en-US"
    DEFAULT_INCLUDE_ADULT = False
    DEFAULT_WATCH_REGION = "US"
    DEFAULT_DATE_FORMAT = "%m-%d-%Y"


class TMDBEndpoints:
    """Endpoint path templates, relative to ``TMDBConfig.BASE_URL``."""

    CONFIGURATION = "/configuration"
    GENRE_LIST = "/genre/{media_type}/list"
    WATCH_PROVIDER_LIST = "/watch/providers/{media_type}"
    CREDIT = "/credit/{credit_id}"

    SEARCH_PERSON = "/search/person"
    PERSON = "/person/{person_id}"
    PERSON_IMAGES = "/person/{person_id}/images"
    PERSON_COMBINED_CREDITS = "/person/{person_id}/combined_credits"
    PERSON_MOVIE_CREDITS = "/person/{person_id}/movie_credits"
    PERSON_TV_CREDITS = "/person/{person_id}/tv_credits"

    SEARCH_MOVIE = "/search/movie"
    MOVIE = "/movie/{movie_id}"
    MOVIE_VIDEOS = "/movie/{movie_id}/videos"
    MOVIE_RECOMMENDATIONS = "/movie/{movie_id}/recommendations"
    MOVIE_IMAGES = "/movie/{movie_id}/images"
    MOVIE_CREDITS = "/movie/{movie_id}/credits"
    MOVIE_WATCH_PROVIDERS = "/movie/{movie_id}/watch/providers"
    MOVIE_UPCOMING = "/movie/upcoming"
    MOVIE_NOW_PLAYING = "/movie/now_playing"
    MOVIE_POPULAR = "/movie/popular"
    DISCOVER_MOVIE = "/discover/movie"

    SEARCH_TV = "/search/tv"
    TV = "/tv/{show_id}"
    TV_SEASON = "/tv/{show_id}/season/{season_num}"
    TV_IMAGES = "/tv/{show_id}/images"
    TV_EXTERNAL_IDS = "/tv/{show_id}/external_ids"
    TV_CREDITS = "/tv/{show_id}/credits"
    TV_WATCH_PROVIDERS = "/tv/{show_id}/watch/providers"
    TV_POPULAR = "/tv/popular"
    DISCOVER_TV = "/discover/tv"


class ImageSizes:
    """Size keys accepted by ``format_image_url`` and their TMDB size names."""

    SMALL = "s"
    MEDIUM = "m"
    LARGE = "l"
    ORIGINAL = "original"

    SIZE_MAP: ClassVar[dict[str, str]] = {
        SMALL: "w185",
        MEDIUM: "w300",
        LARGE: "w500",
        ORIGINAL: "original",
    }
    DEFAULT = "w300"


class ExternalLinks:
    """Link templates for ids returned by TMDB."""

    IMDB_TITLE = "https://www.imdb.com/title/{imdb_id}"
    IMDB_NAME = "https://www.imdb.com/name/{imdb_id}"
    YOUTUBE_VIDEO = "https://www.youtube.com/watch?v={key}"
    YOUTUBE_THUMBNAIL = "https://img.youtube.com/vi/{key}/0.jpg"
    VIMEO_VIDEO = "https://vimeo.com/{key}"


class MediaType:
    """Media type literals used in TMDB paths and payloads."""

    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"
