"""
Genre Lookup Defaults

Genre id to name tables used when the TMDB genre list endpoints cannot be
reached during initialization.
"""

from __future__ import annotations

from typing import Final

DEFAULT_MOVIE_GENRES: Final[dict[int, str]] = {
    10402: "Music",
    10749: "Romance",
    10751: "Family",
    10752: "War",
    10770: "TV Movie",
    12: "Adventure",
    14: "Fantasy",
    16: "Animation",
    18: "Drama",
    27: "Horror",
    28: "Action",
    35: "Comedy",
    36: "History",
    37: "Western",
    53: "Thriller",
    80: "Crime",
    878: "Science Fiction",
    9648: "Mystery",
    99: "Documentary",
}

DEFAULT_TV_GENRES: Final[dict[int, str]] = {
    10751: "Family",
    10759: "Action & Adventure",
    10762: "Kids",
    10763: "News",
    10764: "Reality",
    10765: "Sci-Fi & Fantasy",
    10766: "Soap",
    10767: "Talk",
    10768: "War & Politics",
    16: "Animation",
    18: "Drama",
    35: "Comedy",
    37: "Western",
    80: "Crime",
    9648: "Mystery",
    99: "Documentary",
}


class DiscoverSortBy:
    """Sort keys accepted by the discover endpoints."""

    DEFAULT = "popularity.desc"

    VALUES: Final[tuple[str, ...]] = (
        "popularity.asc",
        "popularity.desc",
        "release_date.asc",
        "release_date.desc",
        "revenue.asc",
        "revenue.desc",
        "primary_release_date.asc",
        "primary_release_date.desc",
        "original_title.asc",
        "original_title.desc",
        "vote_average.asc",
        "vote_average.desc",
        "vote_count.asc",
        "vote_count.desc",
    )


class CompareType:
    """Separators TMDB uses to combine multi-valued discover filters."""

    AND = "AND"
    OR = "OR"

    SEPARATORS: Final[dict[str, str]] = {AND: ",", OR: "|"}
