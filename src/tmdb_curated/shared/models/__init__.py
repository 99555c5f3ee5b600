"""Response models for the raw and curated layers."""

from tmdb_curated.shared.models.base import (
    BaseDataclass,
    CuratedResponse,
    DateResult,
    PagedResults,
    RawResponse,
)
from tmdb_curated.shared.models.common import (
    CastMember,
    CountryWatchProviders,
    Credits,
    CrewMember,
    KnownFor,
    MediaCredit,
    MediaCredits,
    PersonDetails,
    PersonImage,
    PersonSearchItem,
    Video,
    WatchProvider,
    WatchProviders,
)
from tmdb_curated.shared.models.movies import MovieDetails, MovieSummary
from tmdb_curated.shared.models.tv import (
    TVEpisode,
    TVSeason,
    TVSeasonDetails,
    TVShowDetails,
    TVSummary,
)

__all__ = [
    "BaseDataclass",
    "CastMember",
    "CountryWatchProviders",
    "Credits",
    "CrewMember",
    "CuratedResponse",
    "DateResult",
    "KnownFor",
    "MediaCredit",
    "MediaCredits",
    "MovieDetails",
    "MovieSummary",
    "PagedResults",
    "PersonDetails",
    "PersonImage",
    "PersonSearchItem",
    "RawResponse",
    "TVEpisode",
    "TVSeason",
    "TVSeasonDetails",
    "TVShowDetails",
    "TVSummary",
    "Video",
    "WatchProvider",
    "WatchProviders",
]
