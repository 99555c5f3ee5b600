"""Curated TV models."""

from __future__ import annotations

from dataclasses import dataclass, field

from tmdb_curated.shared.models.base import BaseDataclass, CuratedResponse, DateResult


@dataclass
class TVSummary(BaseDataclass):
    """A show as it appears in search, popular and discover results."""

    id: int
    name: str
    original_name: str = ""
    overview: str = ""
    first_air_date: DateResult = field(default_factory=DateResult)
    backdrop_url: str = ""
    poster_url: str = ""
    genres: list[str] = field(default_factory=list)
    popularity: float = 0.0
    original_language: str = ""

    def fetch_details(self) -> CuratedResponse[TVShowDetails]:
        """Fetch the full details of this show."""
        from tmdb_curated.services.curated.tv import tv_get_show_details

        return tv_get_show_details(self.id)

    def fetch_images(self, image_type: str = "posters") -> CuratedResponse[list[str]]:
        """Fetch English image URLs of this show."""
        from tmdb_curated.services.curated.tv import tv_get_images

        return tv_get_images(self.id, image_type)


@dataclass
class TVSeason(BaseDataclass):
    """Season summary listed on a show."""

    id: int
    season_number: int
    name: str = ""
    overview: str = ""
    poster_url: str = ""
    episode_count: int = 0
    air_date: DateResult = field(default_factory=DateResult)


@dataclass
class TVShowDetails(BaseDataclass):
    """Full details of one show, including its external ids."""

    id: int
    name: str
    overview: str = ""
    status: str = ""
    tag_line: str = ""
    popularity: float = 0.0
    avg_episode_run_time: int = 0
    first_air_date: DateResult = field(default_factory=DateResult)
    last_air_date: DateResult = field(default_factory=DateResult)
    poster_url: str = ""
    backdrop_url: str = ""
    home_page: str = ""
    number_of_episodes: int = 0
    number_of_seasons: int = 0
    genres: list[str] = field(default_factory=list)
    imdb_id: str = ""
    imdb_url: str = ""
    instagram_id: str = ""
    tvdb_id: int | None = None
    tv_rage_id: int | None = None
    twitter_id: str = ""
    facebook_id: str = ""
    seasons: list[TVSeason] = field(default_factory=list)


@dataclass
class TVEpisode(BaseDataclass):
    """One episode of a season."""

    id: int
    name: str
    episode_number: int
    season_number: int
    overview: str = ""
    air_date: DateResult = field(default_factory=DateResult)
    runtime: int | None = None
    still_url: str = ""
    vote_average: float = 0.0


@dataclass
class TVSeasonDetails(BaseDataclass):
    """A season with its episodes."""

    id: int
    season_number: int
    name: str = ""
    overview: str = ""
    poster_url: str = ""
    air_date: DateResult = field(default_factory=DateResult)
    episodes: list[TVEpisode] = field(default_factory=list)
