"""Curated movie models."""

from __future__ import annotations

from dataclasses import dataclass, field

from tmdb_curated.shared.models.base import BaseDataclass, CuratedResponse, DateResult
from tmdb_curated.shared.models.common import Video


@dataclass
class MovieSummary(BaseDataclass):
    """A movie as it appears in search, list and discover results."""

    id: int
    title: str
    overview: str = ""
    popularity: float = 0.0
    original_language: str = ""
    release_date: DateResult = field(default_factory=DateResult)
    poster_url: str = ""
    backdrop_url: str = ""
    genres: list[str] = field(default_factory=list)

    def fetch_details(self, *, with_videos: bool = False) -> CuratedResponse[MovieDetails]:
        """Fetch the full details of this movie."""
        from tmdb_curated.services.curated.movies import movie_get_details

        return movie_get_details(self.id, with_videos=with_videos)

    def fetch_images(self, image_type: str = "posters") -> CuratedResponse[list[str]]:
        """Fetch English image URLs of this movie."""
        from tmdb_curated.services.curated.movies import movie_get_images

        return movie_get_images(self.id, image_type)


@dataclass
class MovieDetails(BaseDataclass):
    """Full details of one movie."""

    id: int
    title: str
    tagline: str = ""
    overview: str = ""
    status: str = ""
    runtime: int = 0
    budget: int = 0
    revenue: int = 0
    release_date: DateResult = field(default_factory=DateResult)
    poster_url: str = ""
    backdrop_url: str = ""
    imdb_id: str = ""
    imdb_url: str = ""
    genres: list[str] = field(default_factory=list)
    videos: list[Video] = field(default_factory=list)
