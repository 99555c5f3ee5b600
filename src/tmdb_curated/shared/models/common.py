"""Curated models shared by movies, TV and people."""

from __future__ import annotations

from dataclasses import dataclass, field

from tmdb_curated.shared.models.base import BaseDataclass, DateResult


@dataclass
class KnownFor(BaseDataclass):
    """A title a person is known for, as listed in person search."""

    id: int
    media_type: str
    title: str = ""
    poster_url: str = ""
    backdrop_url: str = ""


@dataclass
class PersonSearchItem(BaseDataclass):
    """One person search hit."""

    id: int
    name: str
    profile_image_url: str = ""
    known_for: list[KnownFor] = field(default_factory=list)
    popularity: float = 0.0


@dataclass
class PersonDetails(BaseDataclass):
    """Biographical details of a person."""

    id: int
    name: str
    birthday: DateResult = field(default_factory=DateResult)
    death_day: DateResult = field(default_factory=DateResult)
    known_for_department: str = ""
    biography: str = ""
    place_of_birth: str = ""
    imdb_id: str = ""
    imdb_url: str = ""
    profile_image: str = ""


@dataclass
class PersonImage(BaseDataclass):
    """A profile image of a person."""

    width: int
    height: int
    aspect_ratio: float
    image_url: str


@dataclass
class MediaCredit(BaseDataclass):
    """A person's credit on a movie or TV show.

    Cast credits fill ``character_name``; crew credits fill ``job`` and
    ``department``. ``episode_count`` is only reported for TV credits.
    """

    id: int
    media_type: str
    title: str = ""
    overview: str = ""
    release_date: DateResult = field(default_factory=DateResult)
    credit_id: str = ""
    genres: list[str] = field(default_factory=list)
    poster_url: str = ""
    backdrop_url: str = ""
    original_language: str = ""
    character_name: str | None = None
    job: str | None = None
    department: str | None = None
    episode_count: int | None = None


@dataclass
class MediaCredits(BaseDataclass):
    """Cast and crew credits of one person."""

    cast: list[MediaCredit] = field(default_factory=list)
    crew: list[MediaCredit] = field(default_factory=list)


@dataclass
class CastMember(BaseDataclass):
    """A cast entry of a movie or show."""

    person_id: int
    name: str
    character_name: str = ""
    credit_id: str = ""
    gender: int = 0
    profile_url: str = ""
    order: int = 0


@dataclass
class CrewMember(BaseDataclass):
    """A crew entry of a movie or show."""

    person_id: int
    name: str
    credit_id: str = ""
    job: str = ""
    department: str = ""
    gender: int = 0
    profile_url: str = ""


@dataclass
class Credits(BaseDataclass):
    """Cast and crew of a movie or show."""

    cast: list[CastMember] = field(default_factory=list)
    crew: list[CrewMember] = field(default_factory=list)


@dataclass
class WatchProvider(BaseDataclass):
    """A streaming, rental or purchase provider."""

    provider_id: int
    provider: str
    display_priority: int = 0
    logo_url: str = ""


@dataclass
class CountryWatchProviders(BaseDataclass):
    """Providers available in one country, grouped by offer type."""

    just_watch_link: str = ""
    stream: list[WatchProvider] = field(default_factory=list)
    buy: list[WatchProvider] = field(default_factory=list)
    rent: list[WatchProvider] = field(default_factory=list)


@dataclass
class WatchProviders(BaseDataclass):
    """Watch providers of a movie or show keyed by ISO 3166-1 country code."""

    media_id: int
    results: dict[str, CountryWatchProviders] = field(default_factory=dict)


@dataclass
class Video(BaseDataclass):
    """A trailer, teaser or clip attached to a title."""

    id: str
    key: str
    name: str = ""
    site: str = ""
    size: int = 0
    type: str = ""
    language: str = ""
    country: str = ""
    video_url: str = ""
    video_thumbnail_url: str = ""
