"""
Base Dataclasses for tmdb_curated

Envelope types shared by the raw and curated layers.

Design Decisions:
- Dataclass over Pydantic for response values: they are built from
  already-validated TMDB payloads and only carry data
- Generic envelopes so curated functions keep their result types
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class BaseDataclass:
    """Common base dataclass for all tmdb_curated response types."""


@dataclass
class RawResponse(BaseDataclass):
    """Decoded JSON body of one TMDB call and the URL that was called."""

    data: dict[str, Any]
    api_call: str


@dataclass
class CuratedResponse(BaseDataclass, Generic[T]):
    """Reshaped payload of one curated call and the URL that was called."""

    data: T
    api_call: str


@dataclass
class PagedResults(BaseDataclass, Generic[T]):
    """Flattened TMDB pagination envelope."""

    page: int = 1
    total_pages: int = 0
    total_results: int = 0
    results: list[T] = field(default_factory=list)


@dataclass
class DateResult(BaseDataclass):
    """A TMDB date string parsed into a date, an epoch and a display string.

    Attributes:
        date: Parsed calendar date, None when the input was empty or invalid
        epoch: Seconds since the epoch at UTC midnight of ``date``
        formatted: ``date`` rendered with the configured date format
    """

    date: dt.date | None = None
    epoch: int | None = None
    formatted: str = ""

    def __bool__(self) -> bool:
        return self.date is not None
