"""Discover criteria.

``DiscoverCriteria`` describes a /discover/movie or /discover/tv query in
friendly terms and renders the matching TMDB query parameters.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tmdb_curated.helpers import flatten_list
from tmdb_curated.shared.constants import (
    CompareType,
    DiscoverSortBy,
    MediaType,
    TMDBConfig,
)
from tmdb_curated.shared.errors import DomainError, ErrorCode, ErrorContext

CompareLiteral = Literal["AND", "OR"]


class DiscoverCriteria(BaseModel):
    """Filters for the discover endpoints.

    Multi-valued filters are joined with ``,`` for AND and ``|`` for OR.
    Cast and crew filters only exist on /discover/movie and are ignored
    for TV.

    Example:
        >>> DiscoverCriteria(genres=[28, 12], genre_compare_type="AND").to_query_params("movie")
        {'with_genres': '28,12', 'sort_by': 'popularity.desc'}
    """

    model_config = ConfigDict(extra="forbid")

    genres: list[int] = Field(default_factory=list)
    genre_compare_type: CompareLiteral = CompareType.OR
    release_year: int | None = Field(default=None, ge=1800, le=3000)
    release_date_gte: date | None = None
    release_date_lte: date | None = None
    cast: list[int] = Field(default_factory=list)
    cast_compare_type: CompareLiteral = CompareType.OR
    crew: list[int] = Field(default_factory=list)
    crew_compare_type: CompareLiteral = CompareType.OR
    watch_providers: list[int] = Field(default_factory=list)
    watch_provider_compare_type: CompareLiteral = CompareType.OR
    watch_regions: list[str] = Field(default_factory=list)
    sort_by: str = DiscoverSortBy.DEFAULT

    @field_validator(
        "genre_compare_type",
        "cast_compare_type",
        "crew_compare_type",
        "watch_provider_compare_type",
        mode="before",
    )
    @classmethod
    def _upper_compare_type(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("sort_by")
    @classmethod
    def _validate_sort_by(cls, value: str) -> str:
        if value not in DiscoverSortBy.VALUES:
            msg = f"Unsupported sort_by value: {value}"
            raise ValueError(msg)
        return value

    @field_validator("watch_regions")
    @classmethod
    def _upper_regions(cls, value: list[str]) -> list[str]:
        return [region.upper() for region in value]

    def to_query_params(self, media_type: str) -> dict[str, Any]:
        """Render TMDB query parameters for ``media_type`` ('movie' or 'tv')."""
        is_movie = media_type == MediaType.MOVIE
        params: dict[str, Any] = {}

        if self.genres:
            params["with_genres"] = _join(self.genres, self.genre_compare_type)

        if self.release_year is not None:
            key = "primary_release_year" if is_movie else "first_air_date_year"
            params[key] = self.release_year

        date_key = "primary_release_date" if is_movie else "first_air_date"
        if self.release_date_gte is not None:
            params[f"{date_key}.gte"] = self.release_date_gte.isoformat()
        if self.release_date_lte is not None:
            params[f"{date_key}.lte"] = self.release_date_lte.isoformat()

        if is_movie and self.cast:
            params["with_cast"] = _join(self.cast, self.cast_compare_type)
        if is_movie and self.crew:
            params["with_crew"] = _join(self.crew, self.crew_compare_type)

        if self.watch_providers:
            params["with_watch_providers"] = _join(
                self.watch_providers,
                self.watch_provider_compare_type,
            )
            regions = self.watch_regions or [TMDBConfig.DEFAULT_WATCH_REGION]
            params["watch_region"] = regions[0]
        elif self.watch_regions:
            params["watch_region"] = self.watch_regions[0]

        params["sort_by"] = self.sort_by
        return params


def _join(values: list[int], compare_type: str) -> str:
    return flatten_list(values, CompareType.SEPARATORS[compare_type])


CriteriaInput = Union[DiscoverCriteria, dict[str, Any], None]


def coerce_criteria(criteria: CriteriaInput) -> DiscoverCriteria:
    """Accept a DiscoverCriteria, a plain dict or None.

    Raises:
        DomainError: If a dict does not describe valid criteria
    """
    if criteria is None:
        return DiscoverCriteria()
    if isinstance(criteria, DiscoverCriteria):
        return criteria
    try:
        return DiscoverCriteria.model_validate(criteria)
    except ValidationError as e:
        invalid_fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise DomainError(
            code=ErrorCode.INVALID_DISCOVER_CRITERIA,
            message=f"Invalid discover criteria: {e.error_count()} error(s)",
            context=ErrorContext(
                operation="coerce_criteria",
                additional_data={"fields": ",".join(invalid_fields)},
            ),
            original_error=e,
        ) from e


__all__ = [
    "CriteriaInput",
    "DiscoverCriteria",
    "coerce_criteria",
]
