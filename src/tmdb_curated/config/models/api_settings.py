"""API configuration models (TMDB).

This module contains the configuration model for the TMDB v3 API:
authentication, base URL, timeout and default query parameters.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tmdb_curated.shared.constants import TMDBConfig as TMDBConstants


class TMDBSettings(BaseModel):
    """TMDB API configuration.

    Security: api_key is masked in __repr__ to prevent accidental
    exposure in logs.
    """

    api_key: str = Field(
        default="",
        repr=False,
        description="TMDB v3 API key (required for API access)",
    )
    base_url: str = Field(
        default=TMDBConstants.BASE_URL,
        description="TMDB v3 API base URL",
    )
    timeout: float = Field(
        default=TMDBConstants.DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    language: str = Field(
        default=TMDBConstants.DEFAULT_LANGUAGE,
        description="Default language for list endpoints",
    )
    include_adult: bool = Field(
        default=TMDBConstants.DEFAULT_INCLUDE_ADULT,
        description="Value of the include_adult query parameter sent on every call",
    )
    watch_region: str = Field(
        default=TMDBConstants.DEFAULT_WATCH_REGION,
        min_length=2,
        max_length=2,
        description="Region used to rank the watch provider list",
    )

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        return (
            f"TMDBSettings("
            f"api_key={masked_key}, "
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}, "
            f"language={self.language})"
        )


class APISettings(BaseModel):
    """API configuration container."""

    tmdb: TMDBSettings = Field(
        default_factory=TMDBSettings,
        description="TMDB API configuration",
    )


__all__ = [
    "APISettings",
    "TMDBSettings",
]
