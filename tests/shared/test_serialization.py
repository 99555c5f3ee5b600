"""Tests for dataclass serialization utilities."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum

import pytest

from tmdb_curated.shared.models import (
    CountryWatchProviders,
    CuratedResponse,
    DateResult,
    PagedResults,
    WatchProvider,
    WatchProviders,
)
from tmdb_curated.shared.utils.dataclass_serialization import to_dict


class Kind(Enum):
    TRAILER = "Trailer"


@dataclass
class Sample:
    kind: Kind
    when: dt.datetime
    tags: tuple[str, ...] = ()
    extra: dict[int, object] = field(default_factory=dict)


class TestToDict:
    """Test to_dict conversion."""

    def test_nested_dataclasses(self):
        """Nested dataclasses and dict values are converted recursively."""
        # Given
        providers = WatchProviders(
            media_id=348,
            results={
                "US": CountryWatchProviders(
                    just_watch_link="https://example.org",
                    stream=[WatchProvider(provider_id=8, provider="Netflix")],
                ),
            },
        )

        # When
        result = to_dict(providers)

        # Then
        assert result == {
            "media_id": 348,
            "results": {
                "US": {
                    "just_watch_link": "https://example.org",
                    "stream": [
                        {
                            "provider_id": 8,
                            "provider": "Netflix",
                            "display_priority": 0,
                            "logo_url": "",
                        },
                    ],
                    "buy": [],
                    "rent": [],
                },
            },
        }

    def test_date_result_serializes_iso_date(self):
        date_result = DateResult(date=dt.date(1979, 5, 25), epoch=296438400, formatted="05-25-1979")

        assert to_dict(date_result) == {
            "date": "1979-05-25",
            "epoch": 296438400,
            "formatted": "05-25-1979",
        }

    def test_generic_envelope(self):
        response = CuratedResponse(
            data=PagedResults(page=2, total_pages=3, total_results=41, results=["a"]),
            api_call="https://api.themoviedb.org/3/search/movie",
        )

        result = to_dict(response)

        assert result["api_call"] == "https://api.themoviedb.org/3/search/movie"
        assert result["data"] == {"page": 2, "total_pages": 3, "total_results": 41, "results": ["a"]}

    def test_enum_tuple_and_non_string_keys(self):
        """Enums become values, tuples become lists, dict keys become strings."""
        sample = Sample(
            kind=Kind.TRAILER,
            when=dt.datetime(2024, 1, 2, 3, 4, 5),
            tags=("a", "b"),
            extra={27: "Horror"},
        )

        result = to_dict(sample)

        assert result == {
            "kind": "Trailer",
            "when": "2024-01-02T03:04:05",
            "tags": ["a", "b"],
            "extra": {"27": "Horror"},
        }

    @pytest.mark.parametrize("value", [{"a": 1}, WatchProvider, None])
    def test_non_dataclass_instance_raises(self, value):
        with pytest.raises(TypeError, match="is not a dataclass instance"):
            to_dict(value)
