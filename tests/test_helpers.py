"""Tests for the curated-layer helpers (image URLs, dates, list utilities)."""

from __future__ import annotations

import datetime as dt

import pytest

from tmdb_curated.config.manager import tmdb_config
from tmdb_curated.helpers import (
    average_of_list,
    build_image_url,
    build_imdb_url,
    flatten_list,
    format_image_url,
    image_url,
    parse_to_date,
    resolve_image_size,
)
from tmdb_curated.shared.errors import ApplicationError, ErrorCode


class TestImageUrls:
    """Test absolute image URL building."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [("s", "w185"), ("m", "w300"), ("l", "w500"), ("original", "original"), ("xl", "w300")],
    )
    def test_resolve_image_size(self, size, expected):
        """Known size keys map to TMDB sizes; unknown keys fall back to w300."""
        assert resolve_image_size(size) == expected

    def test_build_image_url_strips_leading_slash(self):
        url = build_image_url("https://image.tmdb.org/t/p/", "m", "/abc.jpg")

        assert url == "https://image.tmdb.org/t/p/w300/abc.jpg"

    def test_build_image_url_empty_path(self):
        assert build_image_url("https://image.tmdb.org/t/p/", "m", None) == ""
        assert build_image_url("https://image.tmdb.org/t/p/", "m", "") == ""

    def test_format_image_url_single_path_returns_list(self, runtime_config):
        """A single path still yields a one-element list."""
        assert format_image_url("/abc.jpg", "l") == ["https://image.tmdb.org/t/p/w500/abc.jpg"]

    def test_format_image_url_list_keeps_positions(self, runtime_config):
        urls = format_image_url(["/a.jpg", None, "/b.jpg"], "s")

        assert urls == [
            "https://image.tmdb.org/t/p/w185/a.jpg",
            "",
            "https://image.tmdb.org/t/p/w185/b.jpg",
        ]

    def test_format_image_url_insecure(self, runtime_config):
        """secure=False uses the http base URL."""
        assert format_image_url("/a.jpg", secure=False) == ["http://image.tmdb.org/t/p/w300/a.jpg"]

    def test_image_url_requires_initialization(self):
        """Building URLs before initialization raises ApplicationError."""
        assert not tmdb_config.is_initialized

        with pytest.raises(ApplicationError) as exc_info:
            image_url("/a.jpg")

        assert exc_info.value.code == ErrorCode.CONFIG_MISSING


class TestParseToDate:
    """Test TMDB date parsing."""

    def test_valid_date(self):
        # Given / When
        result = parse_to_date("1979-05-25", "%m-%d-%Y")

        # Then
        assert result.date == dt.date(1979, 5, 25)
        assert result.epoch == 296438400
        assert result.formatted == "05-25-1979"
        assert result

    def test_datetime_string_is_truncated_to_date(self):
        result = parse_to_date("2008-01-20T00:00:00.000Z", "%Y")

        assert result.date == dt.date(2008, 1, 20)
        assert result.formatted == "2008"

    @pytest.mark.parametrize("value", [None, "", "not-a-date", "2020-13-45"])
    def test_empty_or_invalid_gives_empty_result(self, value):
        """Empty and invalid input produce an empty DateResult."""
        result = parse_to_date(value)

        assert result.date is None
        assert result.epoch is None
        assert result.formatted == ""
        assert not result

    def test_default_format_without_config(self):
        """The default format applies when nothing is initialized."""
        assert parse_to_date("2001-02-03").formatted == "02-03-2001"

    def test_configured_format(self, runtime_config):
        tmdb_config.update_api_options(date_format="%d/%m/%Y")

        assert parse_to_date("2001-02-03").formatted == "03/02/2001"

    def test_date_object_accepted(self):
        result = parse_to_date(dt.date(2020, 1, 1), "%Y-%m-%d")

        assert result.formatted == "2020-01-01"
        assert result.epoch == 1577836800


class TestListHelpers:
    """Test averages and joins."""

    @pytest.mark.parametrize(
        ("values", "expected"),
        [([45, 47, 48], 47), ([30, 31], 31), ([60], 60), ([], 0), (None, 0), ([44, 45], 45)],
    )
    def test_average_of_list(self, values, expected):
        """The mean is rounded half up; empty input gives 0."""
        assert average_of_list(values) == expected

    def test_flatten_list(self):
        assert flatten_list([28, 12, None, 16]) == "28,12,16"
        assert flatten_list([28, 12], "|") == "28|12"
        assert flatten_list(None) == ""

    def test_build_imdb_url(self):
        assert build_imdb_url("tt0078748") == "https://www.imdb.com/title/tt0078748"
        assert build_imdb_url("nm0000244", person=True) == "https://www.imdb.com/name/nm0000244"
        assert build_imdb_url(None) == ""
