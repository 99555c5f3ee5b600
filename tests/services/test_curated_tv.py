"""Tests for the curated TV calls."""

from __future__ import annotations

import datetime as dt
import logging

from conftest import (
    API_URL,
    CREDITS_PAYLOAD,
    IMAGES_PAYLOAD,
    SEASON_PAYLOAD,
    SECURE_IMG_URL,
    TV_DETAILS_PAYLOAD,
    TV_SEARCH_PAYLOAD,
    WATCH_PROVIDERS_PAYLOAD,
    called_params,
    called_url,
)
from tmdb_curated.services.curated.tv import (
    tv_discover,
    tv_get_episodes,
    tv_get_images,
    tv_get_person_credits,
    tv_get_popular,
    tv_get_show_credits,
    tv_get_show_details,
    tv_get_watch_providers,
    tv_search_by_title,
)


class TestTvSearch:
    """Test show search and list reshaping."""

    def test_search_results(self, runtime_config, respond):
        # Given
        session = respond(TV_SEARCH_PAYLOAD)

        # When
        result = tv_search_by_title("Breaking Bad")

        # Then
        assert called_url(session) == f"{API_URL}/search/tv"
        show = result.data.results[0]
        assert show.name == "Breaking Bad"
        assert show.original_name == "Breaking Bad"
        assert show.first_air_date.date == dt.date(2008, 1, 20)
        assert show.genres == ["Drama", "Crime"]

    def test_popular(self, runtime_config, respond):
        session = respond(TV_SEARCH_PAYLOAD)

        result = tv_get_popular()

        assert called_url(session) == f"{API_URL}/tv/popular"
        assert result.data.results[0].id == 1396

    def test_discover_ignores_cast(self, runtime_config, respond):
        session = respond(TV_SEARCH_PAYLOAD)

        tv_discover({"genres": [18], "cast": [17419]})

        params = called_params(session)
        assert params["with_genres"] == "18"
        assert "with_cast" not in params

    def test_summary_fetch_details(self, runtime_config, respond):
        session = respond(TV_SEARCH_PAYLOAD, TV_DETAILS_PAYLOAD)
        show = tv_search_by_title("Breaking Bad").data.results[0]

        details = show.fetch_details().data

        assert called_url(session, 1) == f"{API_URL}/tv/1396"
        assert details.number_of_seasons == 5


class TestTvShowDetails:
    """Test show details reshaping."""

    def test_details(self, runtime_config, respond):
        # Given
        session = respond(TV_DETAILS_PAYLOAD)

        # When
        details = tv_get_show_details(1396).data

        # Then
        assert called_params(session)["append_to_response"] == "external_ids"
        assert details.tag_line == "Remember my name"
        assert details.home_page == "https://www.sonypictures.com/tv/breakingbad"
        assert details.avg_episode_run_time == 47
        assert details.last_air_date.formatted == "09-29-2013"
        assert details.imdb_url == "https://www.imdb.com/title/tt0903747"
        assert details.tvdb_id == 81189
        assert details.tv_rage_id == 18164
        assert details.twitter_id == "BreakingBad"
        assert details.backdrop_url == ""
        assert details.seasons[0].episode_count == 7
        assert details.seasons[0].poster_url.startswith(SECURE_IMG_URL)

    def test_no_run_times_and_external_ids(self, runtime_config, respond):
        payload = {**TV_DETAILS_PAYLOAD, "episode_run_time": []}
        payload.pop("external_ids")
        respond(payload)

        details = tv_get_show_details(1396).data

        assert details.avg_episode_run_time == 0
        assert details.imdb_id == ""
        assert details.imdb_url == ""
        assert details.tvdb_id is None


class TestTvSeasonsAndCredits:
    """Test seasons, credits, images and providers."""

    def test_episodes(self, runtime_config, respond):
        session = respond(SEASON_PAYLOAD)

        season = tv_get_episodes(1396, 1).data

        assert called_url(session) == f"{API_URL}/tv/1396/season/1"
        assert season.name == "Season 1"
        pilot = season.episodes[0]
        assert pilot.name == "Pilot"
        assert pilot.runtime == 59
        assert pilot.still_url == f"{SECURE_IMG_URL}w300/ydlY3iPfeOAvu8gVqrxPoMvzNCn.jpg"

    def test_show_credits(self, runtime_config, respond):
        session = respond(CREDITS_PAYLOAD)

        credits = tv_get_show_credits(1396).data

        assert called_url(session) == f"{API_URL}/tv/1396/credits"
        assert len(credits.cast) == 1

    def test_person_credits_are_tv(self, runtime_config, respond):
        session = respond(
            {"cast": [{"id": 1396, "name": "Breaking Bad", "first_air_date": "2008-01-20", "episode_count": 62}]},
        )

        credit = tv_get_person_credits(17419).data.cast[0]

        assert called_url(session) == f"{API_URL}/person/17419/tv_credits"
        assert credit.media_type == "tv"
        assert credit.title == "Breaking Bad"
        assert credit.episode_count == 62

    def test_images(self, runtime_config, respond):
        session = respond(IMAGES_PAYLOAD)

        urls = tv_get_images(1396, "posters").data

        assert called_url(session) == f"{API_URL}/tv/1396/images"
        assert len(urls) == 2

    def test_watch_providers(self, runtime_config, respond):
        session = respond(WATCH_PROVIDERS_PAYLOAD)

        providers = tv_get_watch_providers(1396, ("GB",)).data

        assert called_url(session) == f"{API_URL}/tv/1396/watch/providers"
        assert providers.media_id == 1396
        assert list(providers.results) == ["GB"]

    def test_watch_providers_log_each_missing_country(self, runtime_config, respond, caplog):
        """Countries without data are logged even when another country has providers."""
        # Given
        respond(WATCH_PROVIDERS_PAYLOAD)

        # When
        with caplog.at_level(logging.DEBUG, logger="tmdb_curated.services.curated.tv"):
            providers = tv_get_watch_providers(1396, ["GB", "FR"]).data

        # Then
        assert list(providers.results) == ["GB"]
        assert "No watch providers for show 1396 in ['FR']" in caplog.text
