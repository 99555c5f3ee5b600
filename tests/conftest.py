"""
Pytest configuration and shared fixtures for tmdb_curated tests.

No test touches the network: the shared HTTP session is replaced by a
Mock and the runtime configuration is injected directly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from tmdb_curated.cli.common.context import clear_cli_context
from tmdb_curated.config.manager import TMDBRuntimeConfig, tmdb_config

# Set environment variables BEFORE any settings are loaded (for CI without .env)
if "TMDB_API_KEY" not in os.environ:
    os.environ["TMDB_API_KEY"] = "test_api_key_for_ci_testing_only"  # pragma: allowlist secret

TEST_API_KEY = "test-key"  # pragma: allowlist secret
API_URL = "https://api.themoviedb.org/3"
SECURE_IMG_URL = "https://image.tmdb.org/t/p/"


def make_response(
    json_data: Any = None,
    *,
    status_code: int = 200,
    reason: str = "OK",
    url: str = f"{API_URL}/test?api_key={TEST_API_KEY}",
) -> Mock:
    """Build a Mock standing in for a requests.Response.

    Non-2xx status codes make ``raise_for_status`` raise HTTPError.
    """
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.json.return_value = json_data if json_data is not None else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} {reason}",
            response=response,
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None, None, None]:
    """Drop the runtime TMDB configuration and CLI context after each test."""
    yield
    tmdb_config.reset()
    clear_cli_context()

    # CLI runs configure the package logger; hand records back to caplog
    package_logger = logging.getLogger("tmdb_curated")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def runtime_config() -> TMDBRuntimeConfig:
    """Inject an initialized runtime configuration with the default genre tables."""
    config = TMDBRuntimeConfig(
        api_key=TEST_API_KEY,
        api_url=API_URL,
        secure_img_url=SECURE_IMG_URL,
    )
    tmdb_config._config = config
    return config


@pytest.fixture
def mock_session(mocker) -> Mock:
    """Replace the shared requests session used by the HTTP layer."""
    session = Mock(spec=requests.Session)
    mocker.patch("tmdb_curated.services.http.get_session", return_value=session)
    return session


@pytest.fixture
def respond(mock_session: Mock):
    """Queue JSON payloads to be returned by consecutive session.get calls.

    Example:
        >>> respond({"results": []})
    """

    def _respond(*payloads: Any, url: str | None = None) -> Mock:
        responses = [
            make_response(payload, url=url) if url else make_response(payload)
            for payload in payloads
        ]
        mock_session.get.side_effect = responses
        return mock_session

    return _respond


def called_params(session: Mock, call_index: int = 0) -> dict[str, Any]:
    """Query parameters passed to the n-th session.get call."""
    return session.get.call_args_list[call_index].kwargs["params"]


def called_url(session: Mock, call_index: int = 0) -> str:
    return session.get.call_args_list[call_index].args[0]


# Upstream payload fixtures (trimmed TMDB responses)

MOVIE_SEARCH_PAYLOAD: dict[str, Any] = {
    "page": 1,
    "total_pages": 2,
    "total_results": 23,
    "results": [
        {
            "id": 348,
            "title": "Alien",
            "overview": "During its return to the earth...",
            "popularity": 55.3,
            "original_language": "en",
            "release_date": "1979-05-25",
            "poster_path": "/vfrQk5IPloGg1v9Rzbh2Eg3VGyM.jpg",
            "backdrop_path": "/AmR3JG1VQVxU8TfAvljUhfSFUOx.jpg",
            "genre_ids": [27, 878, 99999],
        },
        {
            "id": 679,
            "title": "Aliens",
            "overview": "",
            "popularity": 40.1,
            "original_language": "en",
            "release_date": "",
            "poster_path": None,
            "backdrop_path": None,
            "genre_ids": [],
        },
    ],
}

MOVIE_DETAILS_PAYLOAD: dict[str, Any] = {
    "id": 348,
    "title": "Alien",
    "tagline": "In space no one can hear you scream.",
    "overview": "During its return to the earth...",
    "status": "Released",
    "runtime": 117,
    "budget": 11000000,
    "revenue": 104931801,
    "release_date": "1979-05-25",
    "poster_path": "/vfrQk5IPloGg1v9Rzbh2Eg3VGyM.jpg",
    "backdrop_path": None,
    "imdb_id": "tt0078748",
    "genres": [{"id": 27, "name": "Horror"}, {"id": 878, "name": "Science Fiction"}],
    "videos": {
        "results": [
            {
                "id": "5a8c",
                "key": "LjLamj-b0I8",
                "name": "Alien (1979) Trailer",
                "site": "YouTube",
                "size": 1080,
                "type": "Trailer",
                "iso_639_1": "en",
                "iso_3166_1": "US",
            },
            {
                "id": "5b9d",
                "key": "123456",
                "name": "Featurette",
                "site": "Vimeo",
                "size": 720,
                "type": "Featurette",
                "iso_639_1": "en",
                "iso_3166_1": "US",
            },
        ],
    },
}

IMAGES_PAYLOAD: dict[str, Any] = {
    "id": 348,
    "posters": [
        {"file_path": "/en_poster.jpg", "iso_639_1": "en", "vote_average": 5.3},
        {"file_path": "/de_poster.jpg", "iso_639_1": "de", "vote_average": 5.9},
        {"file_path": "/en_poster2.jpg", "iso_639_1": "en", "vote_average": 5.1},
    ],
    "backdrops": [
        {"file_path": "/backdrop.jpg", "iso_639_1": None, "vote_average": 5.0},
    ],
}

CREDITS_PAYLOAD: dict[str, Any] = {
    "id": 348,
    "cast": [
        {
            "id": 10205,
            "name": "Sigourney Weaver",
            "character": "Ellen Ripley",
            "credit_id": "52fe4239c3a36847f800b5a1",
            "gender": 1,
            "profile_path": "/wTSnfktNBLd6kwQxgvkqYw6vEon.jpg",
            "order": 0,
        },
    ],
    "crew": [
        {
            "id": 578,
            "name": "Ridley Scott",
            "credit_id": "52fe4239c3a36847f800b5c5",
            "job": "Director",
            "department": "Directing",
            "gender": 2,
            "profile_path": None,
        },
    ],
}

WATCH_PROVIDERS_PAYLOAD: dict[str, Any] = {
    "id": 348,
    "results": {
        "US": {
            "link": "https://www.themoviedb.org/movie/348-alien/watch?locale=US",
            "flatrate": [
                {
                    "provider_id": 337,
                    "provider_name": "Disney Plus",
                    "display_priority": 1,
                    "logo_path": "/7rwgEs15tFwyR9NPQ5vpzxTj19Q.jpg",
                },
            ],
            "rent": [
                {
                    "provider_id": 2,
                    "provider_name": "Apple TV",
                    "display_priority": 4,
                    "logo_path": "/peURlLlr8jggOwK53fJ5wdQl05y.jpg",
                },
            ],
        },
        "GB": {
            "link": "https://www.themoviedb.org/movie/348-alien/watch?locale=GB",
            "buy": [
                {
                    "provider_id": 10,
                    "provider_name": "Amazon Video",
                    "display_priority": 6,
                    "logo_path": "/5NyLm42TmCqCMOZFvH4fcoSNKEW.jpg",
                },
            ],
        },
    },
}

TV_SEARCH_PAYLOAD: dict[str, Any] = {
    "page": 1,
    "total_pages": 1,
    "total_results": 1,
    "results": [
        {
            "id": 1396,
            "name": "Breaking Bad",
            "original_name": "Breaking Bad",
            "overview": "A high school chemistry teacher...",
            "first_air_date": "2008-01-20",
            "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
            "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
            "genre_ids": [18, 80],
            "popularity": 318.2,
            "original_language": "en",
        },
    ],
}

TV_DETAILS_PAYLOAD: dict[str, Any] = {
    "id": 1396,
    "name": "Breaking Bad",
    "overview": "A high school chemistry teacher...",
    "status": "Ended",
    "tagline": "Remember my name",
    "popularity": 318.2,
    "episode_run_time": [45, 47, 48],
    "first_air_date": "2008-01-20",
    "last_air_date": "2013-09-29",
    "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
    "backdrop_path": None,
    "homepage": "https://www.sonypictures.com/tv/breakingbad",
    "number_of_episodes": 62,
    "number_of_seasons": 5,
    "genres": [{"id": 18, "name": "Drama"}],
    "seasons": [
        {
            "id": 3572,
            "season_number": 1,
            "name": "Season 1",
            "overview": "",
            "poster_path": "/1BP4xYv9ZG4ZVHkL7ocOziBbSYH.jpg",
            "episode_count": 7,
            "air_date": "2008-01-20",
        },
    ],
    "external_ids": {
        "imdb_id": "tt0903747",
        "tvdb_id": 81189,
        "tvrage_id": 18164,
        "facebook_id": "BreakingBad",
        "instagram_id": "breakingbad",
        "twitter_id": "BreakingBad",
    },
}

SEASON_PAYLOAD: dict[str, Any] = {
    "id": 3572,
    "season_number": 1,
    "name": "Season 1",
    "overview": "High school chemistry teacher Walter White's life...",
    "poster_path": "/1BP4xYv9ZG4ZVHkL7ocOziBbSYH.jpg",
    "air_date": "2008-01-20",
    "episodes": [
        {
            "id": 62085,
            "name": "Pilot",
            "episode_number": 1,
            "season_number": 1,
            "overview": "When an unassuming high school chemistry teacher...",
            "air_date": "2008-01-20",
            "runtime": 59,
            "still_path": "/ydlY3iPfeOAvu8gVqrxPoMvzNCn.jpg",
            "vote_average": 8.3,
        },
    ],
}

PERSON_SEARCH_PAYLOAD: dict[str, Any] = {
    "page": 1,
    "total_pages": 1,
    "total_results": 2,
    "results": [
        {
            "id": 2,
            "name": "Mark Hamill",
            "popularity": 12.5,
            "profile_path": "/2ZulC2Ccq1yv3pemusks6Zlfy2s.jpg",
            "known_for": [
                {
                    "id": 11,
                    "media_type": "movie",
                    "title": "Star Wars",
                    "poster_path": "/6FfCtAuVAW8XJjZ7eWeLibRLWTw.jpg",
                    "backdrop_path": None,
                },
                {
                    "id": 2190,
                    "media_type": "tv",
                    "name": "Batman: The Animated Series",
                    "poster_path": None,
                    "backdrop_path": None,
                },
            ],
        },
        {
            "id": 1,
            "name": "George Lucas",
            "popularity": 30.1,
            "profile_path": None,
            "known_for": [],
        },
    ],
}

PERSON_DETAILS_PAYLOAD: dict[str, Any] = {
    "id": 10205,
    "name": "Sigourney Weaver",
    "birthday": "1949-10-08",
    "deathday": None,
    "known_for_department": "Acting",
    "biography": "Susan Alexandra Weaver...",
    "place_of_birth": "Leroy Hospital, New York City, New York, USA",
    "imdb_id": "nm0000244",
    "profile_path": "/wTSnfktNBLd6kwQxgvkqYw6vEon.jpg",
}

COMBINED_CREDITS_PAYLOAD: dict[str, Any] = {
    "id": 10205,
    "cast": [
        {
            "id": 348,
            "media_type": "movie",
            "title": "Alien",
            "overview": "During its return to the earth...",
            "release_date": "1979-05-25",
            "credit_id": "52fe4239c3a36847f800b5a1",
            "genre_ids": [27, 878],
            "poster_path": "/vfrQk5IPloGg1v9Rzbh2Eg3VGyM.jpg",
            "backdrop_path": None,
            "original_language": "en",
            "character": "Ellen Ripley",
        },
        {
            "id": 1408,
            "media_type": "tv",
            "name": "The Defenders",
            "overview": "",
            "first_air_date": "2017-08-18",
            "credit_id": "57ab0bd8c3a36873e5000e1f",
            "genre_ids": [10759],
            "poster_path": None,
            "backdrop_path": None,
            "original_language": "en",
            "character": "Alexandra",
            "episode_count": 8,
        },
    ],
    "crew": [
        {
            "id": 9999,
            "media_type": "movie",
            "title": "Some Production",
            "release_date": "2001-01-01",
            "credit_id": "abc",
            "genre_ids": [18],
            "job": "Producer",
            "department": "Production",
        },
    ],
}
