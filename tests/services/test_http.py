"""Tests for the HTTP transport used by all raw calls."""

from __future__ import annotations

import logging

import pytest
import requests

from conftest import API_URL, TEST_API_KEY, called_params, called_url, make_response
from tmdb_curated.config.manager import tmdb_config
from tmdb_curated.services import http
from tmdb_curated.services.http import api_tmdb, build_raw_error, call_tmdb
from tmdb_curated.shared.errors import ApplicationError, ErrorCode, TMDBApiError
from tmdb_curated.shared.models import RawResponse


class TestCallTmdb:
    """Test call_tmdb success paths and parameter handling."""

    def test_success_returns_data_and_final_url(self, mock_session):
        # Given
        final_url = f"{API_URL}/movie/348?api_key={TEST_API_KEY}"
        mock_session.get.return_value = make_response({"id": 348}, url=final_url)

        # When
        result = call_tmdb(f"{API_URL}/movie/348", {"api_key": TEST_API_KEY}, timeout=5)

        # Then
        assert isinstance(result, RawResponse)
        assert result.data == {"id": 348}
        assert result.api_call == final_url
        mock_session.get.assert_called_once_with(
            f"{API_URL}/movie/348",
            params={"api_key": TEST_API_KEY},
            timeout=5,
        )

    def test_params_drop_none_and_lowercase_booleans(self, mock_session):
        """None values are omitted; booleans are sent as 'true'/'false'."""
        mock_session.get.return_value = make_response({})

        call_tmdb(
            f"{API_URL}/search/movie",
            {"query": "Alien", "page": 1, "year": None, "include_adult": False, "video": True},
        )

        assert called_params(mock_session) == {
            "query": "Alien",
            "page": 1,
            "include_adult": "false",
            "video": "true",
        }

    def test_success_logs_endpoint_without_query(self, mock_session, caplog):
        mock_session.get.return_value = make_response({})

        with caplog.at_level(logging.DEBUG, logger="tmdb_curated.services.http"):
            call_tmdb(f"{API_URL}/movie/348", {"api_key": TEST_API_KEY})

        assert "API call to /3/movie/348 succeeded with status 200" in caplog.text
        assert TEST_API_KEY not in caplog.text


class TestCallTmdbErrors:
    """Test the mapping of transport failures to TMDBApiError."""

    @pytest.mark.parametrize(
        ("status_code", "reason", "expected_code"),
        [
            (401, "Unauthorized", ErrorCode.TMDB_API_AUTHENTICATION_ERROR),
            (403, "Forbidden", ErrorCode.TMDB_API_AUTHENTICATION_ERROR),
            (404, "Not Found", ErrorCode.TMDB_API_MEDIA_NOT_FOUND),
            (429, "Too Many Requests", ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED),
            (422, "Unprocessable Entity", ErrorCode.TMDB_API_REQUEST_FAILED),
            (500, "Internal Server Error", ErrorCode.TMDB_API_SERVER_ERROR),
            (503, "Service Unavailable", ErrorCode.TMDB_API_SERVER_ERROR),
        ],
    )
    def test_http_status_mapping(self, mock_session, status_code, reason, expected_code):
        # Given
        failed_url = f"{API_URL}/movie/0?api_key={TEST_API_KEY}"
        mock_session.get.return_value = make_response(
            {"status_message": reason},
            status_code=status_code,
            reason=reason,
            url=failed_url,
        )

        # When
        with pytest.raises(TMDBApiError) as exc_info:
            call_tmdb(f"{API_URL}/movie/0", {"api_key": TEST_API_KEY})

        # Then
        error = exc_info.value
        assert error.code == expected_code
        assert error.status == status_code
        assert error.status_text == reason
        assert error.api_call == failed_url
        assert isinstance(error.error, requests.HTTPError)
        assert error.context.endpoint == "/3/movie/0"
        assert error.context.additional_data["status_code"] == status_code

    def test_timeout_has_no_status_and_built_url(self, mock_session):
        """Without a response, api_call is the URL the request was built for."""
        mock_session.get.side_effect = requests.exceptions.Timeout("timed out")

        with pytest.raises(TMDBApiError) as exc_info:
            call_tmdb(f"{API_URL}/movie/348", {"api_key": TEST_API_KEY, "language": None})

        error = exc_info.value
        assert error.code == ErrorCode.TMDB_API_TIMEOUT
        assert error.status is None
        assert error.status_text is None
        assert error.api_call == f"{API_URL}/movie/348?api_key={TEST_API_KEY}"
        assert isinstance(error.error, requests.exceptions.Timeout)

    def test_connection_error(self, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TMDBApiError) as exc_info:
            call_tmdb(f"{API_URL}/configuration")

        assert exc_info.value.code == ErrorCode.TMDB_API_CONNECTION_ERROR
        assert exc_info.value.status is None

    def test_invalid_json_keeps_status(self, mock_session):
        """A 200 with an undecodable body is an invalid response."""
        response = make_response({})
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        mock_session.get.return_value = response

        with pytest.raises(TMDBApiError) as exc_info:
            call_tmdb(f"{API_URL}/movie/348")

        assert exc_info.value.code == ErrorCode.TMDB_API_INVALID_RESPONSE
        assert exc_info.value.status == 200
        assert exc_info.value.status_text == "OK"

    def test_failure_logs_warning_without_key(self, mock_session, caplog):
        mock_session.get.return_value = make_response({}, status_code=404, reason="Not Found")

        with caplog.at_level(logging.DEBUG, logger="tmdb_curated.services.http"):
            with pytest.raises(TMDBApiError):
                call_tmdb(f"{API_URL}/movie/0", {"api_key": TEST_API_KEY})

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "failed with status 404" in warnings[0].getMessage()
        assert TEST_API_KEY not in caplog.text

    def test_error_chains_original_exception(self, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TMDBApiError) as exc_info:
            call_tmdb(f"{API_URL}/configuration")

        assert exc_info.value.__cause__ is exc_info.value.error


class TestBuildRawError:
    """Test build_raw_error directly."""

    def test_unprepareable_url_gives_no_api_call(self):
        error = build_raw_error(
            requests.exceptions.InvalidURL("bad"),
            url="not a url",
            params={},
        )

        assert error.code == ErrorCode.TMDB_API_REQUEST_FAILED
        assert error.api_call is None
        assert error.status is None


class TestApiTmdb:
    """Test api_tmdb parameter merging against the runtime configuration."""

    def test_requires_initialization(self, mock_session):
        with pytest.raises(ApplicationError) as exc_info:
            api_tmdb("/movie/348")

        assert exc_info.value.code == ErrorCode.CONFIG_MISSING
        mock_session.get.assert_not_called()

    def test_merges_defaults_and_api_key(self, runtime_config, respond):
        # Given
        session = respond({"results": []})

        # When
        api_tmdb("/search/movie", {"query": "Alien", "page": 2})

        # Then
        assert called_url(session) == f"{API_URL}/search/movie"
        assert called_params(session) == {
            "query": "Alien",
            "page": 2,
            "include_adult": "false",
            "api_key": TEST_API_KEY,
        }
        assert session.get.call_args.kwargs["timeout"] == runtime_config.timeout

    def test_api_key_always_wins(self, runtime_config, respond):
        """A caller-supplied api_key or default param cannot replace the configured key."""
        tmdb_config.update_api_options(default_api_params={"api_key": "other", "region": "GB"})
        session = respond({})

        api_tmdb("/movie/popular", {"api_key": "caller"})

        params = called_params(session)
        assert params["api_key"] == TEST_API_KEY
        assert params["region"] == "GB"

    def test_default_params_override_caller_params(self, runtime_config, respond):
        tmdb_config.update_api_options(default_api_params={"include_adult": True})
        session = respond({})

        api_tmdb("/search/movie", {"query": "x", "include_adult": False})

        assert called_params(session)["include_adult"] == "true"


class TestSession:
    """Test the shared session lifecycle."""

    def test_session_is_shared_and_closable(self):
        http.close_session()

        first = http.get_session()
        second = http.get_session()

        assert first is second
        assert first.headers["Accept"] == "application/json"

        http.close_session()
        assert http.get_session() is not first
        http.close_session()
