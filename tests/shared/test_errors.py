"""
Tests for the tmdb_curated error hierarchy.

Covers ErrorContext coercion and masking, TMDBCuratedError formatting and
the TMDBApiError transport fields.
"""

from decimal import Decimal
from enum import Enum
from pathlib import Path

import pytest

from tmdb_curated.shared.errors import (
    ApplicationError,
    CliError,
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    TMDBApiError,
    TMDBCuratedError,
    create_cli_error,
)


class _Color(Enum):
    RED = "red"


class TestErrorContext:
    """Test cases for ErrorContext frozen dataclass."""

    def test_empty_context(self):
        """An empty context has no operation, endpoint or data."""
        context = ErrorContext()

        assert context.operation is None
        assert context.endpoint is None
        assert context.additional_data is None

    def test_additional_data_is_coerced_to_primitives(self):
        """Path, Enum and Decimal values are converted on construction."""
        context = ErrorContext(
            additional_data={
                "path": Path("/tmp/config.toml"),
                "color": _Color.RED,
                "ratio": Decimal("1.5"),
                "count": 3,
            },
        )

        assert context.additional_data == {
            "path": str(Path("/tmp/config.toml")),
            "color": "red",
            "ratio": 1.5,
            "count": 3,
        }

    def test_non_primitive_value_rejected(self):
        """Values that cannot be coerced raise TypeError."""
        with pytest.raises(TypeError, match="Cannot coerce"):
            ErrorContext(additional_data={"items": [1, 2]})

    def test_safe_dict_drops_api_key(self):
        """safe_dict never exports the API key."""
        # Given
        context = ErrorContext(
            operation="search",
            endpoint="/search/movie",
            additional_data={"api_key": "secret", "page": 1},
        )

        # When
        result = context.safe_dict()

        # Then
        assert result == {
            "operation": "search",
            "endpoint": "/search/movie",
            "additional_data": {"page": 1},
        }

    def test_safe_dict_custom_mask_keys(self):
        context = ErrorContext(additional_data={"token": "t", "api_key": "k"})

        assert context.safe_dict(mask_keys=("token",)) == {"additional_data": {"api_key": "k"}}

    def test_context_is_frozen(self):
        context = ErrorContext(operation="x")

        with pytest.raises(AttributeError):
            context.operation = "y"  # type: ignore[misc]


class TestTMDBCuratedError:
    """Test the base error class."""

    def test_str_contains_code_and_message(self):
        error = TMDBCuratedError(ErrorCode.CONFIG_MISSING, "broken")

        assert str(error) == "CONFIG_MISSING: broken"
        assert isinstance(error.context, ErrorContext)

    def test_to_dict(self):
        """to_dict includes the masked context and the original error text."""
        original = ValueError("bad value")
        error = ApplicationError(
            ErrorCode.INVALID_CONFIG,
            "Invalid configuration",
            ErrorContext(operation="load", additional_data={"api_key": "k"}),
            original,
        )

        assert error.to_dict() == {
            "code": "INVALID_CONFIG",
            "message": "Invalid configuration",
            "context": {"operation": "load", "additional_data": {}},
            "original_error": "bad value",
        }

    def test_hierarchy(self):
        assert issubclass(TMDBApiError, InfrastructureError)
        assert issubclass(CliError, ApplicationError)
        assert issubclass(DomainError, TMDBCuratedError)


class TestTMDBApiError:
    """Test the normalized transport error."""

    def test_transport_fields(self):
        """status, status_text, api_call and error are exposed."""
        # Given
        cause = RuntimeError("boom")

        # When
        error = TMDBApiError(
            ErrorCode.TMDB_API_MEDIA_NOT_FOUND,
            "TMDB resource not found",
            original_error=cause,
            status=404,
            status_text="Not Found",
            api_call="https://api.themoviedb.org/3/movie/0?api_key=k",
        )

        # Then
        assert error.status == 404
        assert error.status_text == "Not Found"
        assert error.api_call.endswith("/movie/0?api_key=k")
        assert error.error is cause

    def test_to_dict_adds_status(self):
        error = TMDBApiError(
            ErrorCode.TMDB_API_SERVER_ERROR,
            "TMDB API server error: 503",
            status=503,
            status_text="Service Unavailable",
        )

        data = error.to_dict()

        assert data["status"] == 503
        assert data["status_text"] == "Service Unavailable"
        assert data["code"] == "TMDB_API_SERVER_ERROR"

    def test_status_defaults_to_none(self):
        """Errors without a response carry no status."""
        error = TMDBApiError(ErrorCode.TMDB_API_TIMEOUT, "TMDB API request timeout")

        assert error.status is None
        assert error.status_text is None
        assert error.api_call is None


class TestErrorFactories:
    """Test the CLI error factory."""

    def test_create_cli_error(self):
        error = create_cli_error("failed", command="movie", exit_code=2)

        assert isinstance(error, CliError)
        assert error.command == "movie"
        assert error.exit_code == 2
        assert error.context.operation == "cli"
