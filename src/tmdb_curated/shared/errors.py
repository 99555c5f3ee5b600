"""tmdb_curated Error Handling Module

Structured error classes carrying an error code, a human-readable message,
context information and the underlying exception.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("api_key",)


class ErrorCode(str, Enum):
    """Error codes for tmdb_curated.

    This enum serves as the single source of truth for all error codes
    used throughout the library.
    """

    # TMDB API Errors
    TMDB_API_CONNECTION_ERROR = "TMDB_API_CONNECTION_ERROR"
    TMDB_API_AUTHENTICATION_ERROR = "TMDB_API_AUTHENTICATION_ERROR"
    TMDB_API_RATE_LIMIT_EXCEEDED = "TMDB_API_RATE_LIMIT_EXCEEDED"
    TMDB_API_REQUEST_FAILED = "TMDB_API_REQUEST_FAILED"
    TMDB_API_TIMEOUT = "TMDB_API_TIMEOUT"
    TMDB_API_SERVER_ERROR = "TMDB_API_SERVER_ERROR"
    TMDB_API_INVALID_RESPONSE = "TMDB_API_INVALID_RESPONSE"
    TMDB_API_MEDIA_NOT_FOUND = "TMDB_API_MEDIA_NOT_FOUND"

    # Validation Errors
    INVALID_DISCOVER_CRITERIA = "INVALID_DISCOVER_CRITERIA"

    # Configuration Errors
    CONFIG_MISSING = "CONFIG_MISSING"
    MISSING_CONFIG = "MISSING_CONFIG"
    INVALID_CONFIG = "INVALID_CONFIG"

    # CLI Errors
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so contexts serialize safely into log records.

    Attributes:
        operation: Optional operation name that caused the error
        endpoint: Optional TMDB endpoint path involved
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    endpoint: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict, dropping masked keys from additional_data.

        Args:
            mask_keys: Keys to drop. Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with a guaranteed ``additional_data`` key.

        Example:
            >>> ErrorContext(operation="search", additional_data={"api_key": "x"}).safe_dict()
            {'operation': 'search', 'additional_data': {}}
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        if self.endpoint is not None:
            data["endpoint"] = self.endpoint

        additional = self.additional_data or {}
        data["additional_data"] = {
            key: value for key, value in additional.items() if key not in mask_keys
        }
        return data


class TMDBCuratedError(Exception):
    """Base exception class for all tmdb_curated errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize TMDBCuratedError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(TMDBCuratedError):
    """Domain-specific errors.

    Raised when caller input violates a rule of the wrapper itself,
    e.g. an unknown discover sort key.
    """


class InfrastructureError(TMDBCuratedError):
    """Infrastructure-related errors.

    These errors occur when interacting with external systems
    like the network or the file system.
    """


class TMDBApiError(InfrastructureError):
    """A failed TMDB call.

    Carries the normalized transport failure: HTTP status, status text and
    the URL that was called, alongside the underlying exception.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        *,
        status: int | None = None,
        status_text: str | None = None,
        api_call: str | None = None,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.status = status
        self.status_text = status_text
        self.api_call = api_call

    @property
    def error(self) -> Exception | None:
        """The underlying transport exception."""
        return self.original_error

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "status": self.status,
                "status_text": self.status_text,
            },
        )
        return data


class ApplicationError(TMDBCuratedError):
    """Application-level errors.

    Raised for configuration and lifecycle problems such as using the
    runtime configuration before it was initialized.
    """


class SecurityError(TMDBCuratedError):
    """Security-related errors, e.g. a missing or malformed API key."""


class CliError(ApplicationError):
    """CLI-specific error with an exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_cli_error(
    message: str,
    command: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
) -> CliError:
    """Create a CLI error with context."""
    context = ErrorContext(
        operation="cli",
        additional_data={"command": command} if command else None,
    )
    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        message,
        context,
        original_error,
        command=command,
        exit_code=exit_code,
    )


__all__ = [
    "ApplicationError",
    "CliError",
    "DomainError",
    "ErrorCode",
    "ErrorContext",
    "InfrastructureError",
    "PrimitiveContextValue",
    "SecurityError",
    "TMDBApiError",
    "TMDBCuratedError",
    "create_cli_error",
]
