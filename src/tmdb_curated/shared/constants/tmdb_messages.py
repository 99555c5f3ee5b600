"""
TMDB API Error Messages Constants

Message templates used when TMDB calls fail, kept in one place so the
raw layer and the configuration manager report failures consistently.
"""


class TMDBErrorMessages:
    """TMDB API error message constants."""

    # Authentication errors
    AUTHENTICATION_FAILED = "TMDB API authentication failed"
    ACCESS_FORBIDDEN = "TMDB API access forbidden"

    # Rate limiting
    RATE_LIMIT_EXCEEDED = "TMDB API rate limit exceeded"

    # Client errors (4xx)
    NOT_FOUND = "TMDB resource not found"
    REQUEST_FAILED = "TMDB API request failed: {status_code}"
    CLIENT_ERROR = "TMDB API client error: {status_code}"

    # Server errors (5xx)
    SERVER_ERROR = "TMDB API server error: {status_code}"

    # Network errors
    TIMEOUT = "TMDB API request timeout"
    CONNECTION_FAILED = "TMDB API connection failed"
    INVALID_RESPONSE = "TMDB API returned a non-JSON response"

    # Configuration errors
    NOT_INITIALIZED = "TMDB Config not initialized. Call initialize() first."
    MISSING_API_KEY = (
        "TMDB API key not configured. Pass api_key to initialize() "
        "or set TMDB_API_KEY."
    )


class TMDBOperationNames:
    """TMDB operation name constants for logging."""

    API_CALL = "tmdb_api_call"
    INITIALIZE = "tmdb_initialize"


__all__ = [
    "TMDBErrorMessages",
    "TMDBOperationNames",
]
