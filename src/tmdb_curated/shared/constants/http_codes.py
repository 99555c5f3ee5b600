"""HTTP Status Code Constants.

This module contains HTTP status code constants used when mapping
TMDB transport failures to error codes.
"""


class HTTPStatusCodes:
    """HTTP status code constants."""

    # 4xx Client Errors
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429

    @staticmethod
    def is_client_error(code: int) -> bool:
        """Check if status code indicates client error (4xx)."""
        return 400 <= code < 500

    @staticmethod
    def is_server_error(code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= code < 600
