"""HTTP transport for raw TMDB calls.

Every raw call goes through ``call_tmdb`` (absolute URL) or ``api_tmdb``
(endpoint path resolved against the runtime configuration). Both return
a ``RawResponse`` or raise a ``TMDBApiError`` describing the transport
failure.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any
from urllib.parse import urlsplit

import requests

from tmdb_curated.config.manager import tmdb_config
from tmdb_curated.shared.constants import (
    HTTPStatusCodes,
    TMDBConfig,
    TMDBErrorMessages,
    TMDBOperationNames,
)
from tmdb_curated.shared.errors import ErrorCode, ErrorContext, TMDBApiError
from tmdb_curated.shared.logging import log_api_call
from tmdb_curated.shared.models import RawResponse

logger = logging.getLogger(__name__)

_session: requests.Session | None = None
_session_lock = threading.Lock()


def get_session() -> requests.Session:
    """Return the shared requests session, creating it on first use."""
    global _session  # noqa: PLW0603
    if _session is None:
        with _session_lock:
            if _session is None:
                session = requests.Session()
                session.headers.update(TMDBConfig.HEADERS)
                _session = session
    return _session


def close_session() -> None:
    """Close and drop the shared session."""
    global _session  # noqa: PLW0603
    with _session_lock:
        if _session is not None:
            _session.close()
            _session = None


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop None values and render booleans the way TMDB expects."""
    cleaned: dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        cleaned[key] = str(value).lower() if isinstance(value, bool) else value
    return cleaned


def _prepared_url(url: str, params: dict[str, Any]) -> str | None:
    try:
        return requests.Request("GET", url, params=params).prepare().url
    except requests.exceptions.RequestException:
        return None


def _classify_status(status_code: int) -> tuple[ErrorCode, str]:
    if status_code == HTTPStatusCodes.UNAUTHORIZED:
        return (
            ErrorCode.TMDB_API_AUTHENTICATION_ERROR,
            TMDBErrorMessages.AUTHENTICATION_FAILED,
        )
    if status_code == HTTPStatusCodes.FORBIDDEN:
        return (
            ErrorCode.TMDB_API_AUTHENTICATION_ERROR,
            TMDBErrorMessages.ACCESS_FORBIDDEN,
        )
    if status_code == HTTPStatusCodes.NOT_FOUND:
        return ErrorCode.TMDB_API_MEDIA_NOT_FOUND, TMDBErrorMessages.NOT_FOUND
    if status_code == HTTPStatusCodes.TOO_MANY_REQUESTS:
        return (
            ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED,
            TMDBErrorMessages.RATE_LIMIT_EXCEEDED,
        )
    if HTTPStatusCodes.is_client_error(status_code):
        return (
            ErrorCode.TMDB_API_REQUEST_FAILED,
            TMDBErrorMessages.CLIENT_ERROR.format(status_code=status_code),
        )
    if HTTPStatusCodes.is_server_error(status_code):
        return (
            ErrorCode.TMDB_API_SERVER_ERROR,
            TMDBErrorMessages.SERVER_ERROR.format(status_code=status_code),
        )
    return (
        ErrorCode.TMDB_API_REQUEST_FAILED,
        TMDBErrorMessages.REQUEST_FAILED.format(status_code=status_code),
    )


def build_raw_error(
    exception: requests.exceptions.RequestException,
    *,
    url: str,
    params: dict[str, Any],
    response: requests.Response | None = None,
) -> TMDBApiError:
    """Convert a requests exception into a TMDBApiError.

    ``api_call`` is the response URL when a response arrived, otherwise
    the URL the request was built for, otherwise None.
    """
    if exception.response is not None:
        response = exception.response
    endpoint = urlsplit(url).path

    if response is not None:
        status: int | None = response.status_code
        status_text: str | None = response.reason
        api_call = response.url or _prepared_url(url, params)
    else:
        status = None
        status_text = None
        api_call = _prepared_url(url, params)

    if isinstance(exception, requests.exceptions.JSONDecodeError):
        code, message = ErrorCode.TMDB_API_INVALID_RESPONSE, TMDBErrorMessages.INVALID_RESPONSE
    elif status is not None:
        code, message = _classify_status(status)
    elif isinstance(exception, requests.exceptions.Timeout):
        code, message = ErrorCode.TMDB_API_TIMEOUT, TMDBErrorMessages.TIMEOUT
    elif isinstance(exception, requests.exceptions.ConnectionError):
        code, message = ErrorCode.TMDB_API_CONNECTION_ERROR, TMDBErrorMessages.CONNECTION_FAILED
    else:
        code = ErrorCode.TMDB_API_REQUEST_FAILED
        message = TMDBErrorMessages.REQUEST_FAILED.format(status_code=str(exception))

    additional_data: dict[str, Any] = {"error_type": type(exception).__name__}
    if status is not None:
        additional_data["status_code"] = status

    return TMDBApiError(
        code=code,
        message=message,
        context=ErrorContext(
            operation=TMDBOperationNames.API_CALL,
            endpoint=endpoint,
            additional_data=additional_data,
        ),
        original_error=exception,
        status=status,
        status_text=status_text,
        api_call=api_call,
    )


def call_tmdb(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    timeout: float = TMDBConfig.DEFAULT_REQUEST_TIMEOUT,
) -> RawResponse:
    """GET an absolute TMDB URL.

    Args:
        url: Absolute URL, e.g. "https://api.themoviedb.org/3/movie/550"
        params: Query parameters; None values are dropped
        timeout: Request timeout in seconds

    Returns:
        RawResponse with the decoded JSON and the final URL

    Raises:
        TMDBApiError: On network failure, non-2xx status or invalid JSON
    """
    query = _clean_params(params)
    endpoint = urlsplit(url).path
    start_time = time.perf_counter()
    response: requests.Response | None = None

    try:
        response = get_session().get(url, params=query, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        error = build_raw_error(e, url=url, params=query, response=response)
        log_api_call(
            logger,
            endpoint,
            status_code=error.status,
            duration_ms=(time.perf_counter() - start_time) * 1000,
            context={"error_code": error.code.value},
        )
        raise error from e

    log_api_call(
        logger,
        endpoint,
        status_code=response.status_code,
        duration_ms=(time.perf_counter() - start_time) * 1000,
    )
    return RawResponse(data=data, api_call=response.url)


def api_tmdb(path: str, params: dict[str, Any] | None = None) -> RawResponse:
    """GET a TMDB endpoint path using the runtime configuration.

    The configured ``default_api_params`` and the API key are merged into
    ``params``; the API key always wins.

    Args:
        path: Endpoint path, e.g. "/search/movie"
        params: Endpoint-specific query parameters

    Returns:
        RawResponse with the decoded JSON and the final URL

    Raises:
        ApplicationError: If the runtime configuration is not initialized
        TMDBApiError: If the call fails
    """
    config = tmdb_config.get_config()
    query: dict[str, Any] = dict(params or {})
    query.update(config.api_options.default_api_params)
    query["api_key"] = config.api_key

    return call_tmdb(
        f"{config.api_url.rstrip('/')}{path}",
        query,
        timeout=config.timeout,
    )


__all__ = [
    "api_tmdb",
    "build_raw_error",
    "call_tmdb",
    "close_session",
    "get_session",
]
