"""
Structured logging for tmdb_curated.

Helpers that record operation fallbacks, successes and TMDB calls as
structured log records, plus a logger factory with a Rich console handler
or a JSON stream handler.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from tmdb_curated.shared.constants import LogContextKeys, Logging
from tmdb_curated.shared.errors import ErrorContext, TMDBCuratedError


class StructuredFormatter(logging.Formatter):
    """Formatter emitting one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in ("error_code", "context", "operation", "duration_ms", "result_info"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _create_rich_console() -> Console:
    """Create the Rich console used by the console handler."""
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
            "log.message": "white",
            "log.path": "dim blue",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = Logging.ROOT_LOGGER,
    level: str = Logging.DEFAULT_LEVEL,
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    Configure a logger for console (and optionally file) output.

    Args:
        name: Logger name (default: "tmdb_curated")
        level: Log level name (default: "INFO")
        log_file: Optional path of a JSON-lines log file
        use_rich_console: Use a Rich handler instead of JSON on the console

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if use_rich_console:
        console = _create_rich_console()
        handler: logging.Handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format=Logging.CONSOLE_TIME_FORMAT,
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    # File output is always JSON
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def _context_to_dict(context: dict[str, Any] | ErrorContext | None) -> dict[str, Any]:
    if context is None:
        return {}
    if isinstance(context, ErrorContext):
        return context.safe_dict()
    return dict(context)


def log_operation_warning(
    logger: logging.Logger,
    error: TMDBCuratedError,
    fallback: str,
    operation: str | None = None,
) -> None:
    """Record a recoverable failure and what was used instead."""
    logger.warning(
        "%s; using %s",
        error.message,
        fallback,
        extra={
            "error_code": error.code.name,
            "context": error.context.safe_dict(),
            "operation": operation or error.context.operation,
        },
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
    context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """
    Record a successful operation at debug level.

    Args:
        logger: Logger instance
        operation: Operation name
        duration_ms: Elapsed time in milliseconds
        result_info: Summary of the result
        context: Context information
    """
    logger.debug(
        "Operation '%s' completed successfully",
        operation,
        extra={
            "operation": operation,
            "duration_ms": duration_ms,
            "result_info": result_info or {},
            "context": _context_to_dict(context),
        },
    )


def log_api_call(
    logger: logging.Logger,
    endpoint: str,
    method: str = "GET",
    status_code: int | None = None,
    duration_ms: float | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """
    Record one TMDB call.

    Only the endpoint path is logged, never the query string, so the
    API key does not reach log output.

    Args:
        logger: Logger instance
        endpoint: Endpoint path, e.g. "/movie/550"
        method: HTTP method (default: "GET")
        status_code: HTTP status code, if a response was received
        duration_ms: Elapsed time in milliseconds
        context: Extra context
    """
    api_context: dict[str, Any] = {
        LogContextKeys.ENDPOINT: endpoint,
        LogContextKeys.METHOD: method,
    }

    if status_code:
        api_context[LogContextKeys.STATUS_CODE] = status_code
    if duration_ms is not None:
        api_context[LogContextKeys.DURATION_MS] = duration_ms
    if context:
        api_context.update(context)

    level = logging.DEBUG
    message = f"API call to {endpoint}"

    if status_code:
        if status_code >= 400:
            level = logging.WARNING
            message += f" failed with status {status_code}"
        else:
            message += f" succeeded with status {status_code}"

    logger.log(
        level,
        message,
        extra={
            "operation": "api_call",
            "context": api_context,
        },
    )


__all__ = [
    "StructuredFormatter",
    "log_api_call",
    "log_operation_success",
    "log_operation_warning",
    "setup_structured_logger",
]
