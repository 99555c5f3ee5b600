"""CLI setup decorator module.

``setup_handler`` prepares every command handler: it configures logging
from the settings and the CLI context, initializes the runtime TMDB
configuration once per process and injects a Rich console (unless JSON
output is requested) and a LoggerAdapter carrying the command name.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from rich.console import Console

from tmdb_curated.cli.common.context import get_cli_context
from tmdb_curated.config.loader import get_config
from tmdb_curated.config.manager import tmdb_config
from tmdb_curated.shared.constants import Logging
from tmdb_curated.shared.logging import setup_structured_logger

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def configure_cli_logging() -> logging.Logger:
    """Configure the package logger from settings, CLI level taking precedence."""
    settings = get_config()
    context = get_cli_context()
    return setup_structured_logger(
        name=Logging.ROOT_LOGGER,
        level=context.log_level.value,
        log_file=settings.logging.file,
        use_rich_console=settings.logging.rich_console,
    )


def ensure_tmdb_initialized() -> None:
    """Initialize the runtime TMDB configuration from settings if needed.

    Raises:
        SecurityError: If no API key is configured
    """
    if tmdb_config.is_initialized:
        return
    tmdb_config.initialize(settings=get_config())


def setup_handler() -> Callable[[F], F]:
    """Decorator for standardized CLI handler initialization.

    The decorated function receives as keyword arguments:
    - console: Rich Console instance, None in JSON mode
    - logger_adapter: LoggerAdapter with command context

    Note:
        Apply this decorator inside ``handle_cli_errors`` so setup
        failures (e.g. a missing API key) are reported like any other
        command error.

    Example:
        >>> @handle_cli_errors(command_name="movie")
        ... @setup_handler()
        ... def handle_movie_command(movie_id, **kwargs):
        ...     ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            configure_cli_logging()
            ensure_tmdb_initialized()

            is_json_mode = get_cli_context().is_json_output_enabled()
            kwargs["console"] = None if is_json_mode else Console()
            kwargs["logger_adapter"] = logging.LoggerAdapter(
                logger,
                extra={
                    "command": func.__name__,
                    "operation": func.__name__,
                },
            )

            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
