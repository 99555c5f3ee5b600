"""
CLI Error Handling Utilities

Maps exceptions raised by command handlers to ``CliError`` values, logs
them and prints them either as a JSON envelope or as a console message.
"""

from __future__ import annotations

import functools
import logging
import sys
from typing import Any, Callable, TypeVar

import typer

from tmdb_curated.cli.common.context import get_cli_context
from tmdb_curated.cli.json_formatter import format_error_output, write_json_output
from tmdb_curated.shared.constants import CLIDefaults
from tmdb_curated.shared.errors import (
    ApplicationError,
    CliError,
    DomainError,
    SecurityError,
    TMDBApiError,
    TMDBCuratedError,
    create_cli_error,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    error_context = _create_error_context(error, command, json_output=json_output)
    cli_error = _map_error_to_cli_error(error, command, error_context)
    _log_error(error, command, cli_error, error_context)
    _output_error(cli_error, error, command, error_context, json_output=json_output)

    return cli_error.exit_code


def _create_error_context(
    error: Exception,
    command: str,
    *,
    json_output: bool,
) -> dict[str, Any]:
    """Create structured error context for logging."""
    return {
        "command": command,
        "error_type": type(error).__name__,
        "json_output": json_output,
    }


def _map_error_to_cli_error(  # noqa: PLR0911
    error: Exception,
    command: str,
    error_context: dict[str, Any],
) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        error_context["error_code"] = error.code.value
        return error

    if isinstance(error, TMDBApiError):
        error_context["error_code"] = error.code.value
        if error.status is not None:
            error_context["status"] = error.status
        return create_cli_error(
            message=f"TMDB request failed: {error.message}",
            command=command,
            original_error=error,
        )

    if isinstance(error, SecurityError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"Security error: {error.message}",
            command=command,
            original_error=error,
        )

    if isinstance(error, (ApplicationError, DomainError)):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"Application error: {error.message}",
            command=command,
            original_error=error,
        )

    if isinstance(error, KeyboardInterrupt):
        error_context["interrupt_type"] = "user_interrupt"
        return create_cli_error(
            message="Command interrupted by user",
            command=command,
            original_error=error,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    if isinstance(error, (ValueError, KeyError, TypeError, AttributeError)):
        error_context["error_category"] = "data_processing"
        return create_cli_error(
            message=f"Data processing error: {error}",
            command=command,
            original_error=error,
        )

    error_context["error_category"] = "unexpected"
    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error,
    )


def _log_error(
    error: Exception,
    command: str,
    cli_error: CliError,
    error_context: dict[str, Any],
) -> None:
    """Log the error with structured context."""
    if isinstance(error, KeyboardInterrupt):
        logger.warning(
            "Command interrupted: %s",
            cli_error.message,
            extra={"context": error_context},
        )
    elif isinstance(error, TMDBCuratedError):
        # Expected failures: no traceback
        logger.error(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"error_code": error.code.value, "context": error_context},
        )
    else:
        logger.exception(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"context": error_context},
        )


def _output_error(
    cli_error: CliError,
    error: Exception,
    command: str,
    error_context: dict[str, Any],
    *,
    json_output: bool,
) -> None:
    """Output error message in appropriate format."""
    if json_output:
        original = cli_error.original_error
        error_code = original.code.value if isinstance(original, TMDBCuratedError) else cli_error.code.value
        write_json_output(
            format_error_output(
                command,
                [cli_error.message],
                data={
                    "error_code": error_code,
                    "error_type": type(error).__name__,
                    "exit_code": cli_error.exit_code,
                    "context": error_context,
                },
            ),
        )
    else:
        sys.stderr.write(f"Error: {cli_error.message}\n")


def handle_cli_errors(command_name: str) -> Callable[[F], F]:
    """Decorator turning handler exceptions into a printed error and ``typer.Exit``.

    Args:
        command_name: CLI command name used in output and logs

    Example:
        >>> @handle_cli_errors(command_name="movie")
        ... def handle_movie_command(movie_id, **kwargs):
        ...     return show_movie(movie_id)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (typer.Exit, typer.Abort):
                raise
            except (Exception, KeyboardInterrupt) as e:  # noqa: BLE001
                json_output = get_cli_context().is_json_output_enabled()
                exit_code = handle_cli_error(e, command_name, json_output=json_output)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator
