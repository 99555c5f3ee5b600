"""
CLI Context Management Module

Global CLI state (log level and JSON output mode) held in a Pydantic
model behind a ContextVar, set by the main callback and read by the
command handlers.
"""

from __future__ import annotations

import contextvars
from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """
    CLI context model for managing global state.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output in JSON format
    """

    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )

    json_output: bool = Field(
        default=False,
        description="Whether to output in JSON format",
    )

    def is_json_output_enabled(self) -> bool:
        """Check if JSON output is enabled."""
        return self.json_output


# Global context variable for thread-safe access
cli_context_var: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """
    Get the current CLI context.

    Returns:
        CliContext: Current CLI context, or a default one when the main
        callback has not run (e.g. handlers called directly)
    """
    context = cli_context_var.get()
    if context is None:
        return CliContext()
    return context


def set_cli_context(context: CliContext) -> None:
    """Set the current CLI context."""
    cli_context_var.set(context)


def clear_cli_context() -> None:
    """Clear the current CLI context."""
    cli_context_var.set(None)
