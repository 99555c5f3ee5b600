"""
JSON Output Formatter for the tmdb-curated CLI

Produces the machine-readable envelope printed when ``--json`` is given.
"""

from __future__ import annotations

from dataclasses import is_dataclass
from datetime import datetime, timezone
from typing import Any

import orjson
import typer

from tmdb_curated.shared.utils import to_dict


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """
    Format command output as JSON.

    Args:
        success: Whether the command executed successfully
        command: The command name (e.g., "movie-search")
        data: The command's output data; dataclasses are converted to dicts
        errors: List of error messages
        warnings: List of warning messages

    Returns:
        JSON-encoded bytes ready for output

    Example:
        >>> output = format_json_output(
        ...     success=True,
        ...     command="movie",
        ...     data={"id": 348, "title": "Alien"},
        ... )
        >>> print(output.decode())
        {
          "command": "movie",
          "data": {
            "id": 348,
            "title": "Alien"
          },
          "errors": [],
          "success": true,
          "timestamp": "2024-10-03T10:30:00+00:00",
          "warnings": []
        }
    """
    if errors is None:
        errors = []
    if warnings is None:
        warnings = []

    # If there are errors, success should be False
    if errors:
        success = False

    json_data = {
        "success": success,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": safe_json_serialize(data),
        "errors": errors,
        "warnings": warnings,
    }

    try:
        return orjson.dumps(
            json_data,
            option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
        )
    except (TypeError, ValueError) as e:
        error_data = {
            "success": False,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "command": command,
            "data": None,
            "errors": [f"JSON serialization failed: {e!s}"],
            "warnings": [],
        }
        return orjson.dumps(
            error_data,
            option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
        )


def safe_json_serialize(obj: Any) -> Any:
    """
    Convert an object to a JSON-serializable structure.

    Curated dataclasses go through ``to_dict``; containers are converted
    element-wise and anything unknown is rendered with ``str``.
    """
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if is_dataclass(obj) and not isinstance(obj, type):
        return to_dict(obj)
    if isinstance(obj, (list, tuple)):
        return [safe_json_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): safe_json_serialize(v) for k, v in obj.items()}
    return str(obj)


def format_success_output(command: str, data: Any) -> bytes:
    """Convenience function to format successful command output."""
    return format_json_output(success=True, command=command, data=data)


def format_error_output(command: str, errors: list[str], data: Any | None = None) -> bytes:
    """Convenience function to format error output."""
    return format_json_output(success=False, command=command, data=data, errors=errors)


def write_json_output(output: bytes) -> None:
    """Print an encoded JSON envelope on stdout."""
    typer.echo(output.decode("utf-8"))
