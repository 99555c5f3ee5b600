"""Dataclass serialization utilities for tmdb_curated.

Converts curated response dataclasses into JSON-serializable dictionaries
for CLI output and for consumers that want plain data.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert a dataclass instance to a dictionary.

    Supports:
    - Nested dataclasses, lists and dicts
    - date/datetime -> ISO 8601 string
    - Enum -> value

    Args:
        obj: Dataclass instance to convert

    Returns:
        Dictionary representation of the dataclass

    Raises:
        TypeError: If obj is not a dataclass instance

    Example:
        >>> from tmdb_curated.shared.models import WatchProvider
        >>> to_dict(WatchProvider(provider_id=8, provider="Netflix"))
        {'provider_id': 8, 'provider': 'Netflix', 'display_priority': 0, 'logo_url': ''}
    """
    if not is_dataclass(obj) or isinstance(obj, type):
        error_msg = f"{type(obj).__name__} is not a dataclass instance"
        raise TypeError(error_msg)

    return {
        field.name: _convert_to_dict_recursive(getattr(obj, field.name))
        for field in fields(obj)
    }


def _convert_to_dict_recursive(obj: Any) -> Any:
    """Recursively convert objects to JSON-serializable format."""
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    # datetime is a date subclass, both serialize the same way
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.value

    if is_dataclass(obj) and not isinstance(obj, type):
        return to_dict(obj)

    if isinstance(obj, dict):
        return {str(key): _convert_to_dict_recursive(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_convert_to_dict_recursive(item) for item in obj]

    return str(obj)
