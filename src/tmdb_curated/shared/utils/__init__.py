"""Shared utilities."""

from tmdb_curated.shared.utils.dataclass_serialization import to_dict

__all__ = ["to_dict"]
