"""
tmdb_curated Constants Module

Centralized constants for the TMDB wrapper. All magic values (URLs,
endpoint templates, image sizes, genre defaults) live here.
"""

from .api import (
    APIConfig,
    ExternalLinks,
    ImageSizes,
    MediaType,
    TMDBConfig,
    TMDBEndpoints,
)
from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from .genres import (
    DEFAULT_MOVIE_GENRES,
    DEFAULT_TV_GENRES,
    CompareType,
    DiscoverSortBy,
)
from .http_codes import HTTPStatusCodes
from .logging import LogContextKeys, Logging
from .tmdb_messages import TMDBErrorMessages, TMDBOperationNames

__all__ = [
    "DEFAULT_MOVIE_GENRES",
    "DEFAULT_TV_GENRES",
    "APIConfig",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "CompareType",
    "DiscoverSortBy",
    "ExternalLinks",
    "HTTPStatusCodes",
    "ImageSizes",
    "LogContextKeys",
    "Logging",
    "MediaType",
    "TMDBConfig",
    "TMDBEndpoints",
    "TMDBErrorMessages",
    "TMDBOperationNames",
]
