"""Movie command handlers for the tmdb-curated CLI."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console

from tmdb_curated.cli.common.error_handler import handle_cli_errors
from tmdb_curated.cli.common.setup_decorator import setup_handler
from tmdb_curated.cli.helpers.render import (
    print_movie_details,
    print_movie_results,
    print_watch_providers,
)
from tmdb_curated.cli.json_formatter import format_success_output, write_json_output
from tmdb_curated.services.curated.movies import (
    movie_discover,
    movie_get_details,
    movie_get_watch_providers,
    movie_search_by_title,
)
from tmdb_curated.shared.constants import CLICommands, CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


@handle_cli_errors(command_name=CLICommands.MOVIE_SEARCH)
@setup_handler()
def handle_movie_search_command(query: str, page: int, **kwargs: Any) -> int:
    """Search movies by title and print one page of results.

    Returns:
        Exit code (0 for success)
    """
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.MOVIE_SEARCH))

    resp = movie_search_by_title(query, page)

    if console is None:
        write_json_output(format_success_output(CLICommands.MOVIE_SEARCH, resp.data))
    else:
        print_movie_results(console, resp.data, title=f"Movies matching '{query}'")

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.MOVIE_SEARCH))
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(command_name=CLICommands.MOVIE)
@setup_handler()
def handle_movie_command(movie_id: int, *, videos: bool, region: str, **kwargs: Any) -> int:
    """Print the details of one movie and where it can be watched in ``region``."""
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.MOVIE))

    details = movie_get_details(movie_id, with_videos=videos).data
    providers = movie_get_watch_providers(movie_id, (region,)).data

    if console is None:
        write_json_output(
            format_success_output(
                CLICommands.MOVIE,
                {"details": details, "watch_providers": providers},
            ),
        )
    else:
        print_movie_details(console, details)
        print_watch_providers(console, providers)

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.MOVIE))
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(command_name=CLICommands.DISCOVER_MOVIES)
@setup_handler()
def handle_discover_movies_command(
    *,
    genres: list[int],
    year: int | None,
    sort_by: str | None,
    providers: list[int],
    region: str | None,
    page: int,
    **kwargs: Any,
) -> int:
    """Discover movies by genre, year and watch provider.

    Raises:
        DomainError: If the filters do not form valid discover criteria
    """
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.DISCOVER_MOVIES))

    criteria: dict[str, Any] = {"genres": genres, "watch_providers": providers}
    if year is not None:
        criteria["release_year"] = year
    if region:
        criteria["watch_regions"] = [region]
    if sort_by:
        criteria["sort_by"] = sort_by
    resp = movie_discover(criteria, page)

    if console is None:
        write_json_output(format_success_output(CLICommands.DISCOVER_MOVIES, resp.data))
    else:
        print_movie_results(console, resp.data, title="Discovered movies")

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.DISCOVER_MOVIES))
    return CLIDefaults.EXIT_SUCCESS
