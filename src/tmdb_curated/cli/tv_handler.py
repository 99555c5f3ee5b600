"""TV command handlers for the tmdb-curated CLI."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console

from tmdb_curated.cli.common.error_handler import handle_cli_errors
from tmdb_curated.cli.common.setup_decorator import setup_handler
from tmdb_curated.cli.helpers.render import print_season, print_tv_details, print_tv_results
from tmdb_curated.cli.json_formatter import format_success_output, write_json_output
from tmdb_curated.services.curated.tv import (
    tv_get_episodes,
    tv_get_show_details,
    tv_search_by_title,
)
from tmdb_curated.shared.constants import CLICommands, CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


@handle_cli_errors(command_name=CLICommands.TV_SEARCH)
@setup_handler()
def handle_tv_search_command(query: str, page: int, **kwargs: Any) -> int:
    """Search shows by name and print one page of results."""
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.TV_SEARCH))

    resp = tv_search_by_title(query, page)

    if console is None:
        write_json_output(format_success_output(CLICommands.TV_SEARCH, resp.data))
    else:
        print_tv_results(console, resp.data, title=f"Shows matching '{query}'")

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.TV_SEARCH))
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(command_name=CLICommands.TV)
@setup_handler()
def handle_tv_command(show_id: int, *, season: int | None, **kwargs: Any) -> int:
    """Print the details of a show, plus the episodes of ``season`` when given."""
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.TV))

    details = tv_get_show_details(show_id).data
    season_details = tv_get_episodes(show_id, season).data if season is not None else None

    if console is None:
        write_json_output(
            format_success_output(
                CLICommands.TV,
                {"details": details, "season": season_details},
            ),
        )
    else:
        print_tv_details(console, details)
        if season_details is not None:
            print_season(console, season_details)

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.TV))
    return CLIDefaults.EXIT_SUCCESS
