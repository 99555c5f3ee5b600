"""Person command handlers for the tmdb-curated CLI."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console

from tmdb_curated.cli.common.error_handler import handle_cli_errors
from tmdb_curated.cli.common.setup_decorator import setup_handler
from tmdb_curated.cli.helpers.render import print_person_details, print_person_results
from tmdb_curated.cli.json_formatter import format_success_output, write_json_output
from tmdb_curated.services.curated.common import get_person_details, search_for_person_id
from tmdb_curated.shared.constants import CLICommands, CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


@handle_cli_errors(command_name=CLICommands.PERSON_SEARCH)
@setup_handler()
def handle_person_search_command(name: str, page: int, **kwargs: Any) -> int:
    """Search people by name, most popular first."""
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.PERSON_SEARCH))

    resp = search_for_person_id(name, page)

    if console is None:
        write_json_output(format_success_output(CLICommands.PERSON_SEARCH, resp.data))
    else:
        print_person_results(console, resp.data)

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.PERSON_SEARCH))
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(command_name=CLICommands.PERSON)
@setup_handler()
def handle_person_command(person_id: int, **kwargs: Any) -> int:
    console: Console | None = kwargs.get("console")
    logger_adapter = kwargs.get("logger_adapter", logger)
    logger_adapter.info(CLIMessages.COMMAND_STARTED.format(command=CLICommands.PERSON))

    details = get_person_details(person_id).data

    if console is None:
        write_json_output(format_success_output(CLICommands.PERSON, details))
    else:
        print_person_details(console, details)

    logger_adapter.info(CLIMessages.COMMAND_COMPLETED.format(command=CLICommands.PERSON))
    return CLIDefaults.EXIT_SUCCESS
