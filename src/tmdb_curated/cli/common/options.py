"""
Reusable Typer Options Module

Option definitions shared by the main callback and the commands, so
flags and help texts stay consistent.
"""

from __future__ import annotations

import typer

from tmdb_curated.shared.constants import CLIDefaults, CLIHelp, CLIOptions


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=CLIDefaults.VERSION))
        raise typer.Exit


log_level_option = typer.Option(
    CLIOptions.LOG_LEVEL,
    case_sensitive=False,
    help=CLIHelp.LOG_LEVEL_HELP,
)

json_output_option = typer.Option(
    CLIOptions.JSON,
    help=CLIHelp.JSON_HELP,
)

version_option = typer.Option(
    CLIOptions.VERSION,
    CLIOptions.VERSION_SHORT,
    callback=version_callback,
    help=CLIHelp.VERSION_HELP,
    is_eager=True,
)

page_option = typer.Option(
    CLIOptions.PAGE,
    CLIOptions.PAGE_SHORT,
    min=1,
    help=CLIHelp.PAGE_HELP,
)
