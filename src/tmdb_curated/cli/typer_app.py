"""
tmdb-curated Typer CLI Application

Command line front end over the curated TMDB calls. Results are printed
as Rich tables, or as a JSON envelope with ``--json``.
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from tmdb_curated.cli.common.context import CliContext, LogLevel, set_cli_context
from tmdb_curated.cli.common.options import (
    json_output_option,
    log_level_option,
    page_option,
    version_option,
)
from tmdb_curated.cli.movie_handler import (
    handle_discover_movies_command,
    handle_movie_command,
    handle_movie_search_command,
)
from tmdb_curated.cli.person_handler import handle_person_command, handle_person_search_command
from tmdb_curated.cli.tv_handler import handle_tv_command, handle_tv_search_command
from tmdb_curated.shared.constants import CLICommands, CLIDefaults, CLIHelp, CLIOptions

app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Annotated[LogLevel, log_level_option] = LogLevel.WARNING,
    json_output: Annotated[bool, json_output_option] = False,
    version: Annotated[bool, version_option] = False,
) -> None:
    """Query The Movie Database (TMDB) and print curated results."""
    set_cli_context(CliContext(log_level=log_level, json_output=json_output))


@app.command(CLICommands.MOVIE_SEARCH)
def movie_search_command(
    query: Annotated[str, typer.Argument(help=CLIHelp.QUERY_HELP)],
    page: Annotated[int, page_option] = 1,
) -> None:
    """
    Search movies by title.

    Examples:
        tmdb-curated movie-search "The Thing"
        tmdb-curated --json movie-search alien --page 2
    """
    handle_movie_search_command(query, page)


@app.command(CLICommands.MOVIE)
def movie_command(
    movie_id: Annotated[int, typer.Argument(help=CLIHelp.MOVIE_ID_HELP)],
    videos: Annotated[bool, typer.Option(CLIOptions.VIDEOS, help=CLIHelp.VIDEOS_HELP)] = False,
    region: Annotated[str, typer.Option(CLIOptions.REGION, help=CLIHelp.REGION_HELP)] = CLIDefaults.DEFAULT_COUNTRY,
) -> None:
    """
    Show the details of a movie and where to watch it.

    Examples:
        tmdb-curated movie 348 --videos
    """
    handle_movie_command(movie_id, videos=videos, region=region)


@app.command(CLICommands.TV_SEARCH)
def tv_search_command(
    query: Annotated[str, typer.Argument(help=CLIHelp.QUERY_HELP)],
    page: Annotated[int, page_option] = 1,
) -> None:
    """Search TV shows by name."""
    handle_tv_search_command(query, page)


@app.command(CLICommands.TV)
def tv_command(
    show_id: Annotated[int, typer.Argument(help=CLIHelp.SHOW_ID_HELP)],
    season: Annotated[Optional[int], typer.Option(CLIOptions.SEASON, min=0, help=CLIHelp.SEASON_HELP)] = None,
) -> None:
    """
    Show the details of a TV show.

    Examples:
        tmdb-curated tv 1396 --season 1
    """
    handle_tv_command(show_id, season=season)


@app.command(CLICommands.PERSON_SEARCH)
def person_search_command(
    name: Annotated[str, typer.Argument(help=CLIHelp.QUERY_HELP)],
    page: Annotated[int, page_option] = 1,
) -> None:
    """Search people by name, most popular first."""
    handle_person_search_command(name, page)


@app.command(CLICommands.PERSON)
def person_command(
    person_id: Annotated[int, typer.Argument(help=CLIHelp.PERSON_ID_HELP)],
) -> None:
    """Show the biography of a person."""
    handle_person_command(person_id)


@app.command(CLICommands.DISCOVER_MOVIES)
def discover_movies_command(
    genre: Annotated[Optional[list[int]], typer.Option(CLIOptions.GENRE, help=CLIHelp.GENRE_HELP)] = None,
    year: Annotated[Optional[int], typer.Option(CLIOptions.YEAR, help=CLIHelp.YEAR_HELP)] = None,
    sort_by: Annotated[Optional[str], typer.Option(CLIOptions.SORT_BY, help=CLIHelp.SORT_BY_HELP)] = None,
    provider: Annotated[Optional[list[int]], typer.Option(CLIOptions.PROVIDER, help=CLIHelp.PROVIDER_HELP)] = None,
    region: Annotated[Optional[str], typer.Option(CLIOptions.REGION, help=CLIHelp.REGION_HELP)] = None,
    page: Annotated[int, page_option] = 1,
) -> None:
    """
    Discover movies matching genre, year and watch provider filters.

    Examples:
        tmdb-curated discover-movies --genre 28 --genre 12 --year 1999
        tmdb-curated discover-movies --provider 8 --region GB --sort-by vote_average.desc
    """
    handle_discover_movies_command(
        genres=genre or [],
        year=year,
        sort_by=sort_by,
        providers=provider or [],
        region=region,
        page=page,
    )


if __name__ == "__main__":
    app()
