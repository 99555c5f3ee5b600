"""Rich console rendering of curated results."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from tmdb_curated.shared.constants import CLIMessages
from tmdb_curated.shared.models import (
    MovieDetails,
    MovieSummary,
    PagedResults,
    PersonDetails,
    PersonSearchItem,
    TVSeasonDetails,
    TVShowDetails,
    TVSummary,
    WatchProviders,
)


def _print_page_footer(console: Console, paged: PagedResults) -> None:
    console.print(
        CLIMessages.PAGE_FOOTER.format(
            page=paged.page,
            total_pages=paged.total_pages,
            total_results=paged.total_results,
        ),
        style="dim",
    )


def print_movie_results(console: Console, paged: PagedResults[MovieSummary], title: str) -> None:
    """Display paged movie summaries in a table."""
    if not paged.results:
        console.print(CLIMessages.NO_RESULTS)
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Released", style="blue")
    table.add_column("Genres", style="magenta")
    table.add_column("Popularity", style="yellow", justify="right")

    for movie in paged.results:
        table.add_row(
            str(movie.id),
            movie.title,
            movie.release_date.formatted or "-",
            ", ".join(movie.genres) or "-",
            f"{movie.popularity:.1f}",
        )

    console.print(table)
    _print_page_footer(console, paged)


def print_tv_results(console: Console, paged: PagedResults[TVSummary], title: str) -> None:
    """Display paged show summaries in a table."""
    if not paged.results:
        console.print(CLIMessages.NO_RESULTS)
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("First aired", style="blue")
    table.add_column("Genres", style="magenta")
    table.add_column("Popularity", style="yellow", justify="right")

    for show in paged.results:
        table.add_row(
            str(show.id),
            show.name,
            show.first_air_date.formatted or "-",
            ", ".join(show.genres) or "-",
            f"{show.popularity:.1f}",
        )

    console.print(table)
    _print_page_footer(console, paged)


def print_person_results(console: Console, paged: PagedResults[PersonSearchItem]) -> None:
    """Display person search hits in a table."""
    if not paged.results:
        console.print(CLIMessages.NO_RESULTS)
        return

    table = Table(title="People")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Known for", style="magenta")
    table.add_column("Popularity", style="yellow", justify="right")

    for person in paged.results:
        table.add_row(
            str(person.id),
            person.name,
            ", ".join(item.title for item in person.known_for) or "-",
            f"{person.popularity:.1f}",
        )

    console.print(table)
    _print_page_footer(console, paged)


def _details_table(title: str) -> Table:
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    return table


def print_movie_details(console: Console, movie: MovieDetails) -> None:
    table = _details_table(movie.title)
    table.add_row("ID", str(movie.id))
    table.add_row("Tagline", movie.tagline or "-")
    table.add_row("Released", movie.release_date.formatted or "-")
    table.add_row("Status", movie.status or "-")
    table.add_row("Runtime", f"{movie.runtime} min" if movie.runtime else "-")
    table.add_row("Genres", ", ".join(movie.genres) or "-")
    table.add_row("IMDb", movie.imdb_url or "-")
    table.add_row("Poster", movie.poster_url or "-")
    table.add_row("Overview", movie.overview or "-")
    console.print(table)

    if movie.videos:
        videos = Table(title="Videos")
        videos.add_column("Type", style="magenta")
        videos.add_column("Name", style="green")
        videos.add_column("URL", style="blue")
        for video in movie.videos:
            videos.add_row(video.type, video.name, video.video_url or "-")
        console.print(videos)


def print_watch_providers(console: Console, providers: WatchProviders) -> None:
    """Display streaming, purchase and rental providers per country."""
    if not providers.results:
        return

    table = Table(title="Where to watch")
    table.add_column("Country", style="cyan", no_wrap=True)
    table.add_column("Stream", style="green")
    table.add_column("Buy", style="yellow")
    table.add_column("Rent", style="magenta")

    for country, offers in providers.results.items():
        table.add_row(
            country,
            ", ".join(p.provider for p in offers.stream) or "-",
            ", ".join(p.provider for p in offers.buy) or "-",
            ", ".join(p.provider for p in offers.rent) or "-",
        )
    console.print(table)


def print_tv_details(console: Console, show: TVShowDetails) -> None:
    table = _details_table(show.name)
    table.add_row("ID", str(show.id))
    table.add_row("First aired", show.first_air_date.formatted or "-")
    table.add_row("Last aired", show.last_air_date.formatted or "-")
    table.add_row("Status", show.status or "-")
    table.add_row("Seasons", str(show.number_of_seasons))
    table.add_row("Episodes", str(show.number_of_episodes))
    table.add_row("Episode runtime", f"{show.avg_episode_run_time} min" if show.avg_episode_run_time else "-")
    table.add_row("Genres", ", ".join(show.genres) or "-")
    table.add_row("IMDb", show.imdb_url or "-")
    table.add_row("Overview", show.overview or "-")
    console.print(table)


def print_season(console: Console, season: TVSeasonDetails) -> None:
    table = Table(title=season.name or f"Season {season.season_number}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Aired", style="blue")
    table.add_column("Runtime", style="yellow", justify="right")

    for episode in season.episodes:
        table.add_row(
            str(episode.episode_number),
            episode.name,
            episode.air_date.formatted or "-",
            str(episode.runtime) if episode.runtime else "-",
        )
    console.print(table)


def print_person_details(console: Console, person: PersonDetails) -> None:
    table = _details_table(person.name)
    table.add_row("ID", str(person.id))
    table.add_row("Known for", person.known_for_department or "-")
    table.add_row("Born", person.birthday.formatted or "-")
    if person.death_day:
        table.add_row("Died", person.death_day.formatted)
    table.add_row("Place of birth", person.place_of_birth or "-")
    table.add_row("IMDb", person.imdb_url or "-")
    table.add_row("Biography", person.biography or "-")
    console.print(table)
