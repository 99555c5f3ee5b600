"""
CLI Constants

Command names, option flags, help texts and exit codes of the
``tmdb-curated`` command line.
"""


class CLIDefaults:
    """Default values and exit codes."""

    VERSION = "0.1.0"
    EXIT_SUCCESS = 0
    EXIT_INTERRUPTED = 130
    DEFAULT_COUNTRY = "US"


class CLICommands:
    """Command names."""

    MOVIE_SEARCH = "movie-search"
    MOVIE = "movie"
    TV_SEARCH = "tv-search"
    TV = "tv"
    PERSON_SEARCH = "person-search"
    PERSON = "person"
    DISCOVER_MOVIES = "discover-movies"


class CLIOptions:
    """Option flags."""

    JSON = "--json"
    LOG_LEVEL = "--log-level"
    VERSION = "--version"
    VERSION_SHORT = "-V"
    PAGE = "--page"
    PAGE_SHORT = "-p"
    VIDEOS = "--videos"
    SEASON = "--season"
    GENRE = "--genre"
    YEAR = "--year"
    SORT_BY = "--sort-by"
    PROVIDER = "--provider"
    REGION = "--region"


class CLIHelp:
    """Help texts."""

    APP_NAME = "tmdb-curated"
    APP_DESCRIPTION = "Query The Movie Database (TMDB) and print curated results."
    APP_STYLE = "rich"
    VERSION_TEXT = "tmdb-curated {version}"

    JSON_HELP = "Print machine-readable JSON instead of tables."
    LOG_LEVEL_HELP = "Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    VERSION_HELP = "Show version information and exit."
    PAGE_HELP = "Result page to show."

    QUERY_HELP = "Text to search for."
    MOVIE_ID_HELP = "TMDB movie id."
    SHOW_ID_HELP = "TMDB show id."
    PERSON_ID_HELP = "TMDB person id."
    VIDEOS_HELP = "Include trailers and other videos."
    SEASON_HELP = "Also list the episodes of this season."
    GENRE_HELP = "Genre id to require; repeat for several genres."
    YEAR_HELP = "Primary release year."
    SORT_BY_HELP = "TMDB sort key, e.g. popularity.desc."
    PROVIDER_HELP = "Watch provider id to require; repeat for several."
    REGION_HELP = "Watch region (ISO 3166-1 code) for provider filters."


class CLIMessages:
    """Console messages."""

    NO_RESULTS = "[yellow]No results found.[/yellow]"
    PAGE_FOOTER = "Page {page} of {total_pages} ({total_results} results)"
    COMMAND_STARTED = "Starting {command} command"
    COMMAND_COMPLETED = "Completed {command} command"
