"""Allow ``python -m tmdb_curated``."""

from tmdb_curated.cli.typer_app import app

if __name__ == "__main__":
    app()
