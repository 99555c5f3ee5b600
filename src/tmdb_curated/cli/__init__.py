"""Command line interface for tmdb_curated (Typer + Rich)."""
