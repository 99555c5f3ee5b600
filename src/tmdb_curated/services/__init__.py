"""TMDB service layers: HTTP transport, raw endpoint calls and curated calls."""
