"""Rendering helpers for CLI console output."""
