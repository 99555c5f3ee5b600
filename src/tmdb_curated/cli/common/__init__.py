"""Shared CLI building blocks: context, options, setup and error handling."""
