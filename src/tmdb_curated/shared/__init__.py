"""Shared modules: constants, errors, logging helpers and response models."""
