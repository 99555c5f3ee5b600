"""
Logging Constants

Default logger names, levels and file locations.
"""


class Logging:
    """Logging configuration constants."""

    ROOT_LOGGER = "tmdb_curated"
    DEFAULT_LEVEL = "INFO"
    CONSOLE_TIME_FORMAT = "[%H:%M:%S]"


class LogContextKeys:
    """Keys used in the ``extra`` context of log records."""

    ENDPOINT = "endpoint"
    METHOD = "method"
    STATUS_CODE = "status_code"
    DURATION_MS = "duration_ms"
