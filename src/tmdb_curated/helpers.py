"""Reshaping helpers shared by the curated layer.

Image URL building, date parsing and small list utilities.
"""

from __future__ import annotations

import calendar
import logging
import math
from datetime import date, datetime
from typing import Iterable

from tmdb_curated.config.manager import tmdb_config
from tmdb_curated.shared.constants import ExternalLinks, ImageSizes, TMDBConfig
from tmdb_curated.shared.models import DateResult

logger = logging.getLogger(__name__)

TMDB_DATE_FORMAT = "%Y-%m-%d"


def resolve_image_size(size: str) -> str:
    """Map a size key ('s', 'm', 'l', 'original') to a TMDB size name."""
    return ImageSizes.SIZE_MAP.get(size, ImageSizes.DEFAULT)


def build_image_url(base_url: str, size: str, file_name: str | None) -> str:
    """Join an image base URL, size key and file path; empty path gives ''."""
    if not file_name:
        return ""
    return f"{base_url}{resolve_image_size(size)}/{file_name.lstrip('/')}"


def format_image_url(
    file_names: str | Iterable[str | None] | None,
    size: str = ImageSizes.MEDIUM,
    secure: bool = True,
) -> list[str]:
    """Build absolute image URLs from TMDB image paths.

    A single path still returns a one-element list. Empty entries map to ''.

    Args:
        file_names: One image path or a list of paths, e.g. "/abc.jpg"
        size: 's' (w185), 'm' (w300), 'l' (w500) or 'original'; anything
            else falls back to w300
        secure: Use the https base URL

    Returns:
        List of absolute URLs, one per input path

    Raises:
        ApplicationError: If the runtime configuration is not initialized
    """
    config = tmdb_config.get_config()
    base_url = config.secure_img_url if secure else config.img_url

    if file_names is None or isinstance(file_names, str):
        return [build_image_url(base_url, size, file_names)]
    return [build_image_url(base_url, size, name) for name in file_names]


def image_url(file_name: str | None, size: str = ImageSizes.MEDIUM) -> str:
    """Single-path shortcut for ``format_image_url``."""
    return format_image_url(file_name, size)[0]


def average_of_list(values: Iterable[float] | None) -> int:
    """Mean of ``values`` rounded half up; 0 for an empty or missing list."""
    items = list(values or [])
    if not items:
        return 0
    return math.floor(sum(items) / len(items) + 0.5)


def _current_date_format() -> str:
    if tmdb_config.is_initialized:
        return tmdb_config.get_config().api_options.date_format
    return TMDBConfig.DEFAULT_DATE_FORMAT


def parse_to_date(value: str | date | None, date_format: str | None = None) -> DateResult:
    """Parse a TMDB date ("YYYY-MM-DD") into a DateResult.

    Args:
        value: Date string as returned by TMDB, or a date
        date_format: strftime format for ``formatted``; defaults to the
            configured API option

    Returns:
        DateResult; empty or unparseable input gives an empty DateResult
    """
    if not value:
        return DateResult()

    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = datetime.strptime(value[:10], TMDB_DATE_FORMAT).date()
        except ValueError:
            logger.debug("Unparseable date value: %r", value)
            return DateResult()

    return DateResult(
        date=parsed,
        epoch=calendar.timegm(parsed.timetuple()),
        formatted=parsed.strftime(date_format or _current_date_format()),
    )


def flatten_list(values: Iterable[object] | None, delimiter: str = ",") -> str:
    """Join values into one delimited string, skipping None."""
    return delimiter.join(str(value) for value in values or [] if value is not None)


def build_imdb_url(imdb_id: str | None, *, person: bool = False) -> str:
    """IMDb title (or person page) URL for ``imdb_id``, '' when there is none."""
    if not imdb_id:
        return ""
    template = ExternalLinks.IMDB_NAME if person else ExternalLinks.IMDB_TITLE
    return template.format(imdb_id=imdb_id)


__all__ = [
    "average_of_list",
    "build_image_url",
    "build_imdb_url",
    "flatten_list",
    "format_image_url",
    "image_url",
    "parse_to_date",
    "resolve_image_size",
]
