"""Utility modules for moviemonster.

- **errors** -- exception hierarchy rooted at MovieMonsterError.
- **logging** -- structlog setup (console in development, JSON in production).
"""

from moviemonster.utils.errors import (
    ConfigurationError,
    MetadataFetchError,
    MovieMonsterError,
    PosterDownloadError,
    RecordDecodeError,
)
from moviemonster.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "MetadataFetchError",
    "MovieMonsterError",
    "PosterDownloadError",
    "RecordDecodeError",
    "configure_logging",
    "get_logger",
]
