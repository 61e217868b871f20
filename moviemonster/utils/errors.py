"""Exception hierarchy for moviemonster.

All gateway exceptions inherit from :class:`MovieMonsterError`, which
carries an optional ``provider_name`` naming the outbound collaborator
(``"tmdb"``, ``"poster_store"``) that caused the failure.

    MovieMonsterError  (base)
    +-- MetadataFetchError    (metadata request could not be sent or read)
    +-- RecordDecodeError     (metadata body is not a movie record)
    +-- PosterDownloadError   (image host or local file failure)
    +-- ConfigurationError    (startup / missing config)

Only ``MetadataFetchError`` ever escapes a request; the middleware maps it
to a 502.  The others are raised and caught inside the service and poster
store, where they are logged and dropped.
"""


class MovieMonsterError(Exception):
    """Base exception for all moviemonster errors.

    ``__str__`` prefixes the provider name in brackets, e.g.
    ``[tmdb] Connection refused``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Metadata path
# ---------------------------------------------------------------------------

class MetadataFetchError(MovieMonsterError):
    """Raised when the metadata API request cannot be dispatched or its body read."""

    def __init__(
        self,
        message: str = "Metadata request failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class RecordDecodeError(MovieMonsterError):
    """Raised when a metadata body cannot be decoded into a movie record."""

    def __init__(
        self,
        message: str = "Metadata body is not a movie record",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Poster path
# ---------------------------------------------------------------------------

class PosterDownloadError(MovieMonsterError):
    """Raised when a poster image cannot be downloaded or written to disk."""

    def __init__(
        self,
        message: str = "Poster download failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ConfigurationError(MovieMonsterError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
