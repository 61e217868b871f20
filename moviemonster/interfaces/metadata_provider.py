"""Abstract base class for movie-metadata API clients."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IMetadataProvider(ABC):
    """Contract for fetching one raw metadata document per movie identifier."""

    @abstractmethod
    async def fetch(self, movie_id: str) -> bytes:
        """Return the raw response body for *movie_id*.

        The body is returned whatever the HTTP status of the response;
        callers decide what a body means.

        Raises
        ------
        MetadataFetchError
            If the request cannot be sent or the body cannot be read.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider (e.g. ``"tmdb"``)."""
