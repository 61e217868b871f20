"""Abstract base class for the movie lookup cache.

Maps a movie identifier to the :class:`MovieRecord` decoded for it.  The
contract has no expiry and no removal: once a record is inserted it stays
for the life of the process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from moviemonster.models.movie import MovieRecord


class ICacheProvider(ABC):
    """Contract for the identifier -> record cache.

    All operations are async so an implementation may guard its storage
    with an ``asyncio.Lock`` without blocking the event loop.
    """

    @abstractmethod
    async def lookup(self, movie_id: str) -> MovieRecord | None:
        """Return the record cached under *movie_id*, or ``None``.

        Parameters
        ----------
        movie_id:
            The opaque movie identifier taken from the request path.
        """

    @abstractmethod
    async def insert(self, movie_id: str, record: MovieRecord) -> None:
        """Store *record* under *movie_id*, overwriting any previous entry.

        Parameters
        ----------
        movie_id:
            The opaque movie identifier.
        record:
            The decoded record to keep.
        """

    @abstractmethod
    async def size(self) -> int:
        """Return the number of cached records."""
