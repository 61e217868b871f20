"""Abstract base class for poster image stores.

A poster store takes the ``poster_path`` attribute of a movie record,
downloads the image it points at and keeps a local copy.  Saving is best
effort: implementations log and swallow their own failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class IPosterStore(ABC):
    """Contract for downloading and persisting poster images."""

    @abstractmethod
    async def save(self, poster_path: str | None) -> Path | None:
        """Download the image for *poster_path* and write it locally.

        Parameters
        ----------
        poster_path:
            The record's poster path, e.g. ``"/abc.jpg"``.

        Returns
        -------
        Path or None
            The written file, or ``None`` if nothing was written.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this store."""
