"""Poster image stores."""

from moviemonster.providers.poster.disk_poster_store import DiskPosterStore

__all__ = ["DiskPosterStore"]
