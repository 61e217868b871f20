"""In-memory movie cache.

A plain dict held for the life of the process: no size bound, no TTL, no
eviction.  Each operation takes an ``asyncio.Lock``, but nothing holds the
lock across a lookup -> fetch -> insert sequence, so two concurrent misses
for the same id both fetch and the later insert wins.
"""

from __future__ import annotations

import asyncio

import structlog

from moviemonster.interfaces.cache_provider import ICacheProvider
from moviemonster.models.movie import MovieRecord

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """Unbounded dict-backed record cache, initialised empty."""

    def __init__(self) -> None:
        self._records: dict[str, MovieRecord] = {}
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def lookup(self, movie_id: str) -> MovieRecord | None:
        """Return the cached record for *movie_id*, or ``None``."""
        async with self._lock:
            record = self._records.get(movie_id)
        if record is not None:
            logger.debug("cache_hit", movie_id=movie_id)
        else:
            logger.debug("cache_miss", movie_id=movie_id)
        return record

    async def insert(self, movie_id: str, record: MovieRecord) -> None:
        """Store *record* under *movie_id*; overwrites unconditionally."""
        async with self._lock:
            replaced = movie_id in self._records
            self._records[movie_id] = record
        logger.debug("cache_insert", movie_id=movie_id, replaced=replaced)

    async def size(self) -> int:
        async with self._lock:
            return len(self._records)
