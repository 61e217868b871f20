"""Movie lookup service: serve from the cache or fetch, decode and cache.

Lookup flow for one identifier:

  1. CACHE LOOKUP -- a hit skips straight to step 3.
  2. FETCH + DECODE -- on a miss, fetch the raw metadata body and decode it
     into a MovieRecord.  A body that does not decode is logged and the
     lookup yields ``None``; nothing is cached, so the next request for the
     same id fetches again.  A decoded record is inserted.
  3. RE-READ -- the record returned is whatever the cache holds for the id
     now, which under concurrent misses may be another request's insert.

There is no single-flight guard: concurrent misses for one id each fetch.
``MetadataFetchError`` from the provider is not caught here.
"""

from __future__ import annotations

import structlog

from moviemonster.interfaces.cache_provider import ICacheProvider
from moviemonster.interfaces.metadata_provider import IMetadataProvider
from moviemonster.models.movie import MovieRecord
from moviemonster.utils.errors import RecordDecodeError
from moviemonster.utils.logging import get_logger

logger: structlog.BoundLogger = get_logger(__name__)


class MovieService:
    """Cache-or-fetch lookups of movie records.

    Parameters
    ----------
    cache:
        The process-lifetime record cache.
    metadata:
        The metadata API client used on a cache miss.
    """

    def __init__(self, cache: ICacheProvider, metadata: IMetadataProvider) -> None:
        self._cache = cache
        self._metadata = metadata

    async def get_movie(self, movie_id: str) -> MovieRecord | None:
        """Return the record for *movie_id*, fetching it on a cache miss.

        Returns ``None`` when the fetched body cannot be decoded.

        Raises
        ------
        MetadataFetchError
            If the metadata request cannot be sent or read.
        """
        cached = await self._cache.lookup(movie_id)
        if cached is not None:
            logger.info("movie_cache_hit", movie_id=movie_id)
        else:
            logger.info("movie_cache_miss", movie_id=movie_id)
            body = await self._metadata.fetch(movie_id)
            try:
                record = MovieRecord.decode(body)
            except RecordDecodeError as exc:
                logger.error(
                    "movie_decode_failed",
                    movie_id=movie_id,
                    provider=self._metadata.get_provider_name(),
                    error=str(exc),
                    body_size=len(body),
                )
                return None
            await self._cache.insert(movie_id, record)

        return await self._cache.lookup(movie_id)
