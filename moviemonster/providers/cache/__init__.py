"""Cache providers.

MemoryCacheProvider keeps records in a process-local dict.  It is not
shared across workers; run a single uvicorn worker if every request
should see the same cache.
"""

from moviemonster.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
