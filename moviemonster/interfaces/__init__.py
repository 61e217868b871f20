"""Interface definitions for the gateway's collaborators.

Routes and services depend only on these abstract classes; the concrete
adapters in ``moviemonster/providers/`` are built in ``moviemonster/main.py``
and stored on ``app.state``.  Tests inject fakes through the same seams.

    Interface           ->  Concrete implementation
    ----------------------------------------------------------
    ICacheProvider      ->  MemoryCacheProvider
    IMetadataProvider   ->  TMDbMetadataProvider
    IPosterStore        ->  DiskPosterStore
"""

from moviemonster.interfaces.cache_provider import ICacheProvider
from moviemonster.interfaces.metadata_provider import IMetadataProvider
from moviemonster.interfaces.poster_store import IPosterStore

__all__ = [
    "ICacheProvider",
    "IMetadataProvider",
    "IPosterStore",
]
