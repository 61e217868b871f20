"""Movie-metadata providers."""

from moviemonster.providers.metadata.tmdb_provider import TMDbMetadataProvider

__all__ = ["TMDbMetadataProvider"]
