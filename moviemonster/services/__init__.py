"""Business services."""

from moviemonster.services.movie_service import MovieService

__all__ = ["MovieService"]
