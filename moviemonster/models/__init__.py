"""moviemonster domain models."""

from __future__ import annotations

from moviemonster.models.movie import MovieRecord

__all__ = ["MovieRecord"]
