"""Pydantic response schemas for the moviemonster API.

The movie route writes the record's own JSON and has no schema here; these
models cover the health check and the error body the middleware returns.
"""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    cached_movies: int


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str | None = None
