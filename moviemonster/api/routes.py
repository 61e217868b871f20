"""FastAPI routes for the moviemonster gateway.

    Endpoint             Method  Description
    ---------------------------------------------------------------
    /                    GET     Fixed plaintext greeting
    /movie/{movie_id}    GET     Movie record JSON (cache or TMDb)
    /health              GET     Health check + cache size

Failures on the movie route do not become error statuses, except for a
metadata transport failure (see ``middleware.ErrorHandlingMiddleware``).
A body that cannot be decoded or encoded yields an empty 200 response.

Services are resolved from ``app.state`` through ``Depends`` helpers, so
tests can build an app with fakes on ``app.state`` and include this router.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic_core import PydanticSerializationError

from moviemonster.api.schemas import HealthResponse
from moviemonster.interfaces.cache_provider import ICacheProvider
from moviemonster.interfaces.poster_store import IPosterStore
from moviemonster.services.movie_service import MovieService
from moviemonster.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter()

GREETING = "Movie monster, at your service"


# ---------------------------------------------------------------------------
# Dependency injection helpers: resolve singletons from app.state
# ---------------------------------------------------------------------------


def _get_movie_service(request: Request) -> MovieService:
    """Return the movie lookup service from application state."""
    return request.app.state.movie_service


def _get_poster_store(request: Request) -> IPosterStore:
    """Return the poster store from application state."""
    return request.app.state.poster_store


def _get_cache(request: Request) -> ICacheProvider:
    """Return the movie cache from application state."""
    return request.app.state.cache


MovieServiceDep = Annotated[MovieService, Depends(_get_movie_service)]
PosterStoreDep = Annotated[IPosterStore, Depends(_get_poster_store)]
CacheDep = Annotated[ICacheProvider, Depends(_get_cache)]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def get_root() -> PlainTextResponse:
    return PlainTextResponse(GREETING)


@router.get(
    "/movie/{movie_id}",
    response_class=Response,
    summary="Look up a movie record",
)
async def get_movie(
    movie_id: str,
    background_tasks: BackgroundTasks,
    movie_service: MovieServiceDep,
    poster_store: PosterStoreDep,
) -> Response:
    """Return the movie record as JSON, then save its poster.

    The poster download is a background task: it runs only after the JSON
    body has been sent, and nothing it does changes the response.
    """
    with structlog.contextvars.bound_contextvars(movie_id=movie_id):
        record = await movie_service.get_movie(movie_id)
        if record is None:
            return Response(status_code=200)

        try:
            body = record.encode()
        except PydanticSerializationError as exc:
            _logger.error("movie_encode_failed", error=str(exc))
            return Response(status_code=200)

    background_tasks.add_task(poster_store.save, record.poster_path)
    return Response(content=body, media_type="application/json")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Application health check",
)
async def health_check(request: Request, cache: CacheDep) -> HealthResponse:
    """Return application health, version, and the number of cached movies."""
    return HealthResponse(
        status="healthy",
        version=getattr(request.app.state, "version", "0.1.0"),
        cached_movies=await cache.size(),
    )
