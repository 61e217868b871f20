"""moviemonster FastAPI application entry point.

Wires the cache, metadata provider, poster store and lookup service into
``app.state``, configures structured logging, and registers the routes and
middleware.  Configuration comes from ``.env``/environment variables and
``config/config.yaml``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from moviemonster.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from moviemonster.api.routes import router as api_router
from moviemonster.config.loader import load_config
from moviemonster.config.settings import Settings
from moviemonster.providers.cache.memory_cache import MemoryCacheProvider
from moviemonster.providers.metadata.tmdb_provider import USER_AGENT, TMDbMetadataProvider
from moviemonster.providers.poster.disk_poster_store import DiskPosterStore
from moviemonster.services.movie_service import MovieService
from moviemonster.utils.errors import ConfigurationError
from moviemonster.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()
config = load_config(settings=settings)

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# DI assembly
# ---------------------------------------------------------------------------


def _build_all(app_settings: Settings) -> dict[str, Any]:
    """Construct every provider and service instance for the application.

    Returns a flat dict of named components to be stored on ``app.state``.

    Raises
    ------
    ConfigurationError
        If either outbound URL prefix is empty.
    """
    if not app_settings.metadata_url_prefix:
        raise ConfigurationError("METADATA_URL_PREFIX must not be empty")
    if not app_settings.image_url_prefix:
        raise ConfigurationError("IMAGE_URL_PREFIX must not be empty")

    # -- Shared resources --
    http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(app_settings.http_timeout),
        headers={"User-Agent": USER_AGENT},
    )

    cache = MemoryCacheProvider()
    metadata = TMDbMetadataProvider(
        url_prefix=app_settings.metadata_url_prefix,
        url_suffix=app_settings.metadata_url_suffix,
        http_client=http_client,
    )
    poster_store = DiskPosterStore(
        image_url_prefix=app_settings.image_url_prefix,
        poster_dir=app_settings.poster_dir,
        http_client=http_client,
    )

    return {
        "http_client": http_client,
        "cache": cache,
        "metadata_provider": metadata,
        "poster_store": poster_store,
        "movie_service": MovieService(cache=cache, metadata=metadata),
    }


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    s = app_settings or settings
    version = str(config.get("app", {}).get("version", "0.1.0"))

    @asynccontextmanager
    async def _lifespan(application: FastAPI):  # noqa: ANN202
        components = _build_all(s)
        for key, value in components.items():
            setattr(application.state, key, value)
        application.state.version = version

        _logger.info(
            "app_startup",
            version=version,
            environment=s.app_env,
            metadata_url_prefix=s.metadata_url_prefix,
            poster_dir=s.poster_dir,
        )

        yield

        http_client: httpx.AsyncClient = components["http_client"]
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")

    application = FastAPI(
        title=str(config.get("app", {}).get("name", "moviemonster")),
        version=version,
        description="Caching gateway for TMDb movie metadata and poster images.",
        lifespan=_lifespan,
    )

    # -- Middleware (last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(api_router)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "moviemonster.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
