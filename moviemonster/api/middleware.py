"""API middleware: request logging and error handling.

Starlette runs middleware last-added-first, so ``main.create_app`` adds
``ErrorHandlingMiddleware`` before ``RequestLoggingMiddleware``:

    Client -> RequestLogging -> ErrorHandling -> route handler

and the request log records the status the client actually received.
"""

from __future__ import annotations

import time

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from moviemonster.api.schemas import ErrorResponse
from moviemonster.utils.errors import MetadataFetchError, MovieMonsterError
from moviemonster.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration.

    ``method`` and ``path`` are bound as structlog context variables for the
    duration of the request, so every event logged while handling it carries
    them.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        with structlog.contextvars.bound_contextvars(
            method=request.method,
            path=str(request.url.path),
        ):
            try:
                response = await call_next(request)
                return response
            finally:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                status_code = response.status_code if response else 500
                _logger.info("http_request", status=status_code, duration_ms=duration_ms)


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn escaped ``MovieMonsterError`` subclasses into JSON error bodies.

    A metadata transport failure becomes a 502 for the one request that hit
    it; any other application error becomes a 500.  Details stay in the
    server log, the client gets the error type and message only.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except MovieMonsterError as exc:
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                provider=exc.provider_name,
            )
            body = ErrorResponse(
                error=type(exc).__name__,
                detail=exc.message,
            )
            return JSONResponse(
                status_code=502 if isinstance(exc, MetadataFetchError) else 500,
                content=body.model_dump(),
            )
