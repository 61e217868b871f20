"""Structured logging setup using structlog.

Every event passes through one shared chain:

    merge_contextvars   request-scoped keys (method, path, movie_id) bound
                        by ``RequestLoggingMiddleware`` and the movie route
    add_log_level
    StackInfoRenderer / set_exc_info
    TimeStamper         ISO-8601
    redact_api_key      masks ``api_key=...`` query values

and then a ConsoleRenderer (development) or JSONRenderer (``APP_ENV`` is
``"production"``).  The stdlib root logger is routed through the same chain
so uvicorn records share the format.  httpx and httpcore log every request
URL, and the metadata URL suffix normally carries the API key, so those two
loggers are held at WARNING.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Any

import structlog

_API_KEY_PATTERN = re.compile(r"(api_key=)[^&\s'\"]+")

_QUIET_LOGGERS = ("httpx", "httpcore")


def redact_api_key(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask ``api_key`` query values in every string field of the event."""
    for key, value in event_dict.items():
        if isinstance(value, str) and "api_key=" in value:
            event_dict[key] = _API_KEY_PATTERN.sub(r"\1***", value)
    return event_dict


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger for the gateway.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON output regardless of ``APP_ENV``.

    Returns:
        A configured structlog BoundLogger.
    """
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"
    level = log_level.upper()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_api_key,
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root_logger.level))

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound to *name*, configuring defaults if needed."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
