"""Run the gateway: ``python -m moviemonster [--host H] [--port P] [--reload]``."""

from __future__ import annotations

import argparse

import uvicorn

from moviemonster.config.settings import Settings


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and start uvicorn on ``moviemonster.main:app``."""
    settings = Settings()

    parser = argparse.ArgumentParser(
        prog="moviemonster",
        description="Caching gateway for TMDb movie metadata and poster images.",
    )
    parser.add_argument("--host", default=settings.app_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.app_port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    uvicorn.run(
        "moviemonster.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
