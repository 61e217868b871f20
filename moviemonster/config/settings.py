"""Application settings loaded from environment variables via pydantic-settings.

Values come from, in priority order:

  1. Environment variables, e.g. ``METADATA_URL_SUFFIX=?api_key=abc123``
  2. A ``.env`` file in the working directory
  3. The defaults below

Field ``metadata_url_prefix`` maps to env var ``METADATA_URL_PREFIX``.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """moviemonster gateway settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Metadata API ===
    # Outbound URL is prefix + movie id + suffix, so the suffix normally
    # carries the query string (``?api_key=...``).
    metadata_url_prefix: str = "https://api.themoviedb.org/3/movie/"
    metadata_url_suffix: str = ""

    # === Poster images ===
    image_url_prefix: str = "https://image.tmdb.org/t/p/w500"
    poster_dir: str = "."

    # None disables httpx timeouts entirely.
    http_timeout: float | None = None

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 6262
    app_env: str = "development"
    log_level: str = "INFO"
