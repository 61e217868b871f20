"""TMDb movie-metadata provider.

Builds the request URL by plain concatenation of a configured prefix, the
movie identifier and a configured suffix (the suffix usually carries
``?api_key=...``), then returns the response body untouched.

The response status code is logged but deliberately not acted on: an error
document from TMDb is handed back exactly like a movie document, and it is
up to the caller's decode step to accept or reject it.  The poster download
path, by contrast, requires a 200.
"""

from __future__ import annotations

import httpx
import structlog

from moviemonster.interfaces.metadata_provider import IMetadataProvider
from moviemonster.utils.errors import MetadataFetchError

logger = structlog.get_logger(logger_name=__name__)

USER_AGENT = "moviemonster/0.1"

_ACCEPT_JSON = {"Accept": "application/json"}


class TMDbMetadataProvider(IMetadataProvider):
    """Fetches raw movie documents from the TMDb ``/movie/{id}`` endpoint.

    Parameters
    ----------
    url_prefix:
        Everything before the identifier, e.g.
        ``"https://api.themoviedb.org/3/movie/"``.
    url_suffix:
        Everything after the identifier, e.g. ``"?api_key=abc123"``.
    http_client:
        Shared client.  When omitted the provider creates and owns one.
    timeout:
        Seconds before the request is abandoned; ``None`` waits forever.
    """

    def __init__(
        self,
        url_prefix: str,
        url_suffix: str = "",
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._url_prefix = url_prefix
        self._url_suffix = url_suffix
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": USER_AGENT},
        )

    def build_url(self, movie_id: str) -> str:
        """Return the outbound URL for *movie_id*."""
        return self._url_prefix + movie_id + self._url_suffix

    # ------------------------------------------------------------------
    # IMetadataProvider implementation
    # ------------------------------------------------------------------

    async def fetch(self, movie_id: str) -> bytes:
        """Return the raw body of the metadata response for *movie_id*."""
        url = self.build_url(movie_id)
        # The suffix usually holds the API key, so only the prefix is logged.
        logger.info("metadata_fetch", movie_id=movie_id, url=self._url_prefix + movie_id)

        try:
            response = await self._client.get(url, headers=_ACCEPT_JSON)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise MetadataFetchError(
                message=f"Request for movie {movie_id} could not be sent: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        logger.debug(
            "metadata_response",
            movie_id=movie_id,
            status=response.status_code,
            size=len(response.content),
        )
        return response.content

    def get_provider_name(self) -> str:
        return "tmdb"

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
