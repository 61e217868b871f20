"""Poster store that writes downloaded images to the local filesystem.

The image URL is the configured image prefix followed by the record's
poster path.  The local filename is the poster path with its first
character (normally ``/``) dropped, resolved against the poster directory:

    poster_path  "/abc.jpg"
    image URL    "https://image.tmdb.org/t/p/w500/abc.jpg"
    local file   "<poster_dir>/abc.jpg"

Only a 200 response is written.  Any failure along the way is logged and
swallowed; by the time this runs the caller already has its response.
Existing files are overwritten and concurrent saves of the same poster are
not coordinated.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import structlog

from moviemonster.interfaces.poster_store import IPosterStore
from moviemonster.utils.errors import PosterDownloadError

logger = structlog.get_logger(logger_name=__name__)


class DiskPosterStore(IPosterStore):
    """Downloads poster images and streams them into files under *poster_dir*.

    Parameters
    ----------
    image_url_prefix:
        Prepended to the poster path to form the image URL.
    poster_dir:
        Directory the files are written to.  Created if missing;
        subdirectories implied by a poster path are not.
    http_client:
        Shared client.  When omitted the store creates and owns one.
    timeout:
        Seconds before the download is abandoned; ``None`` waits forever.
    """

    def __init__(
        self,
        image_url_prefix: str,
        poster_dir: str | Path = ".",
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._image_url_prefix = image_url_prefix
        self._root = Path(poster_dir)
        self._root.mkdir(parents=True, exist_ok=True)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def local_path(self, poster_path: str) -> Path:
        """Map *poster_path* to the file it is saved as.

        Raises
        ------
        PosterDownloadError
            If the path names no file, cannot be represented on this
            filesystem, or points outside the poster directory.
        """
        root = self._root.resolve()
        try:
            target = (root / poster_path[1:]).resolve()
        except (OSError, ValueError) as exc:
            raise PosterDownloadError(
                message=f"Poster path {poster_path!r} is not a usable filename: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        if target == root or not target.is_relative_to(root):
            raise PosterDownloadError(
                message=f"Poster path {poster_path!r} does not name a file under {root}",
                provider_name=self.get_provider_name(),
            )
        return target

    async def _write(self, target: Path, response: httpx.Response) -> None:
        # File I/O runs in worker threads; chunks arrive on the event loop.
        try:
            fh = await asyncio.to_thread(open, target, "wb")
        except OSError as exc:
            raise PosterDownloadError(
                message=f"Cannot create {target}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        try:
            async for chunk in response.aiter_bytes():
                await asyncio.to_thread(fh.write, chunk)
        except OSError as exc:
            raise PosterDownloadError(
                message=f"Cannot write {target}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        finally:
            await asyncio.to_thread(fh.close)

    async def _download(self, poster_path: str | None) -> Path:
        if not poster_path:
            raise PosterDownloadError(
                message="Record has no poster path",
                provider_name=self.get_provider_name(),
            )

        target = self.local_path(poster_path)
        url = self._image_url_prefix + poster_path
        logger.info("poster_download", url=url)

        try:
            async with self._client.stream("GET", url) as response:
                if response.status_code != 200:
                    raise PosterDownloadError(
                        message=f"Received HTTP {response.status_code} for {url}",
                        provider_name=self.get_provider_name(),
                    )
                await self._write(target, response)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise PosterDownloadError(
                message=f"HTTP error downloading {url!r}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        return target

    # ------------------------------------------------------------------
    # IPosterStore implementation
    # ------------------------------------------------------------------

    async def save(self, poster_path: str | None) -> Path | None:
        """Download and write the poster; return the file or ``None``."""
        try:
            target = await self._download(poster_path)
        except PosterDownloadError as exc:
            logger.warning("poster_not_saved", poster_path=poster_path, error=str(exc))
            return None

        logger.info("poster_saved", poster_path=poster_path, file=str(target))
        return target

    def get_provider_name(self) -> str:
        return "poster_store"

    async def aclose(self) -> None:
        """Close the HTTP client if this store created it."""
        if self._owns_client:
            await self._client.aclose()
