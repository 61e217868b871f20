"""Unit tests for DiskPosterStore."""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from moviemonster.providers.poster.disk_poster_store import DiskPosterStore
from moviemonster.utils.errors import PosterDownloadError


class TestLocalPath:
    def test_strips_leading_separator(self, poster_store: DiskPosterStore, tmp_path: Path) -> None:
        assert poster_store.local_path("/abc.jpg") == (tmp_path / "abc.jpg").resolve()

    def test_strips_first_character_whatever_it_is(
        self, poster_store: DiskPosterStore, tmp_path: Path
    ) -> None:
        assert poster_store.local_path("xabc.jpg") == (tmp_path / "abc.jpg").resolve()

    def test_rejects_escape_from_poster_dir(self, poster_store: DiskPosterStore) -> None:
        with pytest.raises(PosterDownloadError):
            poster_store.local_path("/../escape.jpg")

    def test_rejects_bare_separator(self, poster_store: DiskPosterStore) -> None:
        with pytest.raises(PosterDownloadError):
            poster_store.local_path("/")

    def test_rejects_null_byte(self, poster_store: DiskPosterStore) -> None:
        with pytest.raises(PosterDownloadError):
            poster_store.local_path("/a\x00b.jpg")

    def test_creates_poster_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "posters"
        DiskPosterStore(image_url_prefix="https://image.test", poster_dir=target)
        assert target.is_dir()


class TestSave:
    @pytest.mark.asyncio
    async def test_writes_downloaded_bytes(
        self, poster_store: DiskPosterStore, upstream, tmp_path: Path, poster_bytes: bytes
    ) -> None:
        written = await poster_store.save("/abc.jpg")

        assert written == (tmp_path / "abc.jpg").resolve()
        assert written.read_bytes() == poster_bytes
        assert upstream.image_requests() == ["https://image.test/t/p/w500/abc.jpg"]

    @pytest.mark.asyncio
    async def test_overwrites_existing_file(
        self, poster_store: DiskPosterStore, tmp_path: Path, poster_bytes: bytes
    ) -> None:
        (tmp_path / "abc.jpg").write_bytes(b"stale")

        await poster_store.save("/abc.jpg")

        assert (tmp_path / "abc.jpg").read_bytes() == poster_bytes

    @pytest.mark.asyncio
    async def test_non_200_creates_no_file(
        self, poster_store: DiskPosterStore, upstream, tmp_path: Path
    ) -> None:
        upstream.poster_status = 404

        assert await poster_store.save("/abc.jpg") is None
        assert not (tmp_path / "abc.jpg").exists()

    @pytest.mark.asyncio
    async def test_redirect_status_is_not_success(
        self, poster_store: DiskPosterStore, upstream, tmp_path: Path
    ) -> None:
        upstream.poster_status = 302

        assert await poster_store.save("/abc.jpg") is None
        assert not (tmp_path / "abc.jpg").exists()

    @pytest.mark.asyncio
    async def test_transport_error_is_swallowed(self, tmp_path: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        store = DiskPosterStore(
            image_url_prefix="https://image.test",
            poster_dir=tmp_path,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        assert await store.save("/abc.jpg") is None
        assert not (tmp_path / "abc.jpg").exists()

    @pytest.mark.asyncio
    async def test_missing_subdirectory_is_swallowed(
        self, poster_store: DiskPosterStore, tmp_path: Path
    ) -> None:
        assert await poster_store.save("/nested/abc.jpg") is None
        assert not (tmp_path / "nested").exists()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("poster_path", [None, ""])
    async def test_missing_poster_path_skips_download(self, tmp_path: Path, poster_path) -> None:
        mock_client = MagicMock(spec=httpx.AsyncClient)
        store = DiskPosterStore(
            image_url_prefix="https://image.test",
            poster_dir=tmp_path,
            http_client=mock_client,
        )

        assert await store.save(poster_path) is None
        mock_client.stream.assert_not_called()

    @pytest.mark.asyncio
    async def test_escaping_path_skips_download(
        self, poster_store: DiskPosterStore, upstream
    ) -> None:
        assert await poster_store.save("/../../etc/passwd") is None
        assert upstream.image_requests() == []

    @pytest.mark.asyncio
    async def test_null_byte_in_path_is_swallowed(
        self, poster_store: DiskPosterStore, upstream, tmp_path: Path
    ) -> None:
        assert await poster_store.save("/a\x00b.jpg") is None
        assert upstream.image_requests() == []
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_control_character_in_url_is_swallowed(
        self, poster_store: DiskPosterStore, upstream, tmp_path: Path
    ) -> None:
        assert await poster_store.save("/a\nb.jpg") is None
        assert upstream.image_requests() == []
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_write_runs_in_worker_thread(
        self, poster_store: DiskPosterStore, tmp_path: Path, poster_bytes: bytes
    ) -> None:
        with patch(
            "moviemonster.providers.poster.disk_poster_store.asyncio.to_thread",
            wraps=asyncio.to_thread,
        ) as to_thread:
            await poster_store.save("/abc.jpg")

        assert to_thread.await_count >= 3
        assert (tmp_path / "abc.jpg").read_bytes() == poster_bytes

    def test_get_provider_name(self, poster_store: DiskPosterStore) -> None:
        assert poster_store.get_provider_name() == "poster_store"
