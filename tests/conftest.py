"""Shared pytest fixtures for the moviemonster test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from moviemonster.interfaces.metadata_provider import IMetadataProvider
from moviemonster.providers.metadata.tmdb_provider import TMDbMetadataProvider
from moviemonster.providers.poster.disk_poster_store import DiskPosterStore

METADATA_PREFIX = "https://api.test/3/movie/"
METADATA_SUFFIX = "?api_key=test-key"
IMAGE_PREFIX = "https://image.test/t/p/w500"
POSTER_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-bytes"


class FakeUpstream:
    """In-process stand-in for the metadata API and the image host.

    Serves ``movie_bodies[movie_id]`` for metadata requests (404 with a TMDb
    style error document when unknown) and ``POSTER_BYTES`` with
    ``poster_status`` for image requests.  Every request URL is recorded.
    """

    def __init__(self) -> None:
        self.movie_bodies: dict[str, bytes] = {}
        self.poster_status = 200
        self.fail_metadata = False
        self.requests: list[str] = []

    def metadata_requests(self) -> list[str]:
        return [url for url in self.requests if url.startswith(METADATA_PREFIX)]

    def image_requests(self) -> list[str]:
        return [url for url in self.requests if url.startswith(IMAGE_PREFIX)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)

        if url.startswith(METADATA_PREFIX):
            if self.fail_metadata:
                raise httpx.ConnectError("Connection refused", request=request)
            movie_id = request.url.path.rsplit("/", 1)[-1]
            body = self.movie_bodies.get(movie_id)
            if body is None:
                return httpx.Response(
                    404,
                    content=b'{"status_code":34,"status_message":"not found"}',
                )
            return httpx.Response(200, content=body)

        if url.startswith(IMAGE_PREFIX):
            if self.poster_status != 200:
                return httpx.Response(self.poster_status, content=b"missing")
            return httpx.Response(200, content=POSTER_BYTES)

        return httpx.Response(500)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def sample_movie() -> dict[str, Any]:
    """A trimmed TMDb movie document."""
    return {
        "id": "500",
        "title": "Reservoir Dogs",
        "poster_path": "/abc.jpg",
        "release_date": "1992-09-02",
        "vote_average": 8.1,
        "genres": [{"id": 80, "name": "Crime"}, {"id": 53, "name": "Thriller"}],
    }


@pytest.fixture
def sample_movie_body(sample_movie: dict[str, Any]) -> bytes:
    return json.dumps(sample_movie).encode()


@pytest.fixture
def upstream(sample_movie_body: bytes) -> FakeUpstream:
    fake = FakeUpstream()
    fake.movie_bodies["500"] = sample_movie_body
    return fake


@pytest.fixture
def mock_metadata_provider(sample_movie_body: bytes) -> IMetadataProvider:
    """Mock IMetadataProvider whose fetch() returns the sample movie body.

    Override with ``mock_metadata_provider.fetch.return_value = b"..."`` or
    ``.side_effect`` for specific tests.
    """
    mock = MagicMock(spec=IMetadataProvider)
    mock.get_provider_name.return_value = "mock-tmdb"
    mock.fetch = AsyncMock(return_value=sample_movie_body)
    return mock


@pytest.fixture
def metadata_provider(upstream: FakeUpstream) -> TMDbMetadataProvider:
    """TMDbMetadataProvider wired to the fake upstream."""
    return TMDbMetadataProvider(
        url_prefix=METADATA_PREFIX,
        url_suffix=METADATA_SUFFIX,
        http_client=upstream.client(),
    )


@pytest.fixture
def poster_store(upstream: FakeUpstream, tmp_path: Path) -> DiskPosterStore:
    """DiskPosterStore wired to the fake upstream, writing under tmp_path."""
    return DiskPosterStore(
        image_url_prefix=IMAGE_PREFIX,
        poster_dir=tmp_path,
        http_client=upstream.client(),
    )


@pytest.fixture
def poster_bytes() -> bytes:
    """The image body the fake upstream serves for every poster."""
    return POSTER_BYTES
