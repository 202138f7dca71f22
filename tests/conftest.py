"""
Stream+ Test Configuration

Shared fixtures and configuration for all tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from streamplus.api.dependencies import get_catalog_service, get_playlist_service
from streamplus.cache import MemoryCache, SnapshotCache
from streamplus.catalog import CatalogService
from streamplus.config import CatalogConfig, PlaylistConfig, StreamPlusConfig
from streamplus.main import create_app
from streamplus.playlist import PlaylistService
from tests.fixtures import FakeClock, FakePlaylistUpstream, FakeTMDBClient
from tests.fixtures.mock_responses import (
    M3U_BASIC,
    TMDB_MOVIE_DETAILS,
    TMDB_MULTI_SEARCH,
    TMDB_POPULAR_MOVIES,
    TMDB_TRENDING,
)

PLAYLIST_URL = "http://playlist.test/get.php?type=m3u_plus"
PLAYLIST_TTL = 6 * 60 * 60


# ============ Configuration Fixtures ============


@pytest.fixture
def test_config() -> StreamPlusConfig:
    """Configuration pointing at fake upstreams."""
    return StreamPlusConfig(
        playlist=PlaylistConfig(url=PLAYLIST_URL, ttl_seconds=PLAYLIST_TTL),
        catalog=CatalogConfig(api_key="test-key", cache_ttl=300, max_entries=100),
    )


# ============ Upstream Fixtures ============


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock shared by the caches under test."""
    return FakeClock()


@pytest.fixture
def playlist_upstream() -> FakePlaylistUpstream:
    """Playlist host serving a small valid playlist."""
    return FakePlaylistUpstream(body=M3U_BASIC)


@pytest.fixture
def tmdb_client() -> FakeTMDBClient:
    """TMDB client with canned responses."""
    return FakeTMDBClient(
        {
            "trending/all/day": TMDB_TRENDING,
            "movie/popular": TMDB_POPULAR_MOVIES,
            "search/multi": TMDB_MULTI_SEARCH,
            "movie/123456": TMDB_MOVIE_DETAILS,
        }
    )


# ============ Service Fixtures ============


@pytest.fixture
def playlist_service(
    playlist_upstream: FakePlaylistUpstream, clock: FakeClock
) -> PlaylistService:
    """Playlist service wired to the fake playlist host."""
    return PlaylistService(
        playlist_url=PLAYLIST_URL,
        cache=SnapshotCache(ttl=PLAYLIST_TTL, clock=clock),
        client=playlist_upstream.client(),
    )


@pytest.fixture
def catalog_service(tmdb_client: FakeTMDBClient, clock: FakeClock) -> CatalogService:
    """Catalog service wired to the fake TMDB client."""
    cache = MemoryCache(default_ttl=300, max_entries=100, clock=clock)
    return CatalogService(client=tmdb_client, cache=cache, ttl=300)


# ============ FastAPI Test Client Fixtures ============


@pytest.fixture
def app(
    test_config: StreamPlusConfig,
    playlist_service: PlaylistService,
    catalog_service: CatalogService,
) -> FastAPI:
    """Create a test FastAPI application."""
    app = create_app(test_config)

    app.dependency_overrides[get_playlist_service] = lambda: playlist_service
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service

    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a synchronous test client."""
    with TestClient(app) as client:
        yield client


# ============ Temporary File Fixtures ============


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """Create a temporary config file."""
    config_file = temp_dir / "config.yaml"
    config_file.write_text(
        """
server:
  host: "127.0.0.1"
  port: 8080
  debug: true

playlist:
  url: "http://playlist.test/list.m3u"
  ttl_seconds: 600

catalog:
  api_key: "yaml-key"
  timeout: 5
  max_entries: 10

logging:
  level: "DEBUG"
"""
    )
    return config_file


# ============ Environment Fixtures ============


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables for each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("STREAMPLUS_") or key in ("PORT", "TMDB_API_KEY"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_env_vars():
    """Set up mock environment variables."""
    env_vars = {
        "STREAMPLUS_PORT": "9000",
        "STREAMPLUS_DEBUG": "true",
        "STREAMPLUS_M3U_URL": "http://env.test/list.m3u",
        "TMDB_API_KEY": "12345",
    }
    with patch.dict(os.environ, env_vars):
        yield env_vars
