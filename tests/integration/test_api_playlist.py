"""
Integration tests for the playlist API.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from tests.fixtures import FakePlaylistUpstream
from tests.fixtures.mock_responses import M3U_NO_HEADER


@pytest.mark.integration
class TestPlaylistAPI:
    """Tests for /playlist."""

    def test_list_channels(self, client: TestClient):
        """Test the full channel list as a JSON array."""
        response = client.get("/playlist")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == [
            {
                "name": "Globo SP",
                "group": "Abertos",
                "logo": "http://logos.test/globo.png",
                "url": "http://iptv.test/live/globo.ts",
            },
            {
                "name": "Canal X",
                "group": "Noticias",
                "logo": "",
                "url": "http://host/stream.ts",
            },
            {
                "name": "SporTV",
                "group": "Esportes",
                "logo": "",
                "url": "http://iptv.test/live/sportv.m3u8",
            },
        ]

    def test_filter_by_name(self, client: TestClient):
        """Test the q parameter narrows by name, ignoring case."""
        response = client.get("/playlist", params={"q": "GLOBO"})

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Globo SP"]

    def test_filter_without_match(self, client: TestClient):
        """Test a filter matching nothing gives an empty array."""
        response = client.get("/playlist", params={"q": "nada"})

        assert response.status_code == 200
        assert response.json() == []

    def test_repeated_calls_hit_upstream_once(
        self, client: TestClient, playlist_upstream: FakePlaylistUpstream
    ):
        """Test two calls inside the TTL return identical bodies from one fetch."""
        first = client.get("/playlist")
        second = client.get("/playlist")

        assert first.json() == second.json()
        assert playlist_upstream.calls == 1

    def test_upstream_error_status(
        self, client: TestClient, playlist_upstream: FakePlaylistUpstream
    ):
        """Test a failing playlist host gives 502 with the error body."""
        playlist_upstream.status_code = 500

        response = client.get("/playlist")

        assert response.status_code == 502
        assert response.json() == {"error": "Falha ao carregar lista M3U", "details": "HTTP 500"}
        assert "cache-control" not in response.headers

    def test_invalid_playlist(self, client: TestClient, playlist_upstream: FakePlaylistUpstream):
        """Test a body without the M3U marker gives 502."""
        playlist_upstream.body = M3U_NO_HEADER

        response = client.get("/playlist")

        assert response.status_code == 502
        assert response.json()["error"] == "Lista M3U inválida"

    def test_timeout(self, client: TestClient, playlist_upstream: FakePlaylistUpstream):
        """Test a playlist timeout gives 502 with the timeout in details."""
        playlist_upstream.error = httpx.ReadTimeout("read timed out")

        response = client.get("/playlist")

        assert response.status_code == 502
        assert response.json() == {
            "error": "Falha ao carregar lista M3U",
            "details": "timeout: read timed out",
        }

    def test_recovers_after_failure(
        self, client: TestClient, playlist_upstream: FakePlaylistUpstream
    ):
        """Test the next call after a failure fetches again."""
        playlist_upstream.error = httpx.ConnectError("refused")
        assert client.get("/playlist").status_code == 502

        playlist_upstream.error = None
        response = client.get("/playlist")

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_options(self, client: TestClient):
        """Test OPTIONS answers 204 with CORS headers and no body."""
        response = client.options("/playlist")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert "GET" in response.headers["access-control-allow-methods"]
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_cors_on_get(self, client: TestClient):
        """Test cross-origin GETs are allowed."""
        response = client.get("/playlist", headers={"Origin": "http://other.test"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_standard_headers(self, client: TestClient):
        """Test the proxy's standard response headers."""
        response = client.get("/playlist")

        assert response.headers["x-powered-by"] == "Stream+"
        assert response.headers["cache-control"] == "public, max-age=300"
        assert "accept-encoding" in response.headers["vary"].lower()
        assert response.headers["x-response-time"].endswith("ms")

    def test_security_headers(self, client: TestClient, playlist_upstream: FakePlaylistUpstream):
        """Test security headers on success and on errors."""
        playlist_upstream.status_code = 500
        failed = client.get("/playlist")
        playlist_upstream.status_code = 200
        ok = client.get("/playlist")

        assert failed.status_code == 502
        for response in (ok, failed, client.options("/playlist")):
            assert response.headers["x-content-type-options"] == "nosniff"
            assert response.headers["x-frame-options"] == "SAMEORIGIN"
            assert response.headers["referrer-policy"] == "no-referrer"
