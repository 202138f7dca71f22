"""
Test doubles for the upstream services and the clock.
"""

from typing import Any, Dict, List, Optional, Tuple

import httpx

from streamplus.catalog.client import TMDBClient


class FakeClock:
    """Manually advanced clock in epoch seconds."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakePlaylistUpstream:
    """
    Playlist host behind an httpx.MockTransport.

    Change ``body``, ``status_code`` or ``error`` between requests to
    simulate the upstream changing or failing.
    """

    def __init__(self, body: str = "", status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.error: Optional[Exception] = None
        self.requests: List[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class FakeTMDBClient(TMDBClient):
    """TMDB client answering from a path -> payload table."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        super().__init__(api_key="test-key")
        self.responses = responses or {}
        self.error: Optional[Exception] = None
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.closed = False

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append((path, dict(params or {})))
        if self.error is not None:
            raise self.error
        return self.responses.get(path, {"results": []})

    async def close(self) -> None:
        self.closed = True
