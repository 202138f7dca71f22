"""
Test Fixtures

Shared test doubles and canned upstream payloads.
"""

from .fakes import FakeClock, FakePlaylistUpstream, FakeTMDBClient

__all__ = [
    "FakeClock",
    "FakePlaylistUpstream",
    "FakeTMDBClient",
]
