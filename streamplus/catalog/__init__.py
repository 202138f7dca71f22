"""
Catalog proxy

Forwards movie/TV metadata queries to TMDB and builds player URLs.
"""

from streamplus.catalog.client import TMDBClient
from streamplus.catalog.player import build_player_url
from streamplus.catalog.routes import ENDPOINT_TYPES, UpstreamRequest, resolve_route
from streamplus.catalog.service import CatalogService

__all__ = [
    "CatalogService",
    "ENDPOINT_TYPES",
    "TMDBClient",
    "UpstreamRequest",
    "build_player_url",
    "resolve_route",
]
