"""FastAPI dependency providers for the services built at startup"""

from fastapi import Request

from ..catalog.service import CatalogService
from ..config import StreamPlusConfig
from ..playlist.service import PlaylistService


def get_app_config(request: Request) -> StreamPlusConfig:
    return request.app.state.config


def get_playlist_service(request: Request) -> PlaylistService:
    return request.app.state.playlist_service


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service
