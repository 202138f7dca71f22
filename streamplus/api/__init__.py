"""API routes for Stream+"""

from .catalog import router as catalog_router
from .health import router as health_router
from .pages import router as pages_router
from .playlist import router as playlist_router

__all__ = [
    "catalog_router",
    "health_router",
    "pages_router",
    "playlist_router",
]
