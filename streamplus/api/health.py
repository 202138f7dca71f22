"""Health check endpoint"""

from fastapi import APIRouter, Depends

from .. import __version__
from ..catalog.service import CatalogService
from ..playlist.service import PlaylistService
from .dependencies import get_catalog_service, get_playlist_service
from .schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    playlist: PlaylistService = Depends(get_playlist_service),
    catalog: CatalogService = Depends(get_catalog_service),
) -> dict:
    """Report liveness and cache state. Never calls an upstream."""
    return {
        "status": "healthy",
        "version": __version__,
        "playlist_cache": playlist.cache.to_dict(),
        "catalog_cache": catalog.cache.get_stats().to_dict(),
    }
