"""Catalog endpoints: TMDB passthrough and player URLs"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from ..catalog.player import build_player_url
from ..catalog.service import CatalogService
from ..config import StreamPlusConfig
from .dependencies import get_app_config, get_catalog_service
from .schemas import ErrorResponse, PlayerURLResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Catalog"])


# Registered before /{endpoint} so "player" never reaches the TMDB table
@router.get(
    "/player",
    response_model=PlayerURLResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_player_url(
    id: str | None = Query(None, description="TMDB id"),
    type: str | None = Query(None, description="movie or tv"),
    config: StreamPlusConfig = Depends(get_app_config),
) -> dict[str, str]:
    """Build the embedded player URL for a title."""
    return {"url": build_player_url(id, type, config.player)}


@router.get(
    "/{endpoint}",
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def query_catalog(
    endpoint: str,
    request: Request,
    id: str | None = Query(None),
    media_type: str | None = Query(None),
    query: str | None = Query(None),
    page: str | None = Query(None),
    service: CatalogService = Depends(get_catalog_service),
) -> Any:
    """
    Proxy a logical catalog query to TMDB.

    ``id``, ``media_type``, ``query`` and ``page`` are consumed depending on
    the endpoint; every query parameter is part of the cache key.
    """
    params = dict(request.query_params)
    return await service.query(endpoint, params)
