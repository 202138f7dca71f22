"""Playlist endpoint: the parsed M3U channel list as JSON"""

import logging

from fastapi import APIRouter, Depends, Query, Response

from ..playlist.service import PlaylistService
from .dependencies import get_playlist_service
from .schemas import ChannelResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/playlist", tags=["Playlist"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@router.get(
    "",
    response_model=list[ChannelResponse],
    responses={502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def list_channels(
    q: str | None = Query(None, description="Case-insensitive substring of the channel name"),
    service: PlaylistService = Depends(get_playlist_service),
) -> list[dict[str, str]]:
    """List playlist channels, optionally filtered by name."""
    channels = await service.get_channels(q)
    logger.debug(f"Serving {len(channels)} channels (q={q!r})")
    return [channel.to_dict() for channel in channels]


@router.options("", status_code=204, response_class=Response)
async def playlist_preflight() -> Response:
    """Answer preflight requests without a body."""
    return Response(status_code=204, headers=CORS_HEADERS)
