"""Embedded player URL construction."""

from typing import Optional

from streamplus.config import PlayerConfig
from streamplus.exceptions import InvalidRequestError


def build_player_url(
    item_id: Optional[str],
    media_type: Optional[str],
    config: Optional[PlayerConfig] = None,
) -> str:
    """
    Concatenate the per-type player base URL with the catalog id.

    Raises:
        InvalidRequestError: id or type missing, or type not movie/tv
    """
    config = config or PlayerConfig()
    item_id = (item_id or "").strip()

    if not item_id or not media_type:
        raise InvalidRequestError("Parâmetros inválidos", details="id and type are required")

    if media_type == "movie":
        return f"{config.movie_url}{item_id}"
    if media_type == "tv":
        return f"{config.tv_url}{item_id}"

    raise InvalidRequestError("Parâmetros inválidos", details="type must be movie or tv")
