"""
Logical catalog endpoints and how each maps onto a TMDB request.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from streamplus.exceptions import InvalidRequestError

MEDIA_TYPES = ("movie", "tv")
MIN_SEARCH_LENGTH = 2
EMPTY_RESULTS: Dict[str, Any] = {"results": []}


@dataclass(frozen=True)
class UpstreamRequest:
    """A resolved TMDB request: path under the API root plus query parameters."""
    path: str
    params: Dict[str, Any] = field(default_factory=dict)


def _page(params: Mapping[str, Any]) -> int:
    raw = params.get("page") or 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        raise InvalidRequestError("Parâmetros inválidos", details=f"page must be an integer, got {raw!r}")
    if page < 1:
        raise InvalidRequestError("Parâmetros inválidos", details="page must be >= 1")
    return page


def _require_id(params: Mapping[str, Any]) -> str:
    item_id = str(params.get("id") or "").strip()
    if not item_id:
        raise InvalidRequestError("Parâmetros inválidos", details="id is required")
    if not item_id.isdigit():
        raise InvalidRequestError("Parâmetros inválidos", details=f"id must be numeric, got {item_id!r}")
    return item_id


def _require_media(params: Mapping[str, Any]) -> tuple[str, str]:
    media_type = params.get("media_type")
    if media_type not in MEDIA_TYPES:
        raise InvalidRequestError(
            "Parâmetros inválidos",
            details=f"media_type must be one of {', '.join(MEDIA_TYPES)}",
        )
    return media_type, _require_id(params)


def _hero(params: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("trending/all/day")


def _movies(params: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("movie/popular", {"page": _page(params)})


def _tv(params: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("tv/popular", {"page": _page(params)})


def _anime(params: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(
        "discover/tv",
        {"with_genres": 16, "sort_by": "popularity.desc", "page": _page(params)},
    )


def _search(params: Mapping[str, Any]) -> Optional[UpstreamRequest]:
    query = params.get("query")
    if not query or len(query) < MIN_SEARCH_LENGTH:
        return None
    return UpstreamRequest("search/multi", {"query": query, "page": _page(params)})


def _details(params: Mapping[str, Any]) -> UpstreamRequest:
    media_type, item_id = _require_media(params)
    return UpstreamRequest(f"{media_type}/{item_id}")


def _credits(params: Mapping[str, Any]) -> UpstreamRequest:
    media_type, item_id = _require_media(params)
    return UpstreamRequest(f"{media_type}/{item_id}/credits")


def _recommendations(params: Mapping[str, Any]) -> UpstreamRequest:
    media_type, item_id = _require_media(params)
    return UpstreamRequest(f"{media_type}/{item_id}/recommendations", {"page": _page(params)})


def _person(params: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(f"person/{_require_id(params)}")


def _person_credits(params: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(f"person/{_require_id(params)}/combined_credits")


# "player" is answered locally and never reaches this table
ROUTES: Dict[str, Callable[[Mapping[str, Any]], Optional[UpstreamRequest]]] = {
    "hero": _hero,
    "movies": _movies,
    "tv": _tv,
    "anime": _anime,
    "search": _search,
    "details": _details,
    "credits": _credits,
    "recommendations": _recommendations,
    "person": _person,
    "person_credits": _person_credits,
}

ENDPOINT_TYPES = tuple(ROUTES) + ("player",)


def resolve_route(endpoint: str, params: Mapping[str, Any]) -> Optional[UpstreamRequest]:
    """
    Build the upstream request for a logical endpoint.

    Returns None when the query can be answered without calling TMDB
    (a search shorter than two characters).

    Raises:
        InvalidRequestError: unknown endpoint or missing/malformed parameters
    """
    builder = ROUTES.get(endpoint)
    if builder is None:
        raise InvalidRequestError("Tipo inválido", details=f"unknown endpoint {endpoint!r}")
    return builder(params)
