"""Single-page HTML client"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from .. import __version__

router = APIRouter(include_in_schema=False)

# Unmatched paths under these prefixes are API misses, not client routes
RESERVED_PREFIXES = ("api/", "playlist")


def _render(request: Request) -> HTMLResponse:
    config = request.app.state.config
    return request.app.state.templates.TemplateResponse(
        request,
        "index.html",
        {
            "version": __version__,
            "image_base_url": config.catalog.image_base_url,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request):
    """Home page."""
    return _render(request)


@router.get("/{full_path:path}", response_class=HTMLResponse)
async def client_route(full_path: str, request: Request):
    """Client-side routes (/movies, /tv, /anime, /search) share the same page."""
    if full_path.startswith(RESERVED_PREFIXES):
        raise HTTPException(status_code=404, detail="Not found")
    return _render(request)
