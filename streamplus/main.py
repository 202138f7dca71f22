"""
Stream+ Main Application

FastAPI application entry point serving the playlist proxy, the TMDB
catalog proxy and the single-page client.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.gzip import GZipMiddleware

from streamplus import __version__
from streamplus.cache import MemoryCache, SnapshotCache
from streamplus.catalog import CatalogService, TMDBClient
from streamplus.config import StreamPlusConfig, get_config, load_config
from streamplus.exceptions import ProxyError
from streamplus.middleware import (
    ErrorHandlingMiddleware,
    ResponseHeadersMiddleware,
    TimingMiddleware,
)
from streamplus.middleware.errors import internal_error_response
from streamplus.playlist import PlaylistService

# Logger
logger = logging.getLogger(__name__)


def build_playlist_service(config: StreamPlusConfig) -> PlaylistService:
    """Playlist service with its whole-dataset cache."""
    cache = SnapshotCache(
        ttl=config.playlist.ttl_seconds,
        dedupe_inflight=config.playlist.dedupe_inflight,
    )
    return PlaylistService(
        playlist_url=config.playlist.url,
        cache=cache,
        timeout=config.playlist.timeout,
    )


def build_catalog_service(config: StreamPlusConfig) -> CatalogService:
    """Catalog service with its keyed LRU cache."""
    catalog = config.catalog
    client = TMDBClient(
        api_key=catalog.api_key,
        language=catalog.language,
        base_url=catalog.base_url,
        timeout=catalog.timeout,
    )
    cache = MemoryCache(
        default_ttl=catalog.cache_ttl,
        max_entries=catalog.max_entries,
        dedupe_inflight=catalog.dedupe_inflight,
    )
    return CatalogService(client=client, cache=cache, ttl=catalog.cache_ttl)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Caches and upstream clients live exactly as long as the application:
    they are built here on startup and closed here on shutdown.
    """
    config: StreamPlusConfig = app.state.config
    logger.info(f"Starting Stream+ v{__version__}")

    app.state.playlist_service = build_playlist_service(config)
    app.state.catalog_service = build_catalog_service(config)

    if not config.playlist.url:
        logger.warning("No playlist URL configured; /playlist will answer 502")
    if not config.catalog.api_key:
        logger.warning("TMDB API key not configured; catalog queries will answer 502")

    logger.info(
        f"Playlist cache TTL {config.playlist.ttl_seconds}s, "
        f"catalog cache TTL {config.catalog.cache_ttl}s / {config.catalog.max_entries} entries"
    )

    yield

    try:
        await app.state.playlist_service.aclose()
    except Exception as e:
        logger.warning(f"Error closing playlist client: {e}")

    try:
        await app.state.catalog_service.close()
    except Exception as e:
        logger.warning(f"Error closing TMDB client: {e}")

    logger.info("Stream+ shutdown complete")


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    """Map a proxy failure to its JSON body and status."""
    logger.warning(
        f"{request.method} {request.url.path} failed with {exc.status_code}: "
        f"{exc.message}" + (f" ({exc.details})" if exc.details else "")
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Errors raised outside ErrorHandlingMiddleware, such as in the middleware itself."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return internal_error_response()


def create_app(config: Optional[StreamPlusConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Configuration to use; defaults to the loaded global config.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_config()

    app = FastAPI(
        debug=config.server.debug,
        title="Stream+",
        description="IPTV playlist and TMDB catalog proxy",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.config = config

    templates_path = Path(__file__).parent / "templates"
    app.state.templates = Jinja2Templates(directory=templates_path)

    app.add_exception_handler(ProxyError, proxy_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Last added runs first: CORS must see preflights before anything else
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(ResponseHeadersMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=500, compresslevel=9)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    from streamplus.api import catalog_router, health_router, pages_router, playlist_router

    app.include_router(playlist_router)
    app.include_router(catalog_router)
    app.include_router(health_router)
    # Catch-all client routes go last
    app.include_router(pages_router)

    return app


def main() -> None:
    """
    Main entry point for running the server.

    Called by the ``streamplus`` console script.
    """
    import uvicorn
    from streamplus.utils.logging_setup import parse_size, setup_logging

    config = load_config()

    setup_logging(
        log_level=config.logging.level,
        log_file_name=config.logging.file,
        log_to_console=True,
        log_to_file=True,
        max_bytes=parse_size(config.logging.max_size),
        backup_count=config.logging.backup_count,
        log_format=config.logging.format,
    )

    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
    )


if __name__ == "__main__":
    main()
