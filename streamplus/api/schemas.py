"""Pydantic schemas for API responses"""

from typing import Any

from pydantic import BaseModel


class ChannelResponse(BaseModel):
    """One playlist channel"""

    name: str
    group: str
    logo: str
    url: str


class PlayerURLResponse(BaseModel):
    """Embeddable player location"""

    url: str


class ErrorResponse(BaseModel):
    """Body of every failed request"""

    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    """Service status with cache diagnostics"""

    status: str
    version: str
    playlist_cache: dict[str, Any]
    catalog_cache: dict[str, Any]
