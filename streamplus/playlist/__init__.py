"""
Playlist ingestion

Turns a remote M3U playlist into a deduplicated JSON channel list.
"""

from streamplus.playlist.parser import Channel, M3UParser, dedupe_by_url, filter_by_name
from streamplus.playlist.service import PlaylistService

__all__ = [
    "Channel",
    "M3UParser",
    "PlaylistService",
    "dedupe_by_url",
    "filter_by_name",
]
