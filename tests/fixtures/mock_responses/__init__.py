"""
Mock API Responses

Pre-defined mock responses for external service testing.
"""

from .m3u_playlists import (
    M3U_BASIC,
    M3U_MIXED,
    M3U_NO_HEADER,
)
from .tmdb_responses import (
    TMDB_MOVIE_CREDITS,
    TMDB_MOVIE_DETAILS,
    TMDB_MULTI_SEARCH,
    TMDB_PERSON,
    TMDB_POPULAR_MOVIES,
    TMDB_TRENDING,
)

__all__ = [
    "M3U_BASIC",
    "M3U_MIXED",
    "M3U_NO_HEADER",
    "TMDB_MOVIE_CREDITS",
    "TMDB_MOVIE_DETAILS",
    "TMDB_MULTI_SEARCH",
    "TMDB_PERSON",
    "TMDB_POPULAR_MOVIES",
    "TMDB_TRENDING",
]
