"""
Stream+ - IPTV playlist and movie catalog proxy

- Fetches a remote M3U playlist and serves it as a JSON channel list
- Proxies TMDB catalog queries behind a TTL/LRU cache
- Serves a single-page browsing client
"""

__version__ = "1.0.0"
__license__ = "MIT"

from streamplus.config import get_config, load_config

__all__ = [
    "__version__",
    "get_config",
    "load_config",
]
