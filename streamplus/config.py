"""
Configuration management for Stream+.

Handles loading, validation, and access to application configuration.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

# Global configuration instance
_config: Optional["StreamPlusConfig"] = None


class ServerConfig(BaseModel):
    """Server configuration."""
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"


class PlaylistConfig(BaseModel):
    """Remote M3U playlist settings."""
    url: str = ""
    ttl_seconds: int = 6 * 60 * 60
    timeout: Optional[float] = 60.0  # None = no deadline
    dedupe_inflight: bool = True


class CatalogConfig(BaseModel):
    """TMDB catalog proxy settings."""
    base_url: str = "https://api.themoviedb.org/3"
    image_base_url: str = "https://image.tmdb.org/t/p"
    api_key: str = ""
    language: str = "pt-BR"
    timeout: float = 3.0
    cache_ttl: int = 300
    max_entries: int = 100  # <= 0 disables the LRU bound
    dedupe_inflight: bool = True


class PlayerConfig(BaseModel):
    """Embedded player base URLs, one per media type."""
    movie_url: str = "https://playerflixapi.com/filme/"
    tv_url: str = "https://playerflixapi.com/serie/"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file: str = "logs/streamplus.log"
    max_size: str = "10MB"
    backup_count: int = 5
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StreamPlusConfig(BaseModel):
    """Main Stream+ configuration."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    playlist: PlaylistConfig = Field(default_factory=PlaylistConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    player: PlayerConfig = Field(default_factory=PlayerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> StreamPlusConfig:
    """
    Load configuration from file.

    Args:
        config_path: Path to config file. Defaults to config.yaml in the
            working directory or project root.

    Returns:
        Loaded and validated configuration.
    """
    global _config

    if config_path is None:
        possible_paths = [
            Path("config.yaml"),
            Path(__file__).parent.parent / "config.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data: dict[str, Any] = {}

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

    # Apply environment variable overrides
    env_overrides = _get_env_overrides()
    _deep_merge(config_data, env_overrides)

    _config = StreamPlusConfig(**config_data)
    return _config


def get_config() -> StreamPlusConfig:
    """
    Get the current configuration.

    Returns:
        Current configuration (loads default if not yet loaded).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> StreamPlusConfig:
    """Drop the cached configuration and load it again from disk."""
    global _config
    _config = None
    return load_config()


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    # Later entries win, so STREAMPLUS_PORT beats the platform-provided PORT
    env_map = [
        ("PORT", ("server", "port")),
        ("STREAMPLUS_HOST", ("server", "host")),
        ("STREAMPLUS_PORT", ("server", "port")),
        ("STREAMPLUS_DEBUG", ("server", "debug")),
        ("STREAMPLUS_LOG_LEVEL", ("logging", "level")),
        ("STREAMPLUS_M3U_URL", ("playlist", "url")),
        ("TMDB_API_KEY", ("catalog", "api_key")),
    ]

    for env_var, path in env_map:
        value = os.environ.get(env_var)
        if value is None:
            continue
        # Credentials and URLs are kept verbatim
        if path[-1] in ("api_key", "url"):
            _set_nested(overrides, path, value)
        else:
            _set_nested(overrides, path, _parse_env_value(value))

    return overrides


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate type."""
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _set_nested(d: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Set a nested dictionary value from a path tuple."""
    for key in path[:-1]:
        d = d.setdefault(key, {})
    d[path[-1]] = value


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Deep merge override into base dictionary."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
