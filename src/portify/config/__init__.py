"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_int_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError, UnknownPlatformError
from .logging import configure_logging
from .migration import (
    DEFAULT_PLATFORM,
    SPOTIFY_MAX_ITEMS_PER_ADD,
    SPOTIFY_MAX_SEARCH_LIMIT,
    MigrationConfig,
    get_migration_config,
)
from .spotify import DEFAULT_SPOTIFY_SCOPES, SpotifyConfig, get_spotify_config

__all__ = [
    "DEFAULT_PLATFORM",
    "DEFAULT_SPOTIFY_SCOPES",
    "SPOTIFY_MAX_ITEMS_PER_ADD",
    "SPOTIFY_MAX_SEARCH_LIMIT",
    "ConfigurationError",
    "MigrationConfig",
    "MissingConfigurationError",
    "SpotifyConfig",
    "UnknownPlatformError",
    "configure_logging",
    "get_migration_config",
    "get_spotify_config",
    "optional_env_var",
    "optional_int_env_var",
    "require_env_vars",
]
