"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars

DEFAULT_SPOTIFY_SCOPES = (
    "playlist-modify-public",
    "playlist-modify-private",
    "user-read-private",
)
DEFAULT_REQUESTS_TIMEOUT = 10.0


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    redirect_uri: str
    scope: tuple[str, ...] = field(default_factory=lambda: DEFAULT_SPOTIFY_SCOPES)
    cache_path: str | None = None
    market: str | None = None
    requests_timeout: float = DEFAULT_REQUESTS_TIMEOUT


def get_spotify_config(*, scope: tuple[str, ...] | None = None) -> SpotifyConfig:
    values = require_env_vars(
        (
            "SPOTIFY_CLIENT_ID",
            "SPOTIFY_CLIENT_SECRET",
            "SPOTIFY_REDIRECT_URI",
        )
    )
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        redirect_uri=values["SPOTIFY_REDIRECT_URI"],
        scope=scope or DEFAULT_SPOTIFY_SCOPES,
        cache_path=optional_env_var("SPOTIFY_CACHE_PATH"),
        market=optional_env_var("SPOTIFY_MARKET"),
    )
