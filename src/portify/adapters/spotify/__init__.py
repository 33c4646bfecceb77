"""Spotify adapter package."""

from __future__ import annotations

from .client import SpotifyClient
from .schema import (
    CurrentUser,
    PlaylistSnapshot,
    SpotifyArtist,
    SpotifyTrack,
    TrackSearchPage,
    TrackSearchResponse,
)
from .translator import translate_search_page, translate_track

__all__ = [
    "CurrentUser",
    "PlaylistSnapshot",
    "SpotifyArtist",
    "SpotifyClient",
    "SpotifyTrack",
    "TrackSearchPage",
    "TrackSearchResponse",
    "translate_search_page",
    "translate_track",
]
