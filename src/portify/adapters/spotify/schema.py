"""Minimal Pydantic models for the Spotify Web API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyArtist(SpotifyBaseModel):
    id: str | None = None
    name: str


class SpotifyTrack(SpotifyBaseModel):
    id: str | None = None
    name: str
    is_local: bool = False
    artists: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])


class SpotifyPage(SpotifyBaseModel):
    href: str | None = None
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    previous: str | None = None
    total: int | None = None


class TrackSearchPage(SpotifyPage):
    # Spotify occasionally returns null entries in search pages
    items: list[SpotifyTrack | None] = Field(default_factory=list["SpotifyTrack | None"])


class TrackSearchResponse(SpotifyBaseModel):
    tracks: TrackSearchPage


class PlaylistSnapshot(SpotifyBaseModel):
    snapshot_id: str | None = None


class CurrentUser(SpotifyBaseModel):
    id: str
    display_name: str | None = None
