"""Spotipy-based client wrapper for catalog search and playlist updates."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import requests
import spotipy
from pydantic import ValidationError
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyOauthError, SpotifyOAuth

from portify.config.migration import SPOTIFY_MAX_ITEMS_PER_ADD
from portify.domain.ports import MutationAck, MutationError, SearchError

from .schema import CurrentUser, PlaylistSnapshot, TrackSearchResponse
from .translator import translate_search_page

if TYPE_CHECKING:
    from collections.abc import Sequence

    from portify.config.spotify import SpotifyConfig
    from portify.domain.ports import CandidateTrack

_REQUEST_ERRORS = (SpotifyException, SpotifyOauthError, requests.RequestException)

log = getLogger(__name__)


class SpotifyClient:
    """Small wrapper around spotipy.Spotify implementing the search and mutation ports."""

    def __init__(self, *, config: SpotifyConfig, client: spotipy.Spotify | None = None) -> None:
        if client is None:
            auth_manager = SpotifyOAuth(
                client_id=config.client_id,
                client_secret=config.client_secret,
                redirect_uri=config.redirect_uri,
                scope=" ".join(config.scope),
                cache_path=config.cache_path,
            )
            client = spotipy.Spotify(
                auth_manager=auth_manager,
                requests_timeout=config.requests_timeout,
            )
        self._client = client
        self._market = config.market

    def current_user_id(self) -> str:
        raw_payload = self._client.current_user()  # pyright: ignore[reportUnknownMemberType]
        return CurrentUser.model_validate(raw_payload).id

    def search(
        self,
        query_text: str,
        *,
        page_size: int,
        offset: int = 0,
    ) -> list[CandidateTrack]:
        try:
            raw_payload = self._client.search(  # pyright: ignore[reportUnknownMemberType]
                q=query_text,
                limit=page_size,
                offset=offset,
                type="track",
                market=self._market,
            )
            payload = TrackSearchResponse.model_validate(raw_payload)
        except (*_REQUEST_ERRORS, ValidationError) as exc:
            raise SearchError(f"Search for {query_text!r} failed: {exc}") from exc
        return translate_search_page(payload.tracks)

    def add_tracks_to_playlist(
        self,
        user_id: str,
        playlist_id: str,
        track_ids: Sequence[str],
    ) -> MutationAck:
        if len(track_ids) > SPOTIFY_MAX_ITEMS_PER_ADD:
            raise ValueError(
                f"Spotify accepts at most {SPOTIFY_MAX_ITEMS_PER_ADD} tracks per call, "
                f"got {len(track_ids)}"
            )
        log.debug(
            "Adding %s tracks to playlist %s for user %s", len(track_ids), playlist_id, user_id
        )
        try:
            raw_payload = self._client.playlist_add_items(  # pyright: ignore[reportUnknownMemberType]
                playlist_id,
                list(track_ids),
            )
            payload = PlaylistSnapshot.model_validate(raw_payload)
        except (*_REQUEST_ERRORS, ValidationError) as exc:
            raise MutationError(f"Adding tracks to playlist {playlist_id} failed: {exc}") from exc
        return MutationAck(snapshot_id=payload.snapshot_id)
