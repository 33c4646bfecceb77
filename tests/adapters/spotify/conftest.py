"""Shared fixtures for Spotify adapter tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from portify.adapters.spotify.client import SpotifyClient
from portify.config.spotify import SpotifyConfig

SpotifyPayload = dict[str, object]
FIXTURES = Path(__file__).resolve().parents[2] / "data" / "spotify"


def _load_fixture(name: str) -> SpotifyPayload:
    return json.loads((FIXTURES / name).read_text())


class FakeSpotipyClient:
    def __init__(self, search_payload: SpotifyPayload) -> None:
        self._search_payload = search_payload
        self.search_error: Exception | None = None
        self.add_error: Exception | None = None
        self.searches: list[dict[str, object]] = []
        self.additions: list[tuple[str, list[str]]] = []
        self.user_requests = 0

    def current_user(self) -> SpotifyPayload:
        self.user_requests += 1
        return {"id": "spotify-user", "display_name": "Listener", "country": "DE"}

    def search(
        self,
        q: str,
        limit: int = 10,
        offset: int = 0,
        type: str = "track",  # noqa: A002
        market: str | None = None,
    ) -> SpotifyPayload:
        self.searches.append(
            {"q": q, "limit": limit, "offset": offset, "type": type, "market": market}
        )
        if self.search_error is not None:
            raise self.search_error
        return self._search_payload

    def playlist_add_items(self, playlist_id: str, items: list[str]) -> SpotifyPayload:
        self.additions.append((playlist_id, items))
        if self.add_error is not None:
            raise self.add_error
        return {"snapshot_id": f"snap-{len(self.additions)}"}


@pytest.fixture
def search_payload() -> SpotifyPayload:
    return _load_fixture("search_tracks.json")


@pytest.fixture
def fake_spotify_client(search_payload: SpotifyPayload) -> FakeSpotipyClient:
    return FakeSpotipyClient(search_payload)


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(
        client_id="x",
        client_secret="y",  # noqa: S106
        redirect_uri="http://localhost",
        market="DE",
    )


@pytest.fixture
def spotipy_client(
    spotify_config: SpotifyConfig, fake_spotify_client: FakeSpotipyClient
) -> SpotifyClient:
    return SpotifyClient(config=spotify_config, client=fake_spotify_client)  # type: ignore[arg-type]
