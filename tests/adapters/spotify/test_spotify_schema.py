"""Schema validation for captured Spotify payloads."""

from __future__ import annotations

from portify.adapters.spotify.schema import PlaylistSnapshot, TrackSearchResponse


def test_schema_accepts_search_payload(search_payload: dict[str, object]) -> None:
    parsed = TrackSearchResponse.model_validate(search_payload)

    assert len(parsed.tracks.items) == 4
    assert parsed.tracks.items[1] is None
    first = parsed.tracks.items[0]
    assert first is not None
    assert [artist.name for artist in first.artists] == ["Slaughter To Prevail", "Alex Terrible"]


def test_schema_accepts_local_tracks_without_id(search_payload: dict[str, object]) -> None:
    parsed = TrackSearchResponse.model_validate(search_payload)

    local = parsed.tracks.items[2]
    assert local is not None
    assert local.id is None
    assert local.is_local


def test_snapshot_payload() -> None:
    assert PlaylistSnapshot.model_validate({"snapshot_id": "abc"}).snapshot_id == "abc"
