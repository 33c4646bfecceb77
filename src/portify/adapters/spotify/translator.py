"""Translate Spotify payloads into engine types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portify.domain.ports import CandidateTrack

if TYPE_CHECKING:
    from .schema import SpotifyTrack, TrackSearchPage


def translate_track(track: SpotifyTrack) -> CandidateTrack | None:
    """Return a candidate for ``track``, or ``None`` when it cannot be added to a playlist."""

    if track.id is None or track.is_local:
        return None
    return CandidateTrack(
        id=track.id,
        artist_names=tuple(artist.name for artist in track.artists),
        title=track.name,
    )


def translate_search_page(page: TrackSearchPage) -> list[CandidateTrack]:
    candidates: list[CandidateTrack] = []
    for item in page.items:
        if item is None:
            continue
        candidate = translate_track(item)
        if candidate is not None:
            candidates.append(candidate)
    return candidates
