"""Ports for the destination catalog and playlist services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


class SearchError(RuntimeError):
    """Raised by a searcher when the catalog search call fails."""


class MutationError(RuntimeError):
    """Raised by a mutator when adding tracks to a playlist fails."""


@dataclass(slots=True, frozen=True)
class CandidateTrack:
    """Catalog search hit reduced to what disambiguation needs."""

    id: str
    artist_names: tuple[str, ...]
    title: str | None = None
    _artist_keys: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        keys = frozenset(name.strip().lower() for name in self.artist_names)
        object.__setattr__(self, "_artist_keys", keys)

    def has_artist(self, artist_key: str) -> bool:
        """Exact, case-insensitive membership of ``artist_key`` among the artists."""

        return artist_key.lower() in self._artist_keys


@dataclass(slots=True, frozen=True)
class MutationAck:
    snapshot_id: str | None = None


@runtime_checkable
class TrackSearcher(Protocol):
    """Catalog search returning candidates in the service's ranking order."""

    def search(
        self,
        query_text: str,
        *,
        page_size: int,
        offset: int = 0,
    ) -> Sequence[CandidateTrack]: ...


@runtime_checkable
class PlaylistMutator(Protocol):
    """Appends destination track ids to a playlist in one call."""

    def add_tracks_to_playlist(
        self,
        user_id: str,
        playlist_id: str,
        track_ids: Sequence[str],
    ) -> MutationAck: ...


__all__ = [
    "CandidateTrack",
    "MutationAck",
    "MutationError",
    "PlaylistMutator",
    "SearchError",
    "TrackSearcher",
]
