"""Value types flowing through the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal, TypeAlias


@dataclass(slots=True, frozen=True, kw_only=True)
class NormalizedTrack:
    """Lowercased source track record, created once per export entry."""

    primary_artist: str
    all_artist_names: tuple[str, ...]
    title: str

    def __post_init__(self) -> None:
        if self.primary_artist not in self.all_artist_names:
            raise ValueError(
                f"Primary artist {self.primary_artist!r} missing from artist names "
                f"{self.all_artist_names!r}"
            )


@dataclass(slots=True, frozen=True, kw_only=True)
class SearchQuery:
    artist_key: str
    query_text: str


class OutcomeStatus(StrEnum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"


class UnmatchedReason(StrEnum):
    """Reasons attached to tracks that were not resolved."""

    NO_CANDIDATES = "no candidates"
    NO_ARTIST_MATCH = "no artist-matching candidate"
    SEARCH_FAILED = "search request failed"
    CANCELLED = "run cancelled"


@dataclass(slots=True, frozen=True, kw_only=True)
class Matched:
    destination_track_id: str
    status: Literal[OutcomeStatus.MATCHED] = OutcomeStatus.MATCHED


@dataclass(slots=True, frozen=True, kw_only=True)
class Unmatched:
    reason: str
    status: Literal[OutcomeStatus.UNMATCHED] = OutcomeStatus.UNMATCHED


ResolutionOutcome: TypeAlias = Matched | Unmatched


@dataclass(slots=True, frozen=True)
class Batch:
    """Contiguous slice of matched destination ids submitted in one call."""

    index: int
    track_ids: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.track_ids:
            raise ValueError("Batch must contain at least one track id")

    def __len__(self) -> int:
        return len(self.track_ids)


@dataclass(slots=True, frozen=True, kw_only=True)
class BatchResult:
    batch: Batch
    success: bool
    error: str | None = None
    snapshot_id: str | None = None

    @property
    def track_ids(self) -> tuple[str, ...]:
        return self.batch.track_ids


@dataclass(slots=True, frozen=True)
class UnmatchedTrack:
    track: NormalizedTrack
    reason: str


@dataclass(slots=True, frozen=True, kw_only=True)
class ReconciliationReport:
    """Final summary of one reconciliation run.

    Unmatched entries keep source order. Batch results keep submission order
    (batch index), regardless of how the batches were scheduled.
    """

    total: int
    matched: int
    unmatched: tuple[UnmatchedTrack, ...] = ()
    batch_results: tuple[BatchResult, ...] = ()
    cancelled: bool = False
    outcomes: tuple[ResolutionOutcome, ...] = field(default=(), repr=False)

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)

    @property
    def failed_batches(self) -> tuple[BatchResult, ...]:
        return tuple(result for result in self.batch_results if not result.success)

    @property
    def committed_count(self) -> int:
        return sum(len(result.batch) for result in self.batch_results if result.success)

    @property
    def succeeded(self) -> bool:
        return not self.cancelled and not self.failed_batches
