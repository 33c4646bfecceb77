"""Orchestrator for playlist reconciliation.

Stages run one after another, each consuming the full output of the
previous one: build queries, resolve candidates, commit batches, report.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from portify.domain.model import Matched

from .commit import DEFAULT_MAX_BATCH_SIZE, BatchCommitter
from .query import build_query
from .report import build_report
from .resolve import DEFAULT_SEARCH_PAGE_SIZE, CandidateResolver

if TYPE_CHECKING:
    from collections.abc import Sequence
    from threading import Event

    from portify.domain.model import NormalizedTrack, ReconciliationReport
    from portify.domain.ports import PlaylistMutator, TrackSearcher

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Match source tracks against the destination catalog and commit them."""

    searcher: TrackSearcher
    mutator: PlaylistMutator
    user_id: str
    playlist_id: str
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    search_page_size: int = DEFAULT_SEARCH_PAGE_SIZE
    max_workers: int = 1
    cancel_event: Event | None = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"Worker count must be positive, got {self.max_workers}")

    def reconcile(self, tracks: Sequence[NormalizedTrack]) -> ReconciliationReport:
        """Run all stages for ``tracks``; per-track and per-batch failures end up in the report."""

        queries = [build_query(track) for track in tracks]

        resolver = CandidateResolver(self.searcher, page_size=self.search_page_size)
        outcomes = resolver.resolve_all(
            queries,
            max_workers=self.max_workers,
            cancel_event=self.cancel_event,
        )
        matched_ids = [
            outcome.destination_track_id for outcome in outcomes if isinstance(outcome, Matched)
        ]
        log.info("Resolved %s of %s tracks", len(matched_ids), len(tracks))

        committer = BatchCommitter(
            self.mutator,
            user_id=self.user_id,
            playlist_id=self.playlist_id,
            max_batch_size=self.max_batch_size,
            max_workers=self.max_workers,
        )
        batch_results = committer.commit(matched_ids, cancel_event=self.cancel_event)
        log.info(
            "Committed %s batches to playlist %s (%s failed)",
            len(batch_results),
            self.playlist_id,
            sum(1 for result in batch_results if not result.success),
        )

        cancelled = self.cancel_event is not None and self.cancel_event.is_set()
        return build_report(tracks, outcomes, batch_results, cancelled=cancelled)
