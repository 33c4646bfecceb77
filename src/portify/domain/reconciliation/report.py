"""Aggregate per-track and per-batch outcomes into a report."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portify.domain.model import Matched, ReconciliationReport, Unmatched, UnmatchedTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from portify.domain.model import BatchResult, NormalizedTrack, ResolutionOutcome


def build_report(
    tracks: Sequence[NormalizedTrack],
    outcomes: Sequence[ResolutionOutcome],
    batch_results: Sequence[BatchResult],
    *,
    cancelled: bool = False,
) -> ReconciliationReport:
    if len(tracks) != len(outcomes):
        raise ValueError(f"Expected {len(tracks)} outcomes, got {len(outcomes)}")

    unmatched = tuple(
        UnmatchedTrack(track=track, reason=outcome.reason)
        for track, outcome in zip(tracks, outcomes, strict=True)
        if isinstance(outcome, Unmatched)
    )
    return ReconciliationReport(
        total=len(tracks),
        matched=sum(1 for outcome in outcomes if isinstance(outcome, Matched)),
        unmatched=unmatched,
        batch_results=tuple(sorted(batch_results, key=lambda result: result.batch.index)),
        cancelled=cancelled,
        outcomes=tuple(outcomes),
    )
