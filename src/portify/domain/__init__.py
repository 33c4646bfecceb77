"""Domain types, ports and the reconciliation engine."""

from __future__ import annotations

from .errors import MalformedInputError
from .model import (
    Batch,
    BatchResult,
    Matched,
    NormalizedTrack,
    OutcomeStatus,
    ReconciliationReport,
    ResolutionOutcome,
    SearchQuery,
    Unmatched,
    UnmatchedReason,
    UnmatchedTrack,
)

__all__ = [
    "Batch",
    "BatchResult",
    "MalformedInputError",
    "Matched",
    "NormalizedTrack",
    "OutcomeStatus",
    "ReconciliationReport",
    "ResolutionOutcome",
    "SearchQuery",
    "Unmatched",
    "UnmatchedReason",
    "UnmatchedTrack",
]
