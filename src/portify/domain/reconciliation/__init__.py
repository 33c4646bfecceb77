"""Reconciliation engine for migrating exported tracks into a destination playlist.

Flow:
1) build a sanitized search query per normalized track
2) resolve each query through catalog search and artist membership
3) commit matched destination ids in bounded, independent batches
4) aggregate outcomes into a report
"""

from __future__ import annotations

from .commit import DEFAULT_MAX_BATCH_SIZE, BatchCommitter, partition
from .engine import ReconciliationEngine
from .query import build_query, sanitize_query_text
from .report import build_report
from .resolve import DEFAULT_SEARCH_PAGE_SIZE, CandidateResolver, select_candidate

__all__ = [
    "DEFAULT_MAX_BATCH_SIZE",
    "DEFAULT_SEARCH_PAGE_SIZE",
    "BatchCommitter",
    "CandidateResolver",
    "ReconciliationEngine",
    "build_query",
    "build_report",
    "partition",
    "sanitize_query_text",
    "select_candidate",
]
