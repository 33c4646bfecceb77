"""Resolve search queries to destination catalog tracks.

Disambiguation is an exact, case-insensitive artist membership test. The
first qualifying candidate in the search service's own ranking wins; no
similarity scoring is applied.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from logging import getLogger
from typing import TYPE_CHECKING

from portify.domain.model import Matched, ResolutionOutcome, Unmatched, UnmatchedReason
from portify.domain.ports import SearchError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from threading import Event

    from portify.domain.model import SearchQuery
    from portify.domain.ports import CandidateTrack, TrackSearcher

DEFAULT_SEARCH_PAGE_SIZE = 50

log = getLogger(__name__)


def select_candidate(
    candidates: Sequence[CandidateTrack],
    artist_key: str,
) -> CandidateTrack | None:
    """Return the first candidate listing ``artist_key`` among its artists."""

    for candidate in candidates:
        if candidate.has_artist(artist_key):
            return candidate
    return None


class CandidateResolver:
    """Issue one catalog search per query and classify the result."""

    def __init__(
        self,
        searcher: TrackSearcher,
        *,
        page_size: int = DEFAULT_SEARCH_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"Search page size must be positive, got {page_size}")
        self._searcher = searcher
        self._page_size = page_size

    def __call__(self, query: SearchQuery) -> ResolutionOutcome:
        try:
            candidates = self._searcher.search(query.query_text, page_size=self._page_size)
        except SearchError as exc:
            log.warning("Search failed for %r: %s", query.query_text, exc)
            return Unmatched(reason=UnmatchedReason.SEARCH_FAILED)

        if not candidates:
            log.debug("No candidates for %r", query.query_text)
            return Unmatched(reason=UnmatchedReason.NO_CANDIDATES)

        candidate = select_candidate(candidates, query.artist_key)
        if candidate is None:
            log.debug(
                "None of %s candidates for %r list artist %r",
                len(candidates),
                query.query_text,
                query.artist_key,
            )
            return Unmatched(reason=UnmatchedReason.NO_ARTIST_MATCH)

        log.debug("Matched %r to %s", query.query_text, candidate.id)
        return Matched(destination_track_id=candidate.id)

    def resolve_all(
        self,
        queries: Sequence[SearchQuery],
        *,
        max_workers: int = 1,
        cancel_event: Event | None = None,
    ) -> list[ResolutionOutcome]:
        """Resolve every query, returning outcomes in input order.

        Queries not yet started when ``cancel_event`` is set are recorded as
        cancelled, so the result always has one outcome per query.
        """

        if max_workers <= 1:
            outcomes: list[ResolutionOutcome] = []
            for query in queries:
                outcomes.append(self._resolve_unless_cancelled(query, cancel_event))
            return outcomes

        slots: list[ResolutionOutcome | None] = [None] * len(queries)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(self._resolve_unless_cancelled, query, cancel_event): index
                for index, query in enumerate(queries)
            }
            for future, index in futures.items():
                slots[index] = future.result()
        return [outcome for outcome in slots if outcome is not None]

    def _resolve_unless_cancelled(
        self,
        query: SearchQuery,
        cancel_event: Event | None,
    ) -> ResolutionOutcome:
        if cancel_event is not None and cancel_event.is_set():
            return Unmatched(reason=UnmatchedReason.CANCELLED)
        return self(query)
