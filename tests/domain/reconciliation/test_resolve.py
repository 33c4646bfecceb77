from __future__ import annotations

import threading

import pytest

from portify.domain.model import Matched, SearchQuery, Unmatched, UnmatchedReason
from portify.domain.ports import SearchError
from portify.domain.reconciliation import CandidateResolver, select_candidate
from tests.support.fakes import FakeSearcher, candidate


def _query(text: str, artist: str = "slaughter to prevail") -> SearchQuery:
    return SearchQuery(artist_key=artist, query_text=text)


def test_first_artist_matching_candidate_in_ranking_order_wins() -> None:
    searcher = FakeSearcher(
        responses={
            "demolisher": [
                candidate("cover", "Metal Covers Inc"),
                candidate("original", "Slaughter To Prevail", "Alex Terrible"),
                candidate("live", "Slaughter To Prevail"),
            ]
        }
    )

    outcome = CandidateResolver(searcher)(_query("demolisher"))

    assert outcome == Matched(destination_track_id="original")


def test_membership_is_case_insensitive() -> None:
    searcher = FakeSearcher(responses={"q": [candidate("id-1", "SLAUGHTER TO PREVAIL")]})

    assert CandidateResolver(searcher)(_query("q")) == Matched(destination_track_id="id-1")


def test_partial_artist_name_does_not_match() -> None:
    searcher = FakeSearcher(
        responses={
            "q": [
                candidate("id-1", "Slaughter"),
                candidate("id-2", "Slaughter To Prevail Tribute"),
            ]
        }
    )

    outcome = CandidateResolver(searcher)(_query("q"))

    assert outcome == Unmatched(reason=UnmatchedReason.NO_ARTIST_MATCH)
    assert outcome.reason == "no artist-matching candidate"


def test_empty_result_is_no_candidates() -> None:
    outcome = CandidateResolver(FakeSearcher())(_query("nothing"))

    assert outcome == Unmatched(reason="no candidates")


def test_search_failure_is_recorded_not_raised() -> None:
    searcher = FakeSearcher(responses={"q": SearchError("429 Too Many Requests")})

    outcome = CandidateResolver(searcher)(_query("q"))

    assert outcome == Unmatched(reason="search request failed")


def test_search_requests_configured_page_size() -> None:
    searcher = FakeSearcher()

    CandidateResolver(searcher, page_size=20)(_query("q"))

    assert searcher.calls == [("q", 20, 0)]


def test_invalid_page_size_is_rejected() -> None:
    with pytest.raises(ValueError, match="page size"):
        CandidateResolver(FakeSearcher(), page_size=0)


def test_select_candidate_returns_none_without_member() -> None:
    candidates = [candidate("a", "Someone Else")]

    assert select_candidate(candidates, "slaughter to prevail") is None


def test_resolve_all_continues_after_failures_in_input_order() -> None:
    searcher = FakeSearcher(
        responses={
            "one": SearchError("boom"),
            "two": [candidate("id-2", "Slaughter To Prevail")],
            "three": [candidate("id-3", "Other")],
        }
    )
    queries = [_query("one"), _query("two"), _query("three")]

    outcomes = CandidateResolver(searcher).resolve_all(queries)

    assert outcomes == [
        Unmatched(reason=UnmatchedReason.SEARCH_FAILED),
        Matched(destination_track_id="id-2"),
        Unmatched(reason=UnmatchedReason.NO_ARTIST_MATCH),
    ]
    assert [call[0] for call in searcher.calls] == ["one", "two", "three"]


def test_concurrent_resolution_keeps_input_order() -> None:
    texts = [f"q{index}" for index in range(8)]
    searcher = FakeSearcher(
        responses={text: [candidate(f"id-{text}", "Slaughter To Prevail")] for text in texts},
        # earlier queries finish last
        delays={text: 0.01 * (len(texts) - index) for index, text in enumerate(texts)},
    )

    outcomes = CandidateResolver(searcher).resolve_all(
        [_query(text) for text in texts],
        max_workers=4,
    )

    assert outcomes == [Matched(destination_track_id=f"id-{text}") for text in texts]


def test_cancellation_marks_remaining_queries() -> None:
    cancel = threading.Event()
    searcher = FakeSearcher(
        responses={"first": [candidate("id-1", "Slaughter To Prevail")]},
        on_search=lambda _text: cancel.set(),
    )

    outcomes = CandidateResolver(searcher).resolve_all(
        [_query("first"), _query("second"), _query("third")],
        cancel_event=cancel,
    )

    assert outcomes == [
        Matched(destination_track_id="id-1"),
        Unmatched(reason=UnmatchedReason.CANCELLED),
        Unmatched(reason=UnmatchedReason.CANCELLED),
    ]
    assert len(searcher.calls) == 1
