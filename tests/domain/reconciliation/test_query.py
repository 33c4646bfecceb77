from __future__ import annotations

import pytest

from portify.domain.reconciliation import build_query, sanitize_query_text
from tests.support.fakes import make_track


def test_feature_annotation_is_stripped_from_query() -> None:
    track = make_track("Slaughter to Prevail", "Demolisher (feat. X)")

    query = build_query(track)

    assert query.query_text == "slaughter to prevail demolisher x"
    assert query.artist_key == "slaughter to prevail"


def test_query_joins_all_artists_before_title() -> None:
    track = make_track("Run The Jewels", "Ooh LA LA", "Greg Nice", "DJ Premier")

    query = build_query(track)

    assert query.query_text == "run the jewels greg nice dj premier ooh la la"


def test_artist_key_is_not_sanitized() -> None:
    track = make_track("Sunn O)))", "Aghartha")

    query = build_query(track)

    assert query.artist_key == "sunn o)))"
    assert query.query_text == "sunn o aghartha"


@pytest.mark.parametrize(
    "text",
    [
        "demolisher (feat. x)",
        "song (feat.x) (remix)",
        "(fe(feat. at. y)",
        "a  (FEAT. b)) c",
        "plain title",
        "",
    ],
)
def test_sanitize_is_idempotent(text: str) -> None:
    once = sanitize_query_text(text)

    assert sanitize_query_text(once) == once
    assert "(feat." not in once.lower()
    assert ")" not in once


def test_other_parentheticals_keep_their_text() -> None:
    assert sanitize_query_text("throne (remastered)") == "throne (remastered"
