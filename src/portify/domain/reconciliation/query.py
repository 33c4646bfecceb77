"""Turn normalized tracks into catalog search queries."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from portify.domain.model import SearchQuery

if TYPE_CHECKING:
    from portify.domain.model import NormalizedTrack

_FEATURE_OPENER = re.compile(r"\(feat\.\s*", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def sanitize_query_text(text: str) -> str:
    """Strip ``(feat. ...)`` annotations and stray closing parentheses.

    Removed fragments are replaced by a space so no new annotation can be
    formed across the cut, which keeps the function idempotent.
    """

    cleaned = _FEATURE_OPENER.sub(" ", text).replace(")", " ")
    return _WHITESPACE.sub(" ", cleaned).strip()


def build_query(track: NormalizedTrack) -> SearchQuery:
    raw = " ".join((*track.all_artist_names, track.title))
    return SearchQuery(artist_key=track.primary_artist, query_text=sanitize_query_text(raw))
