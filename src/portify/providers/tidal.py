"""Tidal favourites/playlist export provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from portify.domain.errors import MalformedInputError
from portify.domain.model import NormalizedTrack

from .base import ExportProvider

if TYPE_CHECKING:
    from collections.abc import Iterable


class TidalBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class TidalArtist(TidalBaseModel):
    id: int | None = None
    name: str
    type: str | None = None


class TidalAlbum(TidalBaseModel):
    id: int | None = None
    title: str | None = None
    release_date: str | None = None


class TidalTrack(TidalBaseModel):
    id: int | None = None
    title: str
    version: str | None = None
    duration: int | None = None
    isrc: str | None = None
    artist: TidalArtist
    artists: list[TidalArtist] = Field(default_factory=list["TidalArtist"])
    album: TidalAlbum | None = None


class TidalExportItem(TidalBaseModel):
    item: TidalTrack
    type: str | None = None


class TidalExport(TidalBaseModel):
    limit: int | None = None
    offset: int | None = None
    total_number_of_items: int | None = None
    items: list[TidalExportItem]


def _normalize_text(value: str) -> str:
    return value.strip().lower()


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def normalize_track(track: TidalTrack) -> NormalizedTrack:
    """Lowercase ``track`` and make sure its primary artist is listed."""

    primary = _normalize_text(track.artist.name)
    title = _normalize_text(track.title)
    if not primary:
        raise MalformedInputError(f"Track {track.id} has no primary artist name")
    if not title:
        raise MalformedInputError(f"Track {track.id} has no title")

    names = _unique(_normalize_text(artist.name) for artist in track.artists)
    if primary not in names:
        names.insert(0, primary)
    return NormalizedTrack(primary_artist=primary, all_artist_names=tuple(names), title=title)


def parse_tidal_export(data: bytes | str) -> TidalExport:
    try:
        return TidalExport.model_validate_json(data)
    except ValidationError as exc:
        raise MalformedInputError(f"Invalid Tidal export: {exc}") from exc


class TidalProvider(ExportProvider):
    name = "tidal"

    def load_tracks(self, stream: BinaryIO) -> list[NormalizedTrack]:
        export = parse_tidal_export(stream.read())
        return [normalize_track(entry.item) for entry in export.items]
