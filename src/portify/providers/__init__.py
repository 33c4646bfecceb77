"""Source export providers."""

from __future__ import annotations

from .base import ExportProvider
from .registry import available_platforms, get_provider
from .tidal import TidalExport, TidalProvider, normalize_track, parse_tidal_export

__all__ = [
    "ExportProvider",
    "TidalExport",
    "TidalProvider",
    "available_platforms",
    "get_provider",
    "normalize_track",
    "parse_tidal_export",
]
