"""Lookup of export providers by platform name."""

from __future__ import annotations

from portify.config.errors import UnknownPlatformError

from .base import ExportProvider
from .tidal import TidalProvider

_PROVIDERS: dict[str, type[ExportProvider]] = {
    TidalProvider.name: TidalProvider,
}


def available_platforms() -> tuple[str, ...]:
    return tuple(sorted(_PROVIDERS))


def get_provider(name: str) -> ExportProvider:
    try:
        provider_cls = _PROVIDERS[name.strip().lower()]
    except KeyError:
        supported = ", ".join(available_platforms())
        raise UnknownPlatformError(
            f"Unsupported platform {name!r} (supported: {supported})"
        ) from None
    return provider_cls()
