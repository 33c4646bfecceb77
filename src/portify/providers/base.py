"""Common behaviour of source export providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, ClassVar

from portify.domain.errors import MalformedInputError

if TYPE_CHECKING:
    from collections.abc import Callable

    from portify.domain.model import NormalizedTrack, ReconciliationReport
    from portify.domain.reconciliation import ReconciliationEngine

log = getLogger(__name__)


class ExportProvider(ABC):
    """Reads one streaming service's export format into normalized tracks."""

    name: ClassVar[str]

    @abstractmethod
    def load_tracks(self, stream: BinaryIO) -> list[NormalizedTrack]:
        """Parse ``stream`` or raise ``MalformedInputError``."""

    def read_tracks(self, path: str | Path) -> list[NormalizedTrack]:
        source = Path(path)
        try:
            with source.open("rb") as handle:
                tracks = self.load_tracks(handle)
        except OSError as exc:
            raise MalformedInputError(f"Cannot read export file {source}: {exc}") from exc
        log.info("Loaded %s tracks from %s export %s", len(tracks), self.name, source)
        return tracks

    def import_playlist(
        self,
        source_path: str | Path,
        build_engine: Callable[[], ReconciliationEngine],
    ) -> ReconciliationReport:
        """Load the export, then reconcile it with an engine built on demand.

        The engine is only built once the export parsed, so a malformed file
        never reaches the destination service.
        """

        tracks = self.read_tracks(source_path)
        engine = build_engine()
        return engine.reconcile(tracks)
