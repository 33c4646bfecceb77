"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from portify.adapters.spotify import SpotifyClient
from portify.config import get_spotify_config
from portify.domain.reconciliation import ReconciliationEngine
from portify.providers import get_provider

if TYPE_CHECKING:
    from threading import Event

    from portify.config import MigrationConfig, SpotifyConfig
    from portify.domain.model import ReconciliationReport


log = getLogger(__name__)


def migrate_playlist(
    config: MigrationConfig,
    *,
    spotify_config: SpotifyConfig | None = None,
    client: SpotifyClient | None = None,
    cancel_event: Event | None = None,
) -> ReconciliationReport:
    """Import an exported playlist into a Spotify playlist using the configured adapters."""

    provider = get_provider(config.platform)
    log.info(
        "Starting %s import into playlist %s: batch_size=%s, page_size=%s, workers=%s",
        provider.name,
        config.playlist_id,
        config.max_batch_size,
        config.search_page_size,
        config.max_workers,
    )

    def build_engine() -> ReconciliationEngine:
        destination = client or SpotifyClient(config=spotify_config or get_spotify_config())
        user_id = destination.current_user_id()
        log.debug("Authenticated as Spotify user %s", user_id)
        return ReconciliationEngine(
            searcher=destination,
            mutator=destination,
            user_id=user_id,
            playlist_id=config.playlist_id,
            max_batch_size=config.max_batch_size,
            search_page_size=config.search_page_size,
            max_workers=config.max_workers,
            cancel_event=cancel_event,
        )

    report = provider.import_playlist(config.source_file_path, build_engine)

    log.info(
        "Finished %s import: total=%s, matched=%s, committed=%s, cancelled=%s",
        provider.name,
        report.total,
        report.matched,
        report.committed_count,
        report.cancelled,
    )
    return report
