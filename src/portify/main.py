#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from threading import Event
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from portify.app import migrate_playlist
from portify.config import (
    DEFAULT_PLATFORM,
    ConfigurationError,
    configure_logging,
    get_migration_config,
    get_spotify_config,
)
from portify.providers import available_platforms, get_provider

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from portify.domain.model import ReconciliationReport

EXIT_INCOMPLETE = 3

log = logging.getLogger(__name__)

_cancel_event = Event()


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Migrate a streaming service playlist export into a Spotify playlist"
    )
    parser.add_argument(
        "--platform",
        type=str,
        default=DEFAULT_PLATFORM,
        help=f"Source platform of the export ({', '.join(available_platforms())}; "
        "default: %(default)s)",
    )
    parser.add_argument(
        "--file",
        dest="source_file",
        type=str,
        required=True,
        help="Path to the exported playlist JSON file",
    )
    parser.add_argument(
        "--playlist-id",
        type=str,
        required=True,
        help="Spotify playlist id to add matched tracks to",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Number of tracks added per playlist request (defaults to config)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Number of search results requested per track (defaults to config)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of concurrent search/add requests (defaults to 1)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_INCOMPLETE} if the run was cancelled or anything failed",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _log_report(report: ReconciliationReport) -> None:
    log.info(
        "Matched %s of %s tracks, %s unmatched, %s of %s batches failed",
        report.matched,
        report.total,
        report.unmatched_count,
        len(report.failed_batches),
        len(report.batch_results),
    )
    for entry in report.unmatched:
        track = entry.track
        log.warning(
            "Unmatched: %s - %s (%s)",
            ", ".join(track.all_artist_names),
            track.title,
            entry.reason,
        )
    for result in report.failed_batches:
        log.error(
            "Batch %s failed (%s tracks): %s",
            result.batch.index,
            len(result.batch),
            result.error,
        )
    if report.cancelled:
        log.warning("Run was cancelled before all tracks were processed")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        get_provider(parsed_args.platform)  # reject unknown platforms up front
        config = get_migration_config(
            playlist_id=parsed_args.playlist_id,
            source_file_path=parsed_args.source_file,
            platform=parsed_args.platform,
            max_batch_size=parsed_args.batch_size,
            search_page_size=parsed_args.page_size,
            max_workers=parsed_args.workers,
        )
        spotify_config = get_spotify_config()
    except ConfigurationError as exc:
        log.error("Configuration error: %s", exc)
        sys.exit(2)

    try:
        report = migrate_playlist(
            config,
            spotify_config=spotify_config,
            cancel_event=_cancel_event,
        )
    except Exception:
        log.exception("Fatal error during migration")
        sys.exit(1)

    _log_report(report)
    if parsed_args.strict and (report.unmatched or not report.succeeded):
        sys.exit(EXIT_INCOMPLETE)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """First Ctrl+C cancels between tracks/batches, the second one quits."""
    if _cancel_event.is_set():
        log.info("Closed by user (Ctrl+C)")
        sys.exit(0)
    log.info("Cancelling after the current request (Ctrl+C again to quit)")
    _cancel_event.set()


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
