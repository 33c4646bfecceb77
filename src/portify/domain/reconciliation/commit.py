"""Submit matched destination ids to a playlist in bounded batches."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from logging import getLogger
from typing import TYPE_CHECKING

from portify.domain.model import Batch, BatchResult
from portify.domain.ports import MutationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from threading import Event

    from portify.domain.ports import PlaylistMutator

# Spotify accepts up to 100 ids per call; older limits were lower.
DEFAULT_MAX_BATCH_SIZE = 80
CANCELLED_BATCH_ERROR = "run cancelled"

log = getLogger(__name__)


def partition(track_ids: Sequence[str], max_batch_size: int) -> list[Batch]:
    """Split ``track_ids`` into contiguous, in-order batches."""

    if max_batch_size < 1:
        raise ValueError(f"Batch size must be positive, got {max_batch_size}")
    return [
        Batch(index=index, track_ids=tuple(track_ids[start : start + max_batch_size]))
        for index, start in enumerate(range(0, len(track_ids), max_batch_size))
    ]


class BatchCommitter:
    """Commit batches independently; a failed batch never stops the others."""

    def __init__(
        self,
        mutator: PlaylistMutator,
        *,
        user_id: str,
        playlist_id: str,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        max_workers: int = 1,
    ) -> None:
        if max_batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {max_batch_size}")
        self._mutator = mutator
        self._user_id = user_id
        self._playlist_id = playlist_id
        self._max_batch_size = max_batch_size
        self._max_workers = max_workers

    def submit(self, batch: Batch) -> BatchResult:
        try:
            ack = self._mutator.add_tracks_to_playlist(
                self._user_id,
                self._playlist_id,
                batch.track_ids,
            )
        except MutationError as exc:
            log.warning(
                "Batch %s (%s tracks) failed for playlist %s: %s",
                batch.index,
                len(batch),
                self._playlist_id,
                exc,
            )
            return BatchResult(batch=batch, success=False, error=str(exc))

        log.debug("Batch %s committed (%s tracks)", batch.index, len(batch))
        return BatchResult(batch=batch, success=True, snapshot_id=ack.snapshot_id)

    def commit(
        self,
        track_ids: Sequence[str],
        *,
        cancel_event: Event | None = None,
    ) -> list[BatchResult]:
        """Submit every batch of ``track_ids``, returning results by batch index.

        Batches not yet started when ``cancel_event`` is set are not submitted;
        they are reported as failed with the cancellation reason.
        """

        batches = partition(track_ids, self._max_batch_size)
        if self._max_workers <= 1:
            return [self._submit_unless_cancelled(batch, cancel_event) for batch in batches]

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [
                executor.submit(self._submit_unless_cancelled, batch, cancel_event)
                for batch in batches
            ]
            return [future.result() for future in futures]

    def _submit_unless_cancelled(
        self,
        batch: Batch,
        cancel_event: Event | None,
    ) -> BatchResult:
        if cancel_event is not None and cancel_event.is_set():
            log.info("Skipping batch %s (%s tracks): run cancelled", batch.index, len(batch))
            return BatchResult(batch=batch, success=False, error=CANCELLED_BATCH_ERROR)
        return self.submit(batch)
