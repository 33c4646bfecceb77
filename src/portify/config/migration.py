"""Settings for one playlist migration run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from portify.domain.reconciliation import DEFAULT_MAX_BATCH_SIZE, DEFAULT_SEARCH_PAGE_SIZE

from .env import optional_int_env_var
from .errors import ConfigurationError

DEFAULT_PLATFORM: Final[str] = "tidal"
SPOTIFY_MAX_ITEMS_PER_ADD: Final[int] = 100
SPOTIFY_MAX_SEARCH_LIMIT: Final[int] = 50


@dataclass(frozen=True, slots=True)
class MigrationConfig:
    playlist_id: str
    source_file_path: Path
    platform: str = DEFAULT_PLATFORM
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    search_page_size: int = DEFAULT_SEARCH_PAGE_SIZE
    max_workers: int = 1

    def __post_init__(self) -> None:
        if not self.playlist_id.strip():
            raise ConfigurationError("Playlist id must not be blank")
        if not 1 <= self.max_batch_size <= SPOTIFY_MAX_ITEMS_PER_ADD:
            raise ConfigurationError(
                f"Batch size must be between 1 and {SPOTIFY_MAX_ITEMS_PER_ADD}, "
                f"got {self.max_batch_size}"
            )
        if not 1 <= self.search_page_size <= SPOTIFY_MAX_SEARCH_LIMIT:
            raise ConfigurationError(
                f"Search page size must be between 1 and {SPOTIFY_MAX_SEARCH_LIMIT}, "
                f"got {self.search_page_size}"
            )
        if self.max_workers < 1:
            raise ConfigurationError(f"Worker count must be positive, got {self.max_workers}")


def get_migration_config(
    *,
    playlist_id: str,
    source_file_path: str | Path,
    platform: str | None = None,
    max_batch_size: int | None = None,
    search_page_size: int | None = None,
    max_workers: int | None = None,
) -> MigrationConfig:
    """Build a config from explicit values, falling back to ``PORTIFY_*`` variables."""

    return MigrationConfig(
        playlist_id=playlist_id,
        source_file_path=Path(source_file_path).expanduser(),
        platform=platform or DEFAULT_PLATFORM,
        max_batch_size=_first_set(
            max_batch_size,
            optional_int_env_var("PORTIFY_MAX_BATCH_SIZE"),
            DEFAULT_MAX_BATCH_SIZE,
        ),
        search_page_size=_first_set(
            search_page_size,
            optional_int_env_var("PORTIFY_SEARCH_PAGE_SIZE"),
            DEFAULT_SEARCH_PAGE_SIZE,
        ),
        max_workers=_first_set(max_workers, optional_int_env_var("PORTIFY_MAX_WORKERS"), 1),
    )


def _first_set(*values: int | None) -> int:
    for value in values:
        if value is not None:
            return value
    raise ConfigurationError("No value supplied")
