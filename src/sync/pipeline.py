"""Sync orchestration for one-shot dump refreshes.

This module runs the stages strictly in order. Any stage error
propagates to the caller; the stored marker is only written after the
database client has loaded the dump successfully.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import requests

from archive.decompression import decompress_dump
from core.config import SyncConfig
from core.errors import SyncIOError
from core.logging_config import get_logger
from core.types import SyncArtifacts, SyncOptions, SyncResult
from remote.dump_download import download_dump
from remote.version_checker import fetch_remote_marker
from store.database import create_database_engine
from store.dump_loader import load_dump
from store.marker_store import MarkerStore
from sync.comparator import markers_match

_LOGGER = get_logger(__name__)

DumpLoader = Callable[[SyncConfig, Path], None]


class SyncPipelineRunner:
    """Runner for a single check-and-refresh pass."""

    def __init__(
        self,
        config: SyncConfig,
        options: SyncOptions,
        session: requests.Session,
        marker_store: MarkerStore,
        loader: DumpLoader = load_dump,
    ) -> None:
        self._config = config
        self._options = options
        self._session = session
        self._marker_store = marker_store
        self._loader = loader
        self._artifacts = SyncArtifacts.in_directory(config.work_dir)

    def run(self) -> SyncResult:
        """Execute the pipeline and return its summary."""
        remote_marker = self._fetch_remote_marker()
        stored_marker = self._marker_store.read_marker()
        _LOGGER.info("markers_compared", remote=remote_marker, stored=stored_marker)
        markers_equal = markers_match(remote_marker, stored_marker)
        if markers_equal and (self._options.dry_run or not self._options.force):
            _LOGGER.info("sde_up_to_date", marker=stored_marker)
            return SyncResult("up_to_date", remote_marker, stored_marker)
        if self._options.dry_run:
            _LOGGER.info("sde_update_available", remote=remote_marker, stored=stored_marker)
            return SyncResult("update_available", remote_marker, stored_marker)
        downloaded_bytes = self._download()
        decompressed_bytes = self._decompress()
        self._loader(self._config, self._artifacts.decompressed_path)
        self._marker_store.write_marker(remote_marker)
        if self._options.cleanup or self._config.cleanup_artifacts:
            self._remove_artifacts()
        _LOGGER.info(
            "sde_updated",
            previous=stored_marker,
            current=remote_marker,
            downloaded_bytes=downloaded_bytes,
            decompressed_bytes=decompressed_bytes,
        )
        return SyncResult(
            outcome="updated",
            remote_marker=remote_marker,
            stored_marker=stored_marker,
            downloaded_bytes=downloaded_bytes,
            decompressed_bytes=decompressed_bytes,
        )

    def _fetch_remote_marker(self) -> str:
        return fetch_remote_marker(
            self._session, self._config.marker_url, self._config.http_timeout
        )

    def _download(self) -> int:
        return download_dump(
            self._session,
            self._config.dump_url,
            self._artifacts.compressed_path,
            self._config.http_timeout,
        )

    def _decompress(self) -> int:
        return decompress_dump(
            self._artifacts.compressed_path,
            self._artifacts.decompressed_path,
            show_progress=self._options.show_progress,
        )

    def _remove_artifacts(self) -> None:
        for artifact_path in (
            self._artifacts.compressed_path,
            self._artifacts.decompressed_path,
        ):
            try:
                artifact_path.unlink(missing_ok=True)
            except OSError as error:
                raise SyncIOError(
                    f"Failed to remove artifact {artifact_path}: {error}. "
                    "Delete it manually; the stored marker is already up to date."
                ) from error
        _LOGGER.info("artifacts_removed", work_dir=str(self._config.work_dir))


def synchronize(config: SyncConfig, options: SyncOptions | None = None) -> SyncResult:
    """Check for a newer dump and load it when the marker changed.

    Args:
        config: Runtime configuration.
        options: Per-run options. Defaults apply when omitted.

    Returns:
        Summary of the run.

    Raises:
        SyncNetworkError: If the marker or dump cannot be fetched.
        SyncIOError: If local artifacts cannot be written or decompressed.
        SyncStorageError: If the marker store cannot be read or written.
        SyncExternalProcessError: If the database client fails.
    """
    engine = create_database_engine(config)
    try:
        with requests.Session() as session:
            runner = SyncPipelineRunner(
                config,
                options or SyncOptions(),
                session,
                MarkerStore(engine),
            )
            return runner.run()
    finally:
        engine.dispose()


def read_status(config: SyncConfig) -> SyncResult:
    """Report remote and stored markers without changing anything."""
    return synchronize(config, SyncOptions(dry_run=True, show_progress=False))
