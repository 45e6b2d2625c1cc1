"""Shared typed models.

This module defines immutable data models passed between pipeline
stages, the SDK surface, and the CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from core.constants import COMPRESSED_DUMP_FILE_NAME, DECOMPRESSED_DUMP_FILE_NAME

SyncOutcome = Literal["up_to_date", "updated", "update_available"]


@dataclass(frozen=True)
class SyncOptions:
    """Per-run sync options.

    Attributes:
        force: Reload even when remote and stored markers match.
        cleanup: Delete downloaded artifacts after a successful load.
        dry_run: Stop after the marker comparison without side effects.
        show_progress: Render a decompression progress bar.
    """

    force: bool = False
    cleanup: bool = False
    dry_run: bool = False
    show_progress: bool = True


@dataclass(frozen=True)
class SyncArtifacts:
    """Local file locations produced by a sync run.

    Attributes:
        compressed_path: Downloaded compressed dump.
        decompressed_path: Plain SQL dump fed to the database client.
    """

    compressed_path: Path
    decompressed_path: Path

    @classmethod
    def in_directory(cls, work_dir: Path) -> "SyncArtifacts":
        """Build the default artifact paths under a work directory."""
        return cls(
            compressed_path=work_dir / COMPRESSED_DUMP_FILE_NAME,
            decompressed_path=work_dir / DECOMPRESSED_DUMP_FILE_NAME,
        )


@dataclass(frozen=True)
class SyncResult:
    """Summary of one sync run.

    Attributes:
        outcome: Final pipeline outcome.
        remote_marker: Marker published by the remote source.
        stored_marker: Marker recorded before this run, empty when absent.
        downloaded_bytes: Compressed bytes fetched, zero when skipped.
        decompressed_bytes: Plain bytes written, zero when skipped.
    """

    outcome: SyncOutcome
    remote_marker: str
    stored_marker: str
    downloaded_bytes: int = 0
    decompressed_bytes: int = 0
