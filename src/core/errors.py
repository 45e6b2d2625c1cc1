"""SDE sync exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class SyncError(Exception):
    """Base exception for all SDE sync failures."""


class SyncConfigError(SyncError):
    """Raised for invalid runtime configuration."""


class SyncNetworkError(SyncError):
    """Raised when a remote marker or dump fetch fails."""


class SyncIOError(SyncError):
    """Raised for local file read and write failures."""


class SyncDecompressError(SyncIOError):
    """Raised when compressed dump input is corrupt or truncated."""


class SyncStorageError(SyncError):
    """Raised for marker store query and schema failures."""


class SyncExternalProcessError(SyncError):
    """Raised when the external database client fails.

    Attributes:
        exit_code: Client exit status, or None if it never started.
    """

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code
