"""Public SDK surface for SDE sync.

This module provides a stable import path for programmatic callers.
It re-exports the pipeline entry point and typed option models.
"""

from __future__ import annotations

from core.config import SyncConfig
from core.errors import SyncError
from core.types import SyncOptions, SyncResult
from sync.pipeline import read_status, synchronize

__all__ = [
    "SyncConfig",
    "SyncError",
    "SyncOptions",
    "SyncResult",
    "read_status",
    "synchronize",
]
