"""Version marker comparison."""

from __future__ import annotations


def markers_match(remote_marker: str, stored_marker: str) -> bool:
    """Return whether the stored marker already reflects the remote dump."""
    return remote_marker == stored_marker
