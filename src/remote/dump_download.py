"""Compressed dump download.

This module streams the remote dump archive to a local file
without buffering the whole payload in memory.
"""

from __future__ import annotations

from pathlib import Path

import requests

from core.constants import DOWNLOAD_CHUNK_SIZE
from core.errors import SyncIOError, SyncNetworkError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def download_dump(
    session: requests.Session,
    url: str,
    destination: Path,
    timeout: float,
) -> int:
    """Stream the compressed dump to a local file.

    Args:
        session: HTTP session.
        url: Dump archive URL.
        destination: Local output file, overwritten if present.
        timeout: Connect and read timeout in seconds.

    Returns:
        Number of bytes written.

    Raises:
        SyncNetworkError: On transport failure or non-success status.
        SyncIOError: If the local file cannot be written.
    """
    _LOGGER.info("dump_download_started", url=url, destination=str(destination))
    try:
        with session.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            written = _write_chunks(response, destination)
    except requests.RequestException as error:
        raise SyncNetworkError(
            f"Failed to download dump from {url}: {error}. "
            "Check network access to the dump host and retry."
        ) from error
    _LOGGER.info("dump_downloaded", url=url, destination=str(destination), bytes=written)
    return written


def _write_chunks(response: requests.Response, destination: Path) -> int:
    """Copy response body chunks into the destination file."""
    written = 0
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("wb") as output_file:
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                if not chunk:
                    continue
                output_file.write(chunk)
                written += len(chunk)
    except OSError as error:
        raise SyncIOError(
            f"Failed to write downloaded dump to {destination}: {error}. "
            "Check free disk space and write permissions for the work directory."
        ) from error
    return written
