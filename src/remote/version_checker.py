"""Remote version marker lookup.

The remote source publishes an md5sum-style checksum file next to the
dump archive. Its first token identifies the current dump snapshot.
"""

from __future__ import annotations

import requests

from core.errors import SyncNetworkError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def fetch_remote_marker(session: requests.Session, url: str, timeout: float) -> str:
    """Fetch the latest published version marker.

    Args:
        session: HTTP session.
        url: Checksum file URL.
        timeout: Request timeout in seconds.

    Returns:
        First whitespace-delimited token of the response body.

    Raises:
        SyncNetworkError: On transport failure, non-success status,
            or an empty checksum body.
    """
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as error:
        raise SyncNetworkError(
            f"Failed to fetch version marker from {url}: {error}. "
            "Check network access to the dump host and retry."
        ) from error
    marker = parse_marker(response.text)
    if not marker:
        raise SyncNetworkError(
            f"Version marker response from {url} was empty. "
            "The remote checksum file may be mid-publish; retry later."
        )
    _LOGGER.info("remote_marker_fetched", url=url, marker=marker)
    return marker


def parse_marker(body: str) -> str:
    """Extract the marker token from a checksum file body."""
    tokens = body.split()
    return tokens[0].strip() if tokens else ""
