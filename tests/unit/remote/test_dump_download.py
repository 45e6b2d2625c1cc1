"""Unit tests for compressed dump download."""

from __future__ import annotations

import pytest
import requests

from core.errors import SyncIOError, SyncNetworkError
from fakes import FakeResponse, FakeSession
from remote.dump_download import download_dump

_URL = "https://dump.test/mysql-latest.tar.bz2"


def test_download_dump_writes_all_bytes(tmp_path) -> None:
    """Download should stream the full body and report its size."""
    payload = b"x" * (3 * 1024 * 1024 + 17)
    session = FakeSession({_URL: FakeResponse(payload)})
    destination = tmp_path / "dump.tar.bz2"

    written = download_dump(session, _URL, destination, timeout=30.0)

    assert written == len(payload) and destination.read_bytes() == payload


def test_download_dump_raises_for_http_error(tmp_path) -> None:
    """Non-success status should surface as a network error."""
    session = FakeSession({_URL: FakeResponse(b"", status_code=404, url=_URL)})

    with pytest.raises(SyncNetworkError):
        download_dump(session, _URL, tmp_path / "dump.tar.bz2", timeout=30.0)


def test_download_dump_raises_for_timeout(tmp_path) -> None:
    """Request timeouts should surface as a network error."""
    session = FakeSession({_URL: requests.Timeout("read timed out")})

    with pytest.raises(SyncNetworkError):
        download_dump(session, _URL, tmp_path / "dump.tar.bz2", timeout=30.0)


def test_download_dump_raises_io_error_for_unwritable_destination(tmp_path) -> None:
    """Local write failures should surface as an IO error."""
    session = FakeSession({_URL: FakeResponse(b"payload")})
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file")

    with pytest.raises(SyncIOError):
        download_dump(session, _URL, blocker / "dump.tar.bz2", timeout=30.0)
