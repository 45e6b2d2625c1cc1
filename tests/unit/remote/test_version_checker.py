"""Unit tests for remote version marker lookup."""

from __future__ import annotations

import pytest
import requests

from core.errors import SyncNetworkError
from fakes import FakeResponse, FakeSession
from remote.version_checker import fetch_remote_marker, parse_marker

_URL = "https://dump.test/mysql-latest.tar.bz2.md5"


def test_fetch_remote_marker_returns_first_token() -> None:
    """Marker should be the checksum token without the file name."""
    session = FakeSession(
        {_URL: FakeResponse(b"abc123  mysql-latest.tar.bz2\n")}
    )

    marker = fetch_remote_marker(session, _URL, timeout=30.0)

    assert marker == "abc123" and session.timeouts == [30.0]


def test_fetch_remote_marker_raises_for_http_error() -> None:
    """Non-success status should surface as a network error."""
    session = FakeSession({_URL: FakeResponse(b"gone", status_code=503, url=_URL)})

    with pytest.raises(SyncNetworkError):
        fetch_remote_marker(session, _URL, timeout=30.0)


def test_fetch_remote_marker_raises_for_transport_error() -> None:
    """Connection failures should surface as a network error."""
    session = FakeSession({_URL: requests.ConnectionError("connection refused")})

    with pytest.raises(SyncNetworkError, match="connection refused"):
        fetch_remote_marker(session, _URL, timeout=30.0)


def test_fetch_remote_marker_rejects_blank_body() -> None:
    """An empty checksum file should not be treated as a marker."""
    session = FakeSession({_URL: FakeResponse(b"  \n")})

    with pytest.raises(SyncNetworkError):
        fetch_remote_marker(session, _URL, timeout=30.0)


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ("abc123 mysql-latest.tar.bz2", "abc123"),
        ("\tabc123\n", "abc123"),
        ("abc123", "abc123"),
        ("", ""),
    ],
)
def test_parse_marker_trims_whitespace(body: str, expected: str) -> None:
    """Marker parsing should ignore surrounding whitespace."""
    assert parse_marker(body) == expected
