"""Pytest configuration for repository test runs."""

from __future__ import annotations

import bz2
import sys
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from core.config import SyncConfig  # noqa: E402
from fakes import SAMPLE_SQL  # noqa: E402


@pytest.fixture
def sync_config(tmp_path: Path) -> SyncConfig:
    """Config pointing at fake endpoints with artifacts under tmp_path."""
    return SyncConfig(
        db_address="db.internal",
        db_port=3307,
        db_user="loader",
        db_password="s3cret",
        db_name="sde",
        marker_url="https://dump.test/mysql-latest.tar.bz2.md5",
        dump_url="https://dump.test/mysql-latest.tar.bz2",
        work_dir=tmp_path,
        http_timeout=5.0,
    )


@pytest.fixture
def compressed_sql() -> bytes:
    """Bzip2 payload wrapping a small SQL dump."""
    return bz2.compress(SAMPLE_SQL)
