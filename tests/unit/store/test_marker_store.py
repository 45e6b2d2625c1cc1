"""Unit tests for persistent version marker storage."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine, func, insert, select
from sqlalchemy.engine import Engine

from core.errors import SyncStorageError
from store.marker_store import MARKER_TABLE, MarkerStore


@pytest.fixture
def engine() -> Engine:
    return create_engine("sqlite://")


def _row_count(engine: Engine) -> int:
    with engine.connect() as connection:
        return connection.execute(select(func.count()).select_from(MARKER_TABLE)).scalar_one()


def test_read_marker_returns_empty_when_table_missing(engine: Engine) -> None:
    """First run should read an empty marker instead of failing."""
    store = MarkerStore(engine)

    assert store.read_marker() == ""


def test_read_marker_returns_empty_for_empty_table(engine: Engine) -> None:
    """An existing table without rows should read as empty."""
    MARKER_TABLE.create(engine)

    assert MarkerStore(engine).read_marker() == ""


def test_write_marker_creates_table_and_row(engine: Engine) -> None:
    """Writing on a fresh database should bootstrap the marker table."""
    store = MarkerStore(engine)

    store.write_marker("abc123")

    assert store.read_marker() == "abc123" and _row_count(engine) == 1


def test_write_marker_leaves_exactly_one_row(engine: Engine) -> None:
    """Writes should collapse any pre-existing rows into one."""
    MARKER_TABLE.create(engine)
    with engine.begin() as connection:
        connection.execute(insert(MARKER_TABLE), [{"hash": "old-1"}, {"hash": "old-2"}])
    store = MarkerStore(engine)

    store.write_marker("new")

    assert _row_count(engine) == 1 and store.read_marker() == "new"


def test_write_marker_replaces_previous_marker(engine: Engine) -> None:
    """Successive writes should keep only the latest marker."""
    store = MarkerStore(engine)
    store.write_marker("first")

    store.write_marker("second")

    assert store.read_marker() == "second" and _row_count(engine) == 1


def test_read_marker_raises_for_unreachable_database(tmp_path) -> None:
    """Connection failures should not be mistaken for a missing table."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing-dir' / 'store.db'}")

    with pytest.raises(SyncStorageError):
        MarkerStore(engine).read_marker()


def test_write_marker_raises_for_unreachable_database(tmp_path) -> None:
    """Write failures should surface as storage errors."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing-dir' / 'store.db'}")

    with pytest.raises(SyncStorageError):
        MarkerStore(engine).write_marker("abc123")
