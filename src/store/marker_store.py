"""Persistent version marker storage.

The marker lives in a single-column table inside the target database.
It always holds the marker of the last successfully loaded dump, and
at most one row exists at any time.
"""

from __future__ import annotations

from sqlalchemy import Column, MetaData, String, Table, delete, insert, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.constants import MARKER_COLUMN_LENGTH, MARKER_COLUMN_NAME, MARKER_TABLE_NAME
from core.errors import SyncStorageError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

_METADATA = MetaData()
MARKER_TABLE = Table(
    MARKER_TABLE_NAME,
    _METADATA,
    Column(MARKER_COLUMN_NAME, String(MARKER_COLUMN_LENGTH)),
)


class MarkerStore:
    """Database-backed store for the last applied version marker."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def read_marker(self) -> str:
        """Read the stored marker.

        Returns:
            Stored marker, or an empty string when the marker table
            has not been created yet or holds no row.

        Raises:
            SyncStorageError: For any database failure other than a
                missing marker table.
        """
        try:
            with self._engine.connect() as connection:
                if not inspect(connection).has_table(MARKER_TABLE_NAME):
                    _LOGGER.info("stored_marker_table_missing", table=MARKER_TABLE_NAME)
                    return ""
                row = connection.execute(
                    select(MARKER_TABLE.c[MARKER_COLUMN_NAME]).limit(1)
                ).first()
        except SQLAlchemyError as error:
            raise SyncStorageError(
                f"Failed to read stored marker from {MARKER_TABLE_NAME}: {error}. "
                "Check database connectivity and credentials."
            ) from error
        stored = row[0] if row is not None and row[0] is not None else ""
        _LOGGER.info("stored_marker_read", marker=stored)
        return stored

    def write_marker(self, marker: str) -> None:
        """Replace the stored marker with a new value.

        Table creation, row removal, and insert share one transaction so
        readers never observe a missing table or an empty marker.

        Args:
            marker: Marker of the dump that was just loaded.

        Raises:
            SyncStorageError: If any statement fails.
        """
        try:
            with self._engine.begin() as connection:
                MARKER_TABLE.create(connection, checkfirst=True)
                connection.execute(delete(MARKER_TABLE))
                connection.execute(insert(MARKER_TABLE).values({MARKER_COLUMN_NAME: marker}))
        except SQLAlchemyError as error:
            raise SyncStorageError(
                f"Failed to write stored marker {marker} to {MARKER_TABLE_NAME}: {error}. "
                "The dump is loaded but the marker is stale; the next run will reload."
            ) from error
        _LOGGER.info("stored_marker_updated", marker=marker)
