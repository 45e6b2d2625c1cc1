"""SQLAlchemy engine construction for the target database."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from core.config import SyncConfig


def create_database_engine(config: SyncConfig) -> Engine:
    """Create the engine used for marker reads and writes.

    Args:
        config: Runtime config with connection settings.

    Returns:
        Lazily connecting SQLAlchemy engine over PyMySQL.
    """
    return create_engine(config.database_url(), pool_pre_ping=True)
