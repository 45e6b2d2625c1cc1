"""Runtime configuration model for SDE sync.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values
from sqlalchemy.engine import URL

from core.constants import (
    DEFAULT_DB_ADDRESS,
    DEFAULT_DB_NAME,
    DEFAULT_DB_PASSWORD,
    DEFAULT_DB_PORT,
    DEFAULT_DB_USER,
    DEFAULT_DUMP_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_MARKER_URL,
    DEFAULT_MYSQL_BINARY,
    DEFAULT_WORK_DIR,
    REDACTED_VALUE,
)
from core.errors import SyncConfigError

DEFAULT_ENV_FILE = Path(".env")


@dataclass(frozen=True)
class SyncConfig:
    """Validated runtime configuration.

    Attributes:
        db_address: MySQL server host.
        db_port: MySQL server port.
        db_user: MySQL user name.
        db_password: MySQL password. Never logged.
        db_name: Target database receiving the dump.
        marker_url: URL of the remote checksum file.
        dump_url: URL of the compressed dump archive.
        work_dir: Directory for downloaded and decompressed artifacts.
        http_timeout: Per-request HTTP timeout in seconds.
        mysql_binary: External database client executable.
        cleanup_artifacts: Whether to delete artifacts after a successful load.
    """

    db_address: str
    db_port: int
    db_user: str
    db_password: str
    db_name: str
    marker_url: str = DEFAULT_MARKER_URL
    dump_url: str = DEFAULT_DUMP_URL
    work_dir: Path = DEFAULT_WORK_DIR
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    mysql_binary: str = DEFAULT_MYSQL_BINARY
    cleanup_artifacts: bool = False

    @classmethod
    def from_env(cls, env_file: Path | None = DEFAULT_ENV_FILE) -> "SyncConfig":
        """Build config from a .env file and process environment variables.

        Process environment values take precedence over the file.

        Args:
            env_file: Optional dotenv file. Missing files are ignored.

        Returns:
            A validated config object.

        Raises:
            SyncConfigError: If environment values are invalid.
        """
        values = _read_environment(env_file)
        return cls(
            db_address=values.get("DB_ADDR") or DEFAULT_DB_ADDRESS,
            db_port=_parse_port(values.get("DB_PORT")),
            db_user=values.get("DB_USER") or DEFAULT_DB_USER,
            db_password=values.get("DB_PASS") or DEFAULT_DB_PASSWORD,
            db_name=values.get("DB_DATABASE") or DEFAULT_DB_NAME,
            marker_url=values.get("SDE_MARKER_URL") or DEFAULT_MARKER_URL,
            dump_url=values.get("SDE_DUMP_URL") or DEFAULT_DUMP_URL,
            work_dir=Path(values.get("SDE_WORK_DIR") or DEFAULT_WORK_DIR).expanduser(),
            http_timeout=_parse_timeout(values.get("SDE_HTTP_TIMEOUT")),
            mysql_binary=values.get("SDE_MYSQL_BINARY") or DEFAULT_MYSQL_BINARY,
            cleanup_artifacts=_parse_flag(values.get("SDE_CLEANUP")),
        )

    def database_url(self) -> URL:
        """Render the SQLAlchemy connection URL for the marker store."""
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_address,
            port=self.db_port,
            database=self.db_name,
        )

    def redacted(self) -> dict[str, object]:
        """Return config fields safe for log output."""
        return {
            "db_address": self.db_address,
            "db_port": self.db_port,
            "db_user": self.db_user,
            "db_password": REDACTED_VALUE,
            "db_name": self.db_name,
            "marker_url": self.marker_url,
            "dump_url": self.dump_url,
            "work_dir": str(self.work_dir),
            "http_timeout": self.http_timeout,
            "mysql_binary": self.mysql_binary,
            "cleanup_artifacts": self.cleanup_artifacts,
        }


def _read_environment(env_file: Path | None) -> Mapping[str, str]:
    """Merge dotenv file values under the live process environment."""
    file_values: dict[str, str] = {}
    if env_file is not None and env_file.is_file():
        file_values = {
            key: value for key, value in dotenv_values(env_file).items() if value is not None
        }
    return {**file_values, **os.environ}


def _parse_port(raw_value: str | None) -> int:
    """Parse the database port, falling back to the default on bad input.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed port, or the default port when missing or non-numeric.
    """
    if not raw_value:
        return DEFAULT_DB_PORT
    try:
        return int(raw_value)
    except ValueError:
        return DEFAULT_DB_PORT


def _parse_timeout(raw_value: str | None) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Timeout in seconds.

    Raises:
        SyncConfigError: If value is not a positive number.
    """
    if not raw_value:
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise SyncConfigError(
            "Invalid SDE_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set SDE_HTTP_TIMEOUT to a positive numeric value."
        ) from error
    if timeout <= 0:
        raise SyncConfigError(
            f"Invalid SDE_HTTP_TIMEOUT value: {raw_value} must be greater than zero."
        )
    return timeout


def _parse_flag(raw_value: str | None) -> bool:
    """Parse a boolean environment flag; unset means false."""
    if not raw_value:
        return False
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}
