"""Core constants used across SDE sync modules.

This module centralizes remote endpoints, defaults, and file names.
Keeping values here avoids magic literals in pipeline logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_MARKER_URL = "https://www.fuzzwork.co.uk/dump/mysql-latest.tar.bz2.md5"
DEFAULT_DUMP_URL = "https://www.fuzzwork.co.uk/dump/mysql-latest.tar.bz2"
DEFAULT_WORK_DIR = Path(".")
COMPRESSED_DUMP_FILE_NAME = "sde_dump.sql.tar.bz2"
DECOMPRESSED_DUMP_FILE_NAME = "sde_dump.sql"
DEFAULT_DB_ADDRESS = "127.0.0.1"
DEFAULT_DB_PORT = 3306
DEFAULT_DB_USER = "root"
DEFAULT_DB_PASSWORD = "password"
DEFAULT_DB_NAME = "sde"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_MYSQL_BINARY = "mysql"
MARKER_TABLE_NAME = "SDE_HASH"
MARKER_COLUMN_NAME = "hash"
MARKER_COLUMN_LENGTH = 255
DOWNLOAD_CHUNK_SIZE = 1024 * 1024
DECOMPRESS_CHUNK_SIZE = 1024 * 1024
STDERR_TAIL_CHARS = 2000
REDACTED_VALUE = "***"
