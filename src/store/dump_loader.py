"""External database client invocation.

The dump is applied by the ``mysql`` command-line client, with the
decompressed file as its standard input. The password is handed over
through ``MYSQL_PWD`` so it never appears in argv or in log output.
"""

from __future__ import annotations

import os
from pathlib import Path
import subprocess

from core.config import SyncConfig
from core.constants import STDERR_TAIL_CHARS
from core.errors import SyncExternalProcessError, SyncIOError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def build_client_command(config: SyncConfig) -> list[str]:
    """Build the database client argv.

    ``--force`` continues past row-level SQL errors and ``--binary-mode``
    accepts the raw bytes in the dump.
    """
    return [
        config.mysql_binary,
        "-h",
        config.db_address,
        "-P",
        str(config.db_port),
        "-u",
        config.db_user,
        "--binary-mode",
        "--force",
        config.db_name,
    ]


def load_dump(config: SyncConfig, dump_path: Path) -> None:
    """Load a plain SQL dump into the target database.

    Args:
        config: Runtime config with connection settings.
        dump_path: Decompressed dump file.

    Raises:
        SyncIOError: If the dump file cannot be opened.
        SyncExternalProcessError: If the client cannot start or exits non-zero.
    """
    command = build_client_command(config)
    environment = {**os.environ, "MYSQL_PWD": config.db_password}
    _LOGGER.info("dump_load_started", command=" ".join(command), dump_path=str(dump_path))
    try:
        dump_file = dump_path.open("rb")
    except OSError as error:
        raise SyncIOError(
            f"Failed to open decompressed dump {dump_path}: {error}. "
            "Re-run to download and decompress the dump again."
        ) from error
    with dump_file:
        try:
            completed = subprocess.run(
                command,
                stdin=dump_file,
                capture_output=True,
                env=environment,
                check=False,
            )
        except OSError as error:
            raise SyncExternalProcessError(
                f"Failed to start database client '{config.mysql_binary}': {error}. "
                "Install the MySQL client or set SDE_MYSQL_BINARY."
            ) from error
    if completed.returncode != 0:
        stderr_tail = _decode_tail(completed.stderr)
        raise SyncExternalProcessError(
            f"Database client exited with status {completed.returncode}: {stderr_tail}. "
            "Check database credentials and server logs.",
            exit_code=completed.returncode,
        )
    _LOGGER.info("dump_loaded", dump_path=str(dump_path), database=config.db_name)


def _decode_tail(stream: bytes | None) -> str:
    """Decode the last part of client stderr for error messages."""
    if not stream:
        return "no error output"
    return stream.decode("utf-8", errors="replace").strip()[-STDERR_TAIL_CHARS:]
