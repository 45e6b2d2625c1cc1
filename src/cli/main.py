"""SDE sync CLI entry points.

This module exposes the sync and status commands.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from core.config import DEFAULT_ENV_FILE, SyncConfig
from core.errors import SyncError
from core.logging_config import configure_logging, get_logger
from core.types import SyncOptions, SyncResult
from sync.pipeline import read_status, synchronize

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="sde-sync",
        description="Refresh a local MySQL copy of the static data export",
    )
    parser.add_argument("--env-file", default=str(DEFAULT_ENV_FILE), help="Dotenv file to read")
    parser.add_argument("--work-dir", help="Override SDE_WORK_DIR for this command")
    parser.add_argument("--verbose", action="store_true", help="Emit debug-level log events")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_sync_command(subparsers)
    _add_status_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the SDE sync CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG, force=True)
    try:
        config = _build_config(args.env_file, args.work_dir)
        _LOGGER.debug("config_loaded", **config.redacted())
        if args.command == "sync":
            return _run_sync_command(config, args)
        if args.command == "status":
            return _run_status_command(config)
    except SyncError as error:
        _LOGGER.error("sync_failed", error_type=type(error).__name__, error=str(error))
        print(f"sync_error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(env_file: str, work_dir: str | None) -> SyncConfig:
    """Build runtime config with optional work-dir override."""
    config = SyncConfig.from_env(Path(env_file))
    if work_dir:
        config = replace(config, work_dir=Path(work_dir).expanduser())
    return config


def _run_sync_command(config: SyncConfig, args: argparse.Namespace) -> int:
    """Handle sync command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = SyncOptions(
        force=args.force,
        cleanup=args.cleanup,
        dry_run=args.dry_run,
        show_progress=not args.no_progress,
    )
    result = synchronize(config, options)
    _print_result(result)
    return 0


def _run_status_command(config: SyncConfig) -> int:
    """Handle status command."""
    result = read_status(config)
    _print_result(result)
    return 0


def _print_result(result: SyncResult) -> None:
    """Print result fields as key=value lines on stdout."""
    print(f"outcome={result.outcome}")
    print(f"remote_marker={result.remote_marker}")
    print(f"stored_marker={result.stored_marker or '-'}")
    if result.outcome == "updated":
        print(f"downloaded_bytes={result.downloaded_bytes}")
        print(f"decompressed_bytes={result.decompressed_bytes}")


def _add_sync_command(subparsers: Any) -> None:
    """Register sync subcommand."""
    parser = subparsers.add_parser("sync", help="Download and load the dump if a newer one exists")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Reload even when the stored marker matches the remote one",
    )
    parser.add_argument(
        "--cleanup",
        action="store_true",
        help="Delete downloaded artifacts after a successful load",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report whether an update is available",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")


def _add_status_command(subparsers: Any) -> None:
    """Register status subcommand."""
    subparsers.add_parser("status", help="Show remote and stored version markers")
