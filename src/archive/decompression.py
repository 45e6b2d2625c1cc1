"""Streaming bzip2 decompression with progress reporting.

Progress tracks compressed bytes consumed, so the bar reaches 100%
exactly when the input file is exhausted. Concatenated bzip2 streams
are decoded back to back into one output file. Trailing bytes after the last
stream are rejected as invalid data rather than ignored.
"""

from __future__ import annotations

import bz2
from pathlib import Path
from typing import BinaryIO

from tqdm import tqdm

from core.constants import DECOMPRESS_CHUNK_SIZE
from core.errors import SyncDecompressError, SyncIOError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def decompress_dump(source: Path, destination: Path, show_progress: bool = True) -> int:
    """Decompress a bzip2 dump into a plain file.

    Args:
        source: Compressed input file.
        destination: Output file, overwritten if present.
        show_progress: Render a byte progress bar on stderr.

    Returns:
        Number of decompressed bytes written.

    Raises:
        SyncIOError: If the input cannot be read or the output written.
        SyncDecompressError: If the input is empty, corrupt, or truncated.
    """
    _LOGGER.info("dump_decompress_started", source=str(source), destination=str(destination))
    try:
        compressed_size = source.stat().st_size
        with source.open("rb") as input_file, destination.open("wb") as output_file:
            with tqdm(
                total=compressed_size,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc="Decompressing",
                disable=not show_progress,
            ) as progress:
                written = _copy_decompressed(input_file, output_file, progress, source)
    except OSError as error:
        raise SyncIOError(
            f"Failed to decompress {source} into {destination}: {error}. "
            "Check that the download completed and the work directory is writable."
        ) from error
    _LOGGER.info(
        "dump_decompressed",
        source=str(source),
        destination=str(destination),
        compressed_bytes=compressed_size,
        bytes=written,
    )
    return written


def _copy_decompressed(
    input_file: BinaryIO,
    output_file: BinaryIO,
    progress: tqdm,
    source: Path,
) -> int:
    """Pump compressed chunks through the decoder into the output file."""
    decompressor = bz2.BZ2Decompressor()
    stream_open = False
    consumed_any = False
    written = 0
    while True:
        chunk = input_file.read(DECOMPRESS_CHUNK_SIZE)
        if not chunk:
            break
        consumed_any = True
        progress.update(len(chunk))
        pending = chunk
        while pending:
            stream_open = True
            data = _decompress_block(decompressor, pending, source)
            output_file.write(data)
            written += len(data)
            if decompressor.eof:
                stream_open = False
                pending = decompressor.unused_data
                decompressor = bz2.BZ2Decompressor()
            else:
                pending = b""
    if not consumed_any:
        raise SyncDecompressError(f"Compressed dump {source} is empty. Re-run to download again.")
    if stream_open:
        raise SyncDecompressError(
            f"Compressed dump {source} ended before the bzip2 stream was complete. "
            "The download was likely truncated; re-run to download again."
        )
    return written


def _decompress_block(decompressor: bz2.BZ2Decompressor, data: bytes, source: Path) -> bytes:
    """Decode one block, mapping decoder failures onto domain errors."""
    try:
        return decompressor.decompress(data)
    except (OSError, ValueError) as error:
        raise SyncDecompressError(
            f"Compressed dump {source} is not valid bzip2 data: {error}. "
            "Delete the file and re-run to download again."
        ) from error
