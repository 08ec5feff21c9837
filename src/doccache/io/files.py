"""Buffered streaming between byte sources and files on disk."""

from __future__ import annotations

import io
import os
import time
from contextlib import suppress
from pathlib import Path
from typing import BinaryIO

from doccache.constants.cache import FILE_SIZE_UNITS, STREAM_CHUNK_SIZE
from doccache.exceptions import FileTooLargeError, TruncatedReadError


def write_stream(source: BinaryIO, destination: Path, *, timestamp_ns: int | None = None) -> None:
    """Copy ``source`` into ``destination`` in fixed-size chunks.

    Any existing destination is replaced, never appended to. Once the copy
    completes, the file's timestamps are set to ``timestamp_ns`` (defaults to
    now). ``source`` is closed on every exit path.
    """
    with source:
        delete_file(destination)
        with destination.open("wb") as out:
            for chunk in iter(lambda: source.read(STREAM_CHUNK_SIZE), b""):
                out.write(chunk)
            out.flush()
        stamp = time.time_ns() if timestamp_ns is None else timestamp_ns
        os.utime(destination, ns=(stamp, stamp))


def write_bytes(content: bytes, destination: Path, *, timestamp_ns: int | None = None) -> None:
    """Write ``content`` to ``destination`` through ``write_stream``."""
    write_stream(io.BytesIO(content), destination, timestamp_ns=timestamp_ns)


def read_file(path: Path, max_file_size_bytes: int) -> bytes:
    """Read a whole file, refusing files larger than ``max_file_size_bytes``."""
    length = path.stat().st_size
    if length > max_file_size_bytes:
        raise FileTooLargeError(path.name, size_bytes=length, max_size_bytes=max_file_size_bytes)

    with path.open("rb") as handle:
        return read_exactly(handle, length, name=path.name)


def read_exactly(handle: BinaryIO, length: int, *, name: str) -> bytes:
    """Fill a ``length``-byte buffer from ``handle``.

    Short reads are retried. A read that returns nothing while the buffer is
    still short raises ``TruncatedReadError``.
    """
    buffer = bytearray(length)
    view = memoryview(buffer)
    offset = 0
    while offset < length:
        count = handle.readinto(view[offset:])
        if not count:
            raise TruncatedReadError(name, bytes_read=offset, expected=length)
        offset += count
    return bytes(buffer)


def delete_file(path: Path) -> None:
    """Delete ``path`` if it exists."""
    with suppress(FileNotFoundError):
        path.unlink()


def format_file_size(size: int) -> str:
    """Format a byte count with KB, MB, GB, or TB units."""
    if size == 0:
        return "0"
    if size < 1024:
        return f"{size}B"

    value = float(size)
    for unit in FILE_SIZE_UNITS:
        value /= 1024
        if value < 1024 or unit == FILE_SIZE_UNITS[-1]:
            break
    return f"{round(value, 2):g}{unit}"
