"""Constants used by the document cache, eviction, and streaming."""

from __future__ import annotations

from pathlib import Path

BYTES_PER_MB: int = 1024 * 1024

DEFAULT_CACHE_PATH: Path = Path("~/.doccache/documents")
DEFAULT_MAX_CACHE_SIZE_BYTES: int = 200 * BYTES_PER_MB
DEFAULT_RESIZED_CACHE_SIZE_BYTES: int = 120 * BYTES_PER_MB
DEFAULT_MIN_NUMBER_CACHED_FILES: int = 10
DEFAULT_MAX_FILE_SIZE_BYTES: int = 100 * BYTES_PER_MB

STREAM_CHUNK_SIZE: int = 8 * 1024

# Units for human-readable sizes, smallest first. The last unit absorbs anything larger.
FILE_SIZE_UNITS: tuple[str, ...] = ("KB", "MB", "GB", "TB")
