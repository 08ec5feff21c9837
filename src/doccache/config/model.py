"""Config data model for the document cache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from doccache.constants.cache import (
    DEFAULT_CACHE_PATH,
    DEFAULT_MAX_CACHE_SIZE_BYTES,
    DEFAULT_MAX_FILE_SIZE_BYTES,
    DEFAULT_MIN_NUMBER_CACHED_FILES,
    DEFAULT_RESIZED_CACHE_SIZE_BYTES,
)
from doccache.constants.naming import DEFAULT_NAME_PREFIX
from doccache.exceptions import ConfigError


@dataclass(frozen=True)
class CacheConfig:
    """Resolved cache settings.

    Built once at startup and owned by a single ``CacheStore``. Use
    ``build_cache_config`` to get a validated instance.
    """

    cache_path: Path = DEFAULT_CACHE_PATH
    max_cache_size_bytes: int = DEFAULT_MAX_CACHE_SIZE_BYTES
    resized_cache_size_bytes: int = DEFAULT_RESIZED_CACHE_SIZE_BYTES
    min_number_cached_files: int = DEFAULT_MIN_NUMBER_CACHED_FILES
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES
    name_prefix: str = DEFAULT_NAME_PREFIX


def build_cache_config(
    *,
    cache_path: Path | str = DEFAULT_CACHE_PATH,
    max_cache_size_bytes: int = DEFAULT_MAX_CACHE_SIZE_BYTES,
    resized_cache_size_bytes: int = DEFAULT_RESIZED_CACHE_SIZE_BYTES,
    min_number_cached_files: int = DEFAULT_MIN_NUMBER_CACHED_FILES,
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    name_prefix: str = DEFAULT_NAME_PREFIX,
) -> CacheConfig:
    """Validate raw settings and return a ``CacheConfig``."""
    if not isinstance(cache_path, (str, Path)) or not str(cache_path).strip():
        raise ConfigError("cache_path must be a non-empty path")

    _ensure_non_negative_int(max_cache_size_bytes, "max_cache_size_bytes")
    _ensure_non_negative_int(resized_cache_size_bytes, "resized_cache_size_bytes")
    _ensure_non_negative_int(min_number_cached_files, "min_number_cached_files")
    _ensure_non_negative_int(max_file_size_bytes, "max_file_size_bytes")

    if max_file_size_bytes == 0:
        raise ConfigError("max_file_size_bytes must be a positive integer")
    if resized_cache_size_bytes >= max_cache_size_bytes:
        raise ConfigError(
            "resized_cache_size_bytes must be smaller than max_cache_size_bytes, "
            f"got {resized_cache_size_bytes} >= {max_cache_size_bytes}"
        )
    if not isinstance(name_prefix, str) or not name_prefix.strip():
        raise ConfigError("name_prefix must be a non-empty string")

    return CacheConfig(
        cache_path=Path(cache_path).expanduser(),
        max_cache_size_bytes=max_cache_size_bytes,
        resized_cache_size_bytes=resized_cache_size_bytes,
        min_number_cached_files=min_number_cached_files,
        max_file_size_bytes=max_file_size_bytes,
        name_prefix=name_prefix.strip(),
    )


def _ensure_non_negative_int(value: object, key_name: str) -> None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key_name} must be a non-negative integer")
