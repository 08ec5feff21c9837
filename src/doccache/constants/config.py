"""Configuration filenames and accepted keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "doccache.yaml"

CONFIG_SIZE_KEYS: tuple[str, ...] = (
    "max_cache_size_bytes",
    "resized_cache_size_bytes",
    "min_number_cached_files",
    "max_file_size_bytes",
)
CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"cache_path", "name_prefix", *CONFIG_SIZE_KEYS})
