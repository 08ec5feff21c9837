"""Shared utility helpers."""

from .naming import (
    file_extension,
    file_name_without_extension,
    generate_random_name,
    generate_versioned_name,
    is_executable,
    sanitize_file_name,
    set_tmp_extension,
)

__all__ = [
    "file_extension",
    "file_name_without_extension",
    "generate_random_name",
    "generate_versioned_name",
    "is_executable",
    "sanitize_file_name",
    "set_tmp_extension",
]
