"""Shared file I/O helpers."""

from .files import delete_file, format_file_size, read_file, write_bytes, write_stream

__all__ = ["delete_file", "format_file_size", "read_file", "write_bytes", "write_stream"]
