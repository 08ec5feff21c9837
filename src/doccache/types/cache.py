"""Typed cache directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CachedFile:
    """A single entry found directly inside the cache directory.

    Subdirectories are listed with ``is_file=False`` and a size of zero so
    eviction can walk them without ever deleting them.
    """

    path: Path
    size: int
    mtime_ns: int
    is_file: bool = True

    @property
    def name(self) -> str:
        """File name inside the cache directory."""
        return self.path.name
