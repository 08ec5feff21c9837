"""Patterns and defaults for cache file naming."""

from __future__ import annotations

import re

DEFAULT_NAME_PREFIX: str = "doc"
TMP_EXTENSION: str = "tmp"
RANDOM_NAME_VERSION: int = 0

PATH_SEPARATOR_SUBSTITUTE: str = "#"
# NUL is included because no filesystem accepts it inside a name.
PATH_SEPARATOR_PATTERN: re.Pattern[str] = re.compile(r"[\\/\x00]")
RELATIVE_SEGMENT_NAMES: frozenset[str] = frozenset({".", ".."})

EXECUTABLE_EXTENSIONS: frozenset[str] = frozenset({"exe", "msi", "bat", "cmd"})
