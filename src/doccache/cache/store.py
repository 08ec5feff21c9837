"""Document cache store: a flat directory of files with a bounded total size."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from doccache.cache.eviction import maintain_cache
from doccache.config import CacheConfig, build_cache_config
from doccache.exceptions import CacheFileNotFoundError, ReadFailureError, WriteFailureError
from doccache.io import delete_file, format_file_size, read_file, write_bytes
from doccache.utils import generate_random_name, generate_versioned_name, sanitize_file_name

logger = logging.getLogger(__name__)


class CacheStore:
    """Stores, reads, and evicts documents in the configured cache directory.

    Every name passed in is sanitized before it touches the filesystem, so
    callers may hand over untrusted names.

    The store takes no locks. ``write`` lists the directory, evicts, and then
    creates the file, and concurrent writers (threads or processes sharing the
    directory) can interleave those steps. The cache may then briefly sit over
    budget or evict more than necessary. Eviction is housekeeping, not a
    consistency guarantee.
    """

    def __init__(self, config: CacheConfig, *, clock: Callable[[], int] = time.time_ns) -> None:
        self.config = config
        self._clock = clock

    @property
    def cache_path(self) -> Path:
        return self.config.cache_path

    def ensure_directory(self) -> Path:
        """Return the cache directory, creating it and any missing parents."""
        self.cache_path.mkdir(parents=True, exist_ok=True)
        return self.cache_path

    def path_for(self, name: str) -> Path:
        """Return the cache path for ``name`` after sanitizing it."""
        return self.ensure_directory() / sanitize_file_name(name, True)

    def exists(self, name: str) -> bool:
        """Return True when ``name`` is already cached."""
        return self.path_for(name).exists()

    def versioned_name(self, file_id: str | None, version: int, extension: str | None) -> str:
        """Return a cache name for a specific version of a document."""
        return generate_versioned_name(file_id, version, extension, prefix=self.config.name_prefix)

    def write(self, content: bytes, name: str | None = None) -> str:
        """Write ``content`` into the cache and return the name it was stored under.

        Without a ``name`` a random ``.tmp`` name is generated. Old files are
        evicted first so the cache, including the new content, stays within
        budget.
        """
        if name is None:
            resolved = generate_random_name(self.config.name_prefix)
        else:
            resolved = sanitize_file_name(name, True)

        try:
            directory = self.ensure_directory()
            maintain_cache(directory, len(content), self.config)
            write_bytes(content, directory / resolved, timestamp_ns=self._clock())
        except OSError as exc:
            raise WriteFailureError(resolved, exc) from exc

        logger.debug("Cached %s (%s)", resolved, format_file_size(len(content)))
        return resolved

    def read(self, name: str) -> bytes:
        """Return the content of a cached file."""
        path = self.path_for(name)
        if not path.is_file():
            raise CacheFileNotFoundError(path.name)
        try:
            return read_file(path, self.config.max_file_size_bytes)
        except OSError as exc:
            raise ReadFailureError(path.name, exc) from exc

    def delete(self, name: str) -> None:
        """Remove ``name`` from the cache. Missing files and non-files are ignored."""
        path = self.path_for(name)
        if path.is_file():
            delete_file(path)

    def write_text(self, name: str, content: str) -> Path:
        """Write UTF-8 text into the cache without running eviction.

        Executable extensions are kept, only path separators are replaced.
        """
        path = self.ensure_directory() / sanitize_file_name(name, False)
        try:
            write_bytes(content.encode("utf-8"), path, timestamp_ns=self._clock())
        except OSError as exc:
            raise WriteFailureError(path.name, exc) from exc
        return path

    def locate(self, name: str) -> Path:
        """Resolve ``name`` to an existing file.

        The cache is checked first. Otherwise ``name`` is taken as a plain
        filesystem path.
        """
        cached = self.ensure_directory() / name
        if cached.parent == self.cache_path and cached.is_file():
            return cached
        candidate = Path(name).expanduser()
        if candidate.is_file():
            return candidate
        raise CacheFileNotFoundError(name)


def configure(
    cache_path: Path | str,
    max_cache_size_bytes: int,
    resized_cache_size_bytes: int,
    min_number_cached_files: int,
    max_file_size_bytes: int,
) -> CacheStore:
    """Build a validated config and return a store that owns it."""
    config = build_cache_config(
        cache_path=cache_path,
        max_cache_size_bytes=max_cache_size_bytes,
        resized_cache_size_bytes=resized_cache_size_bytes,
        min_number_cached_files=min_number_cached_files,
        max_file_size_bytes=max_file_size_bytes,
    )
    return CacheStore(config)
