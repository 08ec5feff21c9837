"""Oldest-first eviction that keeps the cache directory within its size budget."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from doccache.config import CacheConfig
from doccache.io import format_file_size
from doccache.types import CachedFile

logger = logging.getLogger(__name__)


def list_cache_entries(directory: Path) -> list[CachedFile]:
    """Return the entries directly inside ``directory`` (non-recursive)."""
    entries: list[CachedFile] = []
    with os.scandir(directory) as scan:
        for item in scan:
            try:
                is_file = item.is_file(follow_symlinks=False)
                stat = item.stat(follow_symlinks=False)
            except FileNotFoundError:
                logger.debug("Cache entry vanished while listing: %s", item.path)
                continue
            entries.append(
                CachedFile(
                    path=Path(item.path),
                    size=stat.st_size if is_file else 0,
                    mtime_ns=stat.st_mtime_ns,
                    is_file=is_file,
                )
            )
    return entries


def select_evictions(entries: list[CachedFile], incoming_size: int, config: CacheConfig) -> list[CachedFile]:
    """Choose which entries to delete before ``incoming_size`` more bytes are added.

    Nothing is selected while files plus the incoming bytes fit under
    ``max_cache_size_bytes``. Otherwise entries are walked oldest first (ties
    broken by name) and files are selected until the total drops below
    ``resized_cache_size_bytes``. The walk never goes past
    ``min_number_cached_files`` remaining entries, even if the cache is still
    over budget.

    Every walked entry counts against the floor, subdirectories included,
    although subdirectories are never selected.
    """
    total = sum(entry.size for entry in entries if entry.is_file) + incoming_size
    if total <= config.max_cache_size_bytes:
        return []

    selected: list[CachedFile] = []
    remaining = len(entries)
    for entry in sorted(entries, key=lambda item: (item.mtime_ns, item.name)):
        if remaining <= config.min_number_cached_files:
            break
        remaining -= 1
        if not entry.is_file:
            continue
        total -= entry.size
        selected.append(entry)
        if total < config.resized_cache_size_bytes:
            break
    return selected


def maintain_cache(directory: Path, incoming_size: int, config: CacheConfig) -> list[Path]:
    """Evict old files from ``directory`` so ``incoming_size`` more bytes fit.

    Deletion is best effort. A candidate that cannot be removed is logged and
    skipped. Returns the paths that were actually deleted.
    """
    entries = list_cache_entries(directory)
    candidates = select_evictions(entries, incoming_size, config)
    if not candidates:
        return []

    current = sum(entry.size for entry in entries if entry.is_file)
    logger.info(
        "Resizing document cache %s: %s cached, %s incoming, target %s",
        directory,
        format_file_size(current),
        format_file_size(incoming_size),
        format_file_size(config.resized_cache_size_bytes),
    )

    deleted: list[Path] = []
    for entry in candidates:
        try:
            entry.path.unlink()
        except FileNotFoundError:
            continue
        except OSError as exc:
            logger.warning("Could not evict cached file %s: %s", entry.path, exc)
            continue
        logger.debug("Evicted cached file %s (%s)", entry.name, format_file_size(entry.size))
        deleted.append(entry.path)
    return deleted
