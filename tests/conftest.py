"""Shared pytest fixtures for cache tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from pathlib import Path

import pytest

from doccache.cache import CacheStore
from doccache.config import CacheConfig, build_cache_config


@pytest.fixture
def tick_clock() -> Callable[[], int]:
    """Return a clock that advances one second per call."""
    ticks = itertools.count(start=1_700_000_000)
    return lambda: next(ticks) * 1_000_000_000


@pytest.fixture
def small_config(tmp_path: Path) -> CacheConfig:
    """Return a tiny cache config rooted in a temporary directory."""
    return build_cache_config(
        cache_path=tmp_path / "cache",
        max_cache_size_bytes=1000,
        resized_cache_size_bytes=600,
        min_number_cached_files=2,
        max_file_size_bytes=500,
    )


@pytest.fixture
def store(small_config: CacheConfig, tick_clock: Callable[[], int]) -> CacheStore:
    """Return a store over ``small_config`` with deterministic file timestamps."""
    return CacheStore(small_config, clock=tick_clock)
