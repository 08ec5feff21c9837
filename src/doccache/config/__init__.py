"""Configuration loading and validation for the document cache."""

from __future__ import annotations

from doccache.config.loader import load_config
from doccache.config.model import CacheConfig, build_cache_config

__all__ = [
    "CacheConfig",
    "build_cache_config",
    "load_config",
]
