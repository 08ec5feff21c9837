"""Doccache package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from doccache.cache import CacheStore, configure
from doccache.config import CacheConfig, load_config
from doccache.exceptions import (
    CacheFileNotFoundError,
    ConfigError,
    DocCacheError,
    FileTooLargeError,
    ReadFailureError,
    TruncatedReadError,
    WriteFailureError,
)
from doccache.utils import sanitize_file_name

__all__ = [
    "CacheConfig",
    "CacheFileNotFoundError",
    "CacheStore",
    "ConfigError",
    "DocCacheError",
    "FileTooLargeError",
    "ReadFailureError",
    "TruncatedReadError",
    "WriteFailureError",
    "__version__",
    "configure",
    "load_config",
    "sanitize_file_name",
]

try:
    __version__ = version("doccache")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
