"""Shared exception hierarchy for doccache."""

from __future__ import annotations

from .base import DocCacheError
from .cache import (
    CacheFileNotFoundError,
    FileTooLargeError,
    ReadFailureError,
    TruncatedReadError,
    WriteFailureError,
)
from .config import ConfigError

__all__ = [
    "CacheFileNotFoundError",
    "ConfigError",
    "DocCacheError",
    "FileTooLargeError",
    "ReadFailureError",
    "TruncatedReadError",
    "WriteFailureError",
]
