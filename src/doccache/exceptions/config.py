"""Configuration-related exceptions."""

from __future__ import annotations

from doccache.exceptions.base import DocCacheError


class ConfigError(DocCacheError, ValueError):
    """Raised when cache configuration is invalid."""

    kind = "invalid_config"

    def __init__(self, message: str) -> None:
        super().__init__(message, (message,))
