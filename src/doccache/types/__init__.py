"""Shared types for doccache."""

from .cache import CachedFile

__all__ = ["CachedFile"]
