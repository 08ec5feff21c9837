"""Disk-backed document cache with size-bounded eviction."""

from doccache.cache.eviction import list_cache_entries, maintain_cache, select_evictions
from doccache.cache.store import CacheStore, configure

__all__ = ["CacheStore", "configure", "list_cache_entries", "maintain_cache", "select_evictions"]
