"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "doccache"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: bounded local staging cache for documents"
