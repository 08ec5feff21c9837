"""Shared constants for doccache."""
