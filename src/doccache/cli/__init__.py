"""Command-line interface for doccache."""
