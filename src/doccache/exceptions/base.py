"""Base exception for doccache."""

from __future__ import annotations

from typing import ClassVar


class DocCacheError(Exception):
    """Root of all doccache errors.

    Every error carries a stable ``kind`` and the ``params`` a caller needs to
    render a localized message for it.
    """

    kind: ClassVar[str] = "unexpected_error"

    def __init__(self, message: str, params: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.params = params
