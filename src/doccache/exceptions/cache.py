"""Errors raised by cache reads and writes."""

from __future__ import annotations

from doccache.constants.cache import BYTES_PER_MB
from doccache.exceptions.base import DocCacheError


def _whole_megabytes(size_bytes: int) -> str:
    return f"{size_bytes // BYTES_PER_MB:,}"


class FileTooLargeError(DocCacheError):
    """Raised when a file is larger than the configured read limit."""

    kind = "file_too_large"

    def __init__(self, name: str, *, size_bytes: int, max_size_bytes: int) -> None:
        self.name = name
        self.size_bytes = size_bytes
        self.max_size_bytes = max_size_bytes
        size_mb = _whole_megabytes(size_bytes)
        max_mb = _whole_megabytes(max_size_bytes)
        super().__init__(
            f"File {name} is {size_mb} MB, which exceeds the {max_mb} MB limit",
            (size_mb, max_mb),
        )


class ReadFailureError(DocCacheError):
    """Raised when an I/O error interrupts reading a file."""

    kind = "read_failure"

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        super().__init__(f"File {name} could not be read: {cause}", (name, str(cause)))


class WriteFailureError(DocCacheError):
    """Raised when an I/O error interrupts writing a file into the cache."""

    kind = "write_failure"

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        super().__init__(f"File {name} could not be created: {cause}", (name, str(cause)))


class CacheFileNotFoundError(DocCacheError):
    """Raised when a requested cached file does not exist."""

    kind = "not_found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"File {name} is not in the cache", (name,))


class TruncatedReadError(DocCacheError):
    """Raised when fewer bytes could be read than the file reported."""

    kind = "truncated"

    def __init__(self, name: str, *, bytes_read: int, expected: int) -> None:
        self.name = name
        self.bytes_read = bytes_read
        self.expected = expected
        super().__init__(
            f"File {name} was truncated: read {bytes_read} of {expected} bytes",
            (name, str(bytes_read), str(expected)),
        )
