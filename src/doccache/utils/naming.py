"""Name helpers for files created inside the cache directory."""

from __future__ import annotations

import uuid

from doccache.constants.naming import (
    DEFAULT_NAME_PREFIX,
    EXECUTABLE_EXTENSIONS,
    PATH_SEPARATOR_PATTERN,
    PATH_SEPARATOR_SUBSTITUTE,
    RANDOM_NAME_VERSION,
    RELATIVE_SEGMENT_NAMES,
    TMP_EXTENSION,
)


def sanitize_file_name(name: str, replace_executable_extension: bool = True) -> str:
    """Turn an untrusted name into a single path segment safe to create in the cache.

    Path separators are replaced so the name cannot point outside the cache
    directory. With ``replace_executable_extension`` set, executable names are
    defused with ``set_tmp_extension``. Applying this twice gives the same result
    as applying it once.
    """
    result = PATH_SEPARATOR_PATTERN.sub(PATH_SEPARATOR_SUBSTITUTE, name)
    if not result:
        result = PATH_SEPARATOR_SUBSTITUTE
    elif result in RELATIVE_SEGMENT_NAMES:
        result = result.replace(".", PATH_SEPARATOR_SUBSTITUTE)
    if replace_executable_extension and is_executable(result):
        result = set_tmp_extension(result)
    return result


def file_extension(name: str) -> str | None:
    """Return the text after the last dot, or ``None`` when the name has no dot."""
    _, dot, extension = name.rpartition(".")
    if not dot:
        return None
    return extension


def file_name_without_extension(name: str) -> str:
    """Return ``name`` with its extension removed."""
    stem, dot, _ = name.rpartition(".")
    if not dot or not stem:
        return name
    return stem


def is_executable(name: str) -> bool:
    """Return True when the extension is one of exe, msi, bat, or cmd (any case)."""
    extension = file_extension(name)
    if extension is None:
        return False
    return extension.lower() in EXECUTABLE_EXTENSIONS


def set_tmp_extension(name: str) -> str:
    """Replace every dot with an underscore and append ``.tmp``.

    The original extension stays readable, e.g. ``setup.exe`` becomes
    ``setup_exe.tmp``.
    """
    return f"{name.replace('.', '_')}.{TMP_EXTENSION}"


def generate_random_name(prefix: str = DEFAULT_NAME_PREFIX) -> str:
    """Return a unique ``.tmp`` name for content that arrives without a name."""
    return generate_versioned_name(str(uuid.uuid4()), RANDOM_NAME_VERSION, TMP_EXTENSION, prefix=prefix)


def generate_versioned_name(
    file_id: str | None,
    version: int,
    extension: str | None,
    *,
    prefix: str = DEFAULT_NAME_PREFIX,
) -> str:
    """Build ``<prefix>_<id>_<version>.<extension>`` and sanitize it.

    Falls back to a random name when ``file_id`` or ``extension`` is missing.
    Including the version means updated documents never hit a stale cached copy.
    """
    if not file_id or not extension:
        return generate_random_name(prefix)
    return sanitize_file_name(f"{prefix}_{file_id}_{version}.{extension}", True)
