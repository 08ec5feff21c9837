"""Hand cached files to the platform's default application."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from enum import Enum
from pathlib import Path
from typing import Protocol

from doccache.cache import CacheStore
from doccache.constants.opener import FREEDESKTOP_OPEN_COMMAND, MACOS_OPEN_COMMAND, OPEN_FAILED_KIND
from doccache.utils import is_executable, sanitize_file_name, set_tmp_extension

logger = logging.getLogger(__name__)


class OpenResult(Enum):
    """Outcome of asking the platform to open a file."""

    OPENED = "opened"
    FAILED = "failed"
    UNSUPPORTED = "unsupported"


class FileOpener(Protocol):
    """Capability that opens a file with its default application."""

    def open(self, path: Path) -> OpenResult: ...


class Notifier(Protocol):
    """User-facing message facility, called with a message kind and its parameters."""

    def __call__(self, kind: str, params: tuple[str, ...]) -> None: ...


class SystemFileOpener:
    """Open files through the host desktop (``startfile``, ``open`` or ``xdg-open``)."""

    def open(self, path: Path) -> OpenResult:
        if sys.platform == "win32":
            try:
                os.startfile(path)  # type: ignore[attr-defined]
            except OSError as exc:
                logger.warning("Could not open %s: %s", path, exc)
                return OpenResult.FAILED
            return OpenResult.OPENED

        command_name = MACOS_OPEN_COMMAND if sys.platform == "darwin" else FREEDESKTOP_OPEN_COMMAND
        command = shutil.which(command_name)
        if command is None:
            return OpenResult.UNSUPPORTED
        try:
            completed = subprocess.run([command, str(path)], check=False)
        except OSError as exc:
            logger.warning("Could not open %s: %s", path, exc)
            return OpenResult.FAILED
        return OpenResult.OPENED if completed.returncode == 0 else OpenResult.FAILED


class LoggingNotifier:
    """Notifier that reports through the module logger."""

    def __call__(self, kind: str, params: tuple[str, ...]) -> None:
        logger.warning("%s: %s", kind, ", ".join(params))


def open_cached_file(
    store: CacheStore,
    name: str,
    *,
    opener: FileOpener,
    notifier: Notifier,
) -> OpenResult:
    """Open a cached file, notifying the user instead of raising when that fails.

    Files with an executable extension are renamed to their ``.tmp`` form
    before anything is allowed to open them.
    """
    path = store.ensure_directory() / sanitize_file_name(name, False)
    if not path.is_file():
        path = store.path_for(name)
    elif is_executable(path.name):
        defused = path.with_name(set_tmp_extension(path.name))
        try:
            path.replace(defused)
        except OSError as exc:
            logger.warning("Could not rename executable %s before opening: %s", path, exc)
            notifier(OPEN_FAILED_KIND, (str(path.resolve()),))
            return OpenResult.FAILED
        path = defused

    result = opener.open(path)
    if result is not OpenResult.OPENED:
        notifier(OPEN_FAILED_KIND, (str(path.resolve()),))
    return result


def open_content(
    store: CacheStore,
    content: bytes,
    name: str | None,
    *,
    opener: FileOpener,
    notifier: Notifier,
) -> OpenResult:
    """Write ``content`` into the cache, then open it."""
    resolved = store.write(content, name)
    return open_cached_file(store, resolved, opener=opener, notifier=notifier)
