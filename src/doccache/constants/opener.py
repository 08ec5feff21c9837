"""Constants for handing cached files to the platform opener."""

from __future__ import annotations

OPEN_FAILED_KIND: str = "failed_open_file"
MACOS_OPEN_COMMAND: str = "open"
FREEDESKTOP_OPEN_COMMAND: str = "xdg-open"
