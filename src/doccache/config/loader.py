"""Config loading for the document cache."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from doccache.config.model import CacheConfig, build_cache_config
from doccache.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME
from doccache.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> CacheConfig:
    """Load and validate cache config from ``doccache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return build_cache_config()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    values: dict[str, Any] = dict(raw)
    if "cache_path" in values:
        values["cache_path"] = _resolve_cache_path(values["cache_path"], path.parent)

    return build_cache_config(**values)


def _resolve_cache_path(value: Any, base_dir: Path) -> Path:
    """Expand ``~`` and anchor relative cache paths at the config file's directory."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("cache_path must be a non-empty string")
    cache_path = Path(value.strip()).expanduser()
    if not cache_path.is_absolute():
        cache_path = base_dir / cache_path
    return cache_path
