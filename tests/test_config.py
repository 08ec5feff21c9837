"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from doccache.config import CacheConfig, build_cache_config, load_config
from doccache.constants.cache import DEFAULT_MAX_CACHE_SIZE_BYTES, DEFAULT_MIN_NUMBER_CACHED_FILES
from doccache.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded.max_cache_size_bytes == DEFAULT_MAX_CACHE_SIZE_BYTES
    assert loaded.min_number_cached_files == DEFAULT_MIN_NUMBER_CACHED_FILES
    assert loaded.resized_cache_size_bytes < loaded.max_cache_size_bytes
    assert "~" not in str(loaded.cache_path)


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    (tmp_path / "doccache.yaml").write_text(
        "cache_path: store/docs\n"
        "max_cache_size_bytes: 5000\n"
        "resized_cache_size_bytes: 3000\n"
        "min_number_cached_files: 3\n"
        "max_file_size_bytes: 1000\n"
        "name_prefix: sola\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded == CacheConfig(
        cache_path=tmp_path.resolve() / "store" / "docs",
        max_cache_size_bytes=5000,
        resized_cache_size_bytes=3000,
        min_number_cached_files=3,
        max_file_size_bytes=1000,
        name_prefix="sola",
    )


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "doccache.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == build_cache_config()


def test_load_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- just\n- a list\n", "mapping"),
        ("max_cache_size_bytes: [1\n", "Invalid YAML"),
        ("max_cache_size: 10\n", "max_cache_size"),
        ("max_cache_size_bytes: true\n", "max_cache_size_bytes"),
        ("min_number_cached_files: -1\n", "min_number_cached_files"),
        ("max_file_size_bytes: 0\n", "max_file_size_bytes"),
        ("max_cache_size_bytes: 100\nresized_cache_size_bytes: 200\n", "resized_cache_size_bytes"),
        ("cache_path: ''\n", "cache_path"),
        ("name_prefix: ' '\n", "name_prefix"),
    ],
    ids=[
        "not_mapping",
        "bad_yaml",
        "unknown_key",
        "bool_size",
        "negative_floor",
        "zero_file_limit",
        "resized_not_below_max",
        "empty_cache_path",
        "blank_prefix",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "doccache.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        build_cache_config(max_file_size_bytes="big")  # type: ignore[arg-type]
