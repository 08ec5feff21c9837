"""Tests for cache store operations."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from doccache import configure
from doccache.cache import CacheStore
from doccache.config import CacheConfig
from doccache.exceptions import (
    CacheFileNotFoundError,
    ConfigError,
    FileTooLargeError,
    ReadFailureError,
    WriteFailureError,
)


def test_ensure_directory_creates_parents(tmp_path: Path) -> None:
    store = configure(tmp_path / "a" / "b" / "cache", 1000, 600, 2, 500)

    first = store.ensure_directory()
    second = store.ensure_directory()

    assert first == second == tmp_path / "a" / "b" / "cache"
    assert first.is_dir()


def test_configure_validates_thresholds(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="resized_cache_size_bytes"):
        configure(tmp_path, 1000, 1000, 2, 500)


@pytest.mark.parametrize("size", [0, 1, 499, 500])
def test_write_read_roundtrip(store: CacheStore, size: int) -> None:
    content = os.urandom(size)

    name = store.write(content, "doc.pdf")

    assert name == "doc.pdf"
    assert store.read(name) == content


def test_read_rejects_file_over_limit(store: CacheStore) -> None:
    name = store.write(b"x" * 501, "big.bin")

    with pytest.raises(FileTooLargeError):
        store.read(name)


def test_write_without_name_uses_random_tmp_name(store: CacheStore) -> None:
    name = store.write(b"anonymous")

    assert name.endswith(".tmp")
    assert store.exists(name)
    assert store.read(name) == b"anonymous"


def test_write_sanitizes_untrusted_name(store: CacheStore, small_config: CacheConfig) -> None:
    name = store.write(b"payload", "../escape/setup.exe")

    assert name == "__#escape#setup_exe.tmp"
    assert (small_config.cache_path / name).is_file()
    assert not (small_config.cache_path.parent / "escape").exists()


def test_lookups_sanitize_names(store: CacheStore) -> None:
    store.write(b"data", "dir/run.bat")

    assert store.exists("dir/run.bat")
    assert store.read("dir\\run.bat") == b"data"


def test_overwrite_replaces_content(store: CacheStore) -> None:
    store.write(b"first version, longer", "doc.txt")
    store.write(b"second", "doc.txt")

    assert store.read("doc.txt") == b"second"


def test_read_missing_raises_not_found(store: CacheStore) -> None:
    with pytest.raises(CacheFileNotFoundError) as excinfo:
        store.read("missing.pdf")

    assert excinfo.value.kind == "not_found"
    assert excinfo.value.params == ("missing.pdf",)


def test_delete_missing_is_noop(store: CacheStore) -> None:
    store.delete("never-written.pdf")

    assert not store.exists("never-written.pdf")


def test_delete_removes_file(store: CacheStore) -> None:
    name = store.write(b"data", "gone.txt")

    store.delete(name)

    assert not store.exists(name)


def test_write_evicts_oldest_before_creating_file(store: CacheStore, small_config: CacheConfig) -> None:
    seeded = [store.write(b"x" * 200, f"doc{index}.bin") for index in range(5)]

    store.write(b"y" * 200, "incoming.bin")

    remaining = sorted(path.name for path in small_config.cache_path.iterdir())
    assert remaining == sorted([*seeded[3:], "incoming.bin"])
    assert sum(path.stat().st_size for path in small_config.cache_path.iterdir()) == 600


def test_written_files_are_stamped_by_clock(store: CacheStore, small_config: CacheConfig) -> None:
    store.write(b"a", "a.txt")
    store.write(b"b", "b.txt")

    first = (small_config.cache_path / "a.txt").stat().st_mtime_ns
    second = (small_config.cache_path / "b.txt").stat().st_mtime_ns
    assert second - first == 1_000_000_000


def test_write_failure_wraps_os_error(store: CacheStore, small_config: CacheConfig) -> None:
    (small_config.cache_path / "taken").mkdir(parents=True)

    with pytest.raises(WriteFailureError) as excinfo:
        store.write(b"data", "taken")

    assert excinfo.value.params[0] == "taken"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_read_failure_wraps_os_error(
    store: CacheStore,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    store.write(b"data", "doc.txt")

    def broken_read(path: Path, max_file_size_bytes: int) -> bytes:
        raise OSError("device error")

    monkeypatch.setattr("doccache.cache.store.read_file", broken_read)

    with pytest.raises(ReadFailureError, match="device error"):
        store.read("doc.txt")


def test_write_text_keeps_executable_extension(store: CacheStore) -> None:
    path = store.write_text("notes/run.cmd", "echo hi")

    assert path.name == "notes#run.cmd"
    assert path.read_text(encoding="utf-8") == "echo hi"


def test_versioned_name_uses_configured_prefix(tmp_path: Path) -> None:
    store = CacheStore(CacheConfig(cache_path=tmp_path, name_prefix="sola"))

    assert store.versioned_name("12/7", 3, "pdf") == "sola_12#7_3.pdf"


def test_locate_prefers_cache_then_filesystem(store: CacheStore, tmp_path: Path) -> None:
    store.write(b"cached", "doc.pdf")
    outside = tmp_path / "outside.pdf"
    outside.write_bytes(b"elsewhere")

    assert store.locate("doc.pdf") == store.cache_path / "doc.pdf"
    assert store.locate(str(outside)) == outside
    with pytest.raises(CacheFileNotFoundError):
        store.locate("nowhere.pdf")


def test_empty_name_never_denotes_cache_directory(store: CacheStore) -> None:
    store.ensure_directory()

    assert store.path_for("") != store.cache_path
    assert not store.exists("")
    store.delete("")
    assert store.cache_path.is_dir()


def test_delete_ignores_subdirectory(store: CacheStore, small_config: CacheConfig) -> None:
    nested = small_config.cache_path / "nested"
    nested.mkdir(parents=True)

    store.delete("nested")

    assert nested.is_dir()
