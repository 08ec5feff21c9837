"""CLI entrypoint for the document cache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from doccache import __version__
from doccache.cache import CacheStore
from doccache.config import load_config
from doccache.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from doccache.exceptions import ConfigError, DocCacheError
from doccache.io import format_file_size
from doccache.opener import LoggingNotifier, OpenResult, SystemFileOpener, open_cached_file
from doccache.utils import sanitize_file_name

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding doccache.yaml")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show eviction and write diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    put = subparsers.add_parser("put", help="Copy a file into the cache")
    put.add_argument("file", type=Path, help="File to cache")
    put.add_argument("-n", "--name", default=None, help="Cache name (random .tmp name if omitted)")

    get = subparsers.add_parser("get", help="Read a cached file")
    get.add_argument("name", help="Cached file name")
    get.add_argument("-o", "--output", type=Path, default=None, help="Write to this path instead of stdout")

    exists = subparsers.add_parser("exists", help="Exit 0 if a file is cached, 1 otherwise")
    exists.add_argument("name", help="Cached file name")

    remove = subparsers.add_parser("rm", help="Delete a cached file")
    remove.add_argument("name", help="Cached file name")

    sanitize = subparsers.add_parser("sanitize", help="Print the on-disk name for a requested name")
    sanitize.add_argument("name", help="Requested file name")
    sanitize.add_argument(
        "--keep-executable",
        action="store_true",
        help="Do not rewrite exe/msi/bat/cmd extensions to .tmp",
    )

    name = subparsers.add_parser("name", help="Print a versioned cache name for a document")
    name.add_argument("--id", dest="file_id", default=None, help="Document number")
    name.add_argument("--file-version", type=int, default=0, help="Document row version")
    name.add_argument("--extension", default=None, help="File extension without the dot")

    open_parser = subparsers.add_parser("open", help="Open a cached file with its default application")
    open_parser.add_argument("name", help="Cached file name")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "sanitize":
        print(sanitize_file_name(args.name, not args.keep_executable))
        return 0

    try:
        store = CacheStore(load_config(args.root, args.config))
        return _dispatch(store, args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DocCacheError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return 1


def _dispatch(store: CacheStore, args: argparse.Namespace) -> int:
    """Run one cache subcommand against ``store``."""
    if args.command == "put":
        try:
            content = args.file.read_bytes()
        except OSError as exc:
            print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        resolved = store.write(content, args.name)
        logger.debug("Stored %s as %s", format_file_size(len(content)), resolved)
        print(resolved)
        return 0

    if args.command == "get":
        content = store.read(args.name)
        if args.output is None:
            sys.stdout.buffer.write(content)
            sys.stdout.flush()
        else:
            try:
                args.output.write_bytes(content)
            except OSError as exc:
                print(f"Cannot write {args.output}: {exc}", file=sys.stderr)
                return 1
        return 0

    if args.command == "exists":
        return 0 if store.exists(args.name) else 1

    if args.command == "rm":
        store.delete(args.name)
        return 0

    if args.command == "name":
        print(store.versioned_name(args.file_id, args.file_version, args.extension))
        return 0

    if args.command == "open":
        result = open_cached_file(store, args.name, opener=SystemFileOpener(), notifier=LoggingNotifier())
        return 0 if result is OpenResult.OPENED else 1

    raise ValueError(f"Unsupported command: {args.command}")
