"""Interface for ``python -m kv_records``."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING

from ._version import version
from .backends import RedisBackend
from .config import StoreSettings
from .errors import StorageError
from .maintenance import clear_all
from .store import RecordStore


if TYPE_CHECKING:
    from collections.abc import Sequence

    from .backends import Backend


__all__ = ["main"]


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="kv_records")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command")

    get_parser = commands.add_parser("get", help="print one record as JSON")
    _ = get_parser.add_argument("prefix")
    _ = get_parser.add_argument("key")

    list_parser = commands.add_parser("list", help="print every record of a prefix, one JSON document per line")
    _ = list_parser.add_argument("prefix")

    clear_parser = commands.add_parser("clear", help="delete EVERY key in the store")
    _ = clear_parser.add_argument(
        "--non-production",
        action="store_true",
        help="confirm the store holds no production data",
    )
    return parser


async def _run(options: Namespace, backend: Backend) -> int:
    store = RecordStore(backend)
    try:
        if options.command == "get":
            record = await store.get(options.prefix, options.key)
            if record is None:
                print(f"{options.prefix}/{options.key}: not found", file=sys.stderr)
                return 1
            print(json.dumps(record))
        elif options.command == "list":
            for record in await store.get_all(options.prefix):
                print(json.dumps(record))
        elif options.command == "clear":
            removed = await clear_all(backend, non_production=options.non_production)
            print(f"removed {removed} keys")
    finally:
        await store.close()
    return 0


def main(args: Sequence[str] | None = None, *, backend: Backend | None = None) -> int:
    """Argument parser for the CLI."""
    parser = _build_parser()
    options = parser.parse_args(args)
    logging.basicConfig(level=options.log_level)
    if options.command is None:
        parser.print_help()
        return 0

    if backend is None:
        backend = RedisBackend.from_settings(StoreSettings.from_env())
    try:
        return asyncio.run(_run(options, backend))
    except (StorageError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
