"""Relist CLI — relist plan.

Entry point for the ``relist`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relist._types import LookupStrategy


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the relist CLI."""
    parser = argparse.ArgumentParser(
        prog="relist",
        description="Plan the list animations that turn one item list into another.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # relist plan
    plan_parser = subparsers.add_parser(
        "plan",
        help="Print the change notifications animate_to would emit",
    )
    plan_parser.add_argument("old", help="File with the current items, one per line")
    plan_parser.add_argument("new", help="File with the target items, one per line")
    plan_parser.add_argument(
        "--lookup",
        choices=("linear", "hashed"),
        default="linear",
        help="Equality lookup strategy",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from relist import __version__

    return __version__


def _read_items(path: str) -> list[str]:
    """Read one item per line, ignoring the trailing newline."""
    return Path(path).read_text(encoding="utf-8").splitlines()


def plan(
    old: list[str], new: list[str], *, lookup: LookupStrategy = "linear"
) -> list[str]:
    """Return the notification script for reconciling ``old`` to ``new``.

    One line per change, then a summary line.
    """
    from relist.collection.changes import describe
    from relist.collection.store import ItemStore
    from relist.config import RelistConfig
    from relist.display.sink import RecordingSink

    sink = RecordingSink()
    store = ItemStore(old, sink=sink, config=RelistConfig(lookup=lookup, strict=True))
    result = store.animate_to(new)
    lines = [describe(change) for change in sink.changes]
    lines.append(
        f"{result.removed} removed, {result.inserted} inserted, {result.moved} moved"
    )
    return lines


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "plan":
        try:
            old = _read_items(args.old)
            new = _read_items(args.new)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"relist: {exc}", file=sys.stderr)
            sys.exit(1)
        for line in plan(old, new, lookup=args.lookup):
            print(line)


if __name__ == "__main__":
    main()
