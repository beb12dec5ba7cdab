"""Command-line interface for pgoid.

Usage::

    pgoid query int4 text uuid
    pgoid known
    pgoid resolve pg_type.csv
"""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgoid",
        description="pgoid CLI: PostgreSQL type OID discovery helpers.",
    )
    sub = parser.add_subparsers(dest="command")

    query = sub.add_parser(
        "query",
        help="Print the pg_type query for the given type names.",
    )
    query.add_argument("names", nargs="+", help="Type names (e.g. int4 text).")

    sub.add_parser("known", help="List the type names the client understands.")

    resolve = sub.add_parser(
        "resolve",
        help="Parse a CSV of typname,oid,typarray rows and print OIDs.",
    )
    resolve.add_argument("path", help="CSV file with pg_type rows.")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "query":
        return _cmd_query(args)
    if args.command == "known":
        return _cmd_known(args)
    if args.command == "resolve":
        return _cmd_resolve(args)

    return 0


def _cmd_query(args: argparse.Namespace) -> int:
    from .catalog import build_query

    print(build_query(sorted(set(args.names))))
    return 0


def _cmd_known(args: argparse.Namespace) -> int:
    from .codecs import default_registry
    from .constants import KNOWN_TYPE_NAMES

    for name in sorted(KNOWN_TYPE_NAMES | set(default_registry().names)):
        print(name)
    return 0


def _cmd_resolve(args: argparse.Namespace) -> int:
    from .catalog import parse_rows
    from .exc import PgoidError

    path = Path(args.path)
    if not path.exists():
        print(f"error: file not found: {path}", file=sys.stderr)
        return 1

    with open(path, newline='') as f:
        rows = [row for row in csv.reader(f) if row]
    if rows and rows[0][0].strip().lower() == 'typname':
        rows = rows[1:]

    try:
        entries = parse_rows([tuple(field.strip() for field in row) for row in rows])
    except PgoidError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for entry in entries:
        print(f"{entry.oid}\t{entry.name}")
        print(f"{entry.array_oid}\t{entry.name}[]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
