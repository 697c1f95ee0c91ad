"""Command line interface for parsing, comparing and sorting loose versions.

Usage:
  loosever parse 1.2.3-beta2 v1.2
  loosever compare 1.2.3 1.2.3-beta
  loosever cmp 2.4alpha "<" 2.4
  loosever sort --reverse 2.4.20rc2 2.4.20rc1 2.4
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .compare import cmp, compare, rcompare, sort
from .config import ConfigError, load_options
from .errors import VersionError
from .parsers.loose import VersionParser


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loosever", description=__doc__.splitlines()[0])
    parser.add_argument("--config", default=None, help="Path to a JSON parser options file")
    parser.add_argument(
        "--cache-size", type=int, default=None, help="Override the parser cache size (0 disables)"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Print parsed versions as JSON")
    parse_cmd.add_argument("versions", nargs="+")

    normalize_cmd = commands.add_parser("normalize", help="Print the dotted numeric segments")
    normalize_cmd.add_argument("version")
    normalize_cmd.add_argument("--segments", type=int, default=4)

    semver_cmd = commands.add_parser("semver", help="Print the semver-compatible form")
    semver_cmd.add_argument("version")

    unique_cmd = commands.add_parser("unique", help="Print the fixed-width sortable form")
    unique_cmd.add_argument("version")
    unique_cmd.add_argument("--digits", type=int, default=6)

    compare_cmd = commands.add_parser("compare", help="Print -1, 0 or 1")
    compare_cmd.add_argument("v1")
    compare_cmd.add_argument("v2")

    cmp_cmd = commands.add_parser("cmp", help="Exit 0 when the comparison holds, 1 otherwise")
    cmp_cmd.add_argument("v1")
    cmp_cmd.add_argument("operator")
    cmp_cmd.add_argument("v2")

    sort_cmd = commands.add_parser("sort", help="Print versions in ascending order")
    sort_cmd.add_argument("versions", nargs="+")
    sort_cmd.add_argument("--reverse", action="store_true")

    return parser


def _run(args: argparse.Namespace, parser: VersionParser) -> int:
    if args.command == "parse":
        records = [parser.parse(raw).to_dict() for raw in args.versions]
        print(json.dumps(records, indent=2))
    elif args.command == "normalize":
        print(parser.parse(args.version).normalize(args.segments))
    elif args.command == "semver":
        print(parser.parse(args.version).to_semver())
    elif args.command == "unique":
        print(parser.parse(args.version).to_unique(args.digits))
    elif args.command == "compare":
        print(compare(args.v1, args.v2, parser=parser))
    elif args.command == "cmp":
        return 0 if cmp(args.v1, args.operator, args.v2, parser=parser) else 1
    elif args.command == "sort":
        order = rcompare if args.reverse else compare
        for raw in sort(args.versions, lambda a, b: order(a, b, parser=parser), parser=parser):
            print(raw)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        parser = VersionParser(load_options(args.config))
        if args.cache_size is not None:
            parser.cache_size = args.cache_size
        return _run(args, parser)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except VersionError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
