"""
Command-line entry point: parse JSON from a file or stdin and print the value.
"""

import argparse
import logging
import pprint
import sys
from typing import Optional, TextIO

from .core.engine import parse
from .security.exceptions import ParseError, SecurityError
from .utils.config import ParseConfig, ParseLimits, StructureLimits


def _read_input(path: Optional[str], stdin: TextIO) -> str:
    if path is None or path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as fp:
        return fp.read()


def build_config(args: argparse.Namespace) -> ParseConfig:
    """Translate command-line options into a ParseConfig."""
    return ParseConfig(
        limits=ParseLimits(
            structure_limits=StructureLimits(max_nesting_depth=args.max_depth)
        ),
        allow_trailing_commas=args.allow_trailing_commas,
        allow_trailing_data=args.allow_trailing_data,
    )


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="tinyjson", description="Parse a JSON document and print the result"
    )
    ap.add_argument("file", nargs="?", help="JSON file to parse (default: stdin)")
    ap.add_argument(
        "--max-depth",
        type=int,
        default=StructureLimits.max_nesting_depth,
        help="maximum array/object nesting depth",
    )
    ap.add_argument("--allow-trailing-commas", action="store_true")
    ap.add_argument(
        "--allow-trailing-data",
        action="store_true",
        help="ignore content after the first value",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        config = build_config(args)
    except ValueError as exc:
        ap.error(str(exc))

    try:
        text = _read_input(args.file, sys.stdin)
    except OSError as exc:
        print(f"tinyjson: {exc}", file=sys.stderr)
        return 2

    try:
        value = parse(text, config)
    except (ParseError, SecurityError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    pprint.pprint(value, sort_dicts=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
