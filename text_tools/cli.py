"""Command-line interface: format a list read from a file or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_settings
from .decoding import decode_input
from .engine import format_values, join_values
from .errors import InputError, TextToolsError
from .logging_config import setup_logging
from .options import build_options

logger = logging.getLogger(__name__)

EPILOG = """\
examples:
  text-tools data.txt
  text-tools data.txt -d newline -w double-quote -c upper
  text-tools data.txt --no-dedup --no-trim
  cat data.txt | text-tools -d comma+newline -w none
  text-tools data.txt -d "| " -w parens > output.txt
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        # exit 1 on usage errors
        self.exit(1, f"Error: {message}. Use --help for usage.\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="text-tools",
        description="Normalize, clean & format data lists from the terminal",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    parser.add_argument(
        "-w",
        "--wrapper",
        help="Wrapper around each value: single-quote | double-quote | parens | none (default: single-quote)",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        help="Delimiter between values: comma | semicolon | newline | comma+newline | pipe, "
        "or any custom string (default: comma)",
    )
    parser.add_argument("-c", "--case", help="Case transformation: upper | lower | none (default: none)")
    parser.add_argument(
        "--no-dedup",
        dest="dedup",
        action="store_false",
        help="Keep duplicate values (dedup is on by default)",
    )
    parser.add_argument(
        "--no-trim",
        dest="trim",
        action="store_false",
        help="Keep leading/trailing spaces (trim is on by default)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise InputError(f'Could not read file "{path}"\n{exc}') from exc


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv and sys.stdin.isatty():
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    if args.delimiter == "":
        parser.error("--delimiter requires a value")

    try:
        settings = load_settings()
        setup_logging(logging.DEBUG if args.verbose else settings.log_level)

        options = build_options(
            wrapper=args.wrapper,
            delimiter=args.delimiter,
            case=args.case,
            dedup=args.dedup,
            trim=args.trim,
        )
        decoded = decode_input(read_input(args.path))
    except TextToolsError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    logger.info("read %d chars from %s (%s)", len(decoded.text), args.path, decoded.encoding)

    values = format_values(decoded.text, options)
    if not values:
        return 0

    output = join_values(values, options.delimiter, options.custom_delimiter)
    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
