# src/curconv/app.py
"""
Application Entry Point - Command-line Interface

This module is the composition root of the converter. It parses the
command line into a CliArgs struct, wires the configured rate source into
a ConverterService and prints the result.

Usage:
    curconv list
    curconv --list
    curconv convert <amount> <from> <to>
    curconv <amount> <from> <to>

Files that USE this module:
- curconv.__main__ (python -m curconv)
- the ``curconv`` console script
- tests.test_app (CLI tests)

Files that this module USES:
- curconv.config (settings for source, timeout, colors and logging)
- curconv.shared (setup_logging, parse_amount)
- curconv.adapters.sources (build_source)
- curconv.adapters.formatting (tables and messages)
- curconv.application (ConverterService)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command-line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from dataclasses import dataclass  # Decorator for the parsed arguments struct
from typing import Optional, Sequence, TextIO  # Type hints

from pydantic import ValidationError  # Raised when environment configuration is invalid

from curconv import __version__
from curconv.adapters.formatting import (
    choose_style,  # Pick plain or ANSI styling for a stream
    conversion_summary,  # "Conversion result: ..." line
    conversion_table,  # Amount / From / To / Converted table
    error_line,  # Red error message
    farewell,  # Closing line after a conversion
    rates_table,  # Full snapshot listing
)
from curconv.adapters.sources import build_source  # File or HTTP source for a location
from curconv.application import ConverterService  # Use cases over a rate source
from curconv.domain.errors import (
    ConverterError,
    InvalidAmountError,
    MalformedDataError,
    SourceUnavailableError,
)
from curconv.shared import COLOR_MODES, FILE_ONLY, parse_amount, setup_logging, validate_source_location

log = logging.getLogger(__name__)

USAGE = "curconv [options] list | curconv [options] [convert] <amount> <from_currency> <to_currency>"


@dataclass(frozen=True)
class CliArgs:
    """
    Parsed command line.

    Attributes:
        command: "list" or "convert"
        amount: Raw amount text (convert only, parsed later)
        from_code: Source currency code (convert only)
        to_code: Target currency code (convert only)
        source: Rates file path or URL overriding the configuration
        timeout: HTTP timeout overriding the configuration
        color: Color mode overriding the configuration
        verbose: Enable debug logging
    """
    command: str
    amount: Optional[str] = None
    from_code: Optional[str] = None
    to_code: Optional[str] = None
    source: Optional[str] = None
    timeout: Optional[int] = None
    color: Optional[str] = None
    verbose: bool = False


def _source_arg(value: str) -> str:
    if not validate_source_location(value):
        raise argparse.ArgumentTypeError(f"invalid rates source: {value!r}")
    return value.strip()


def _timeout_arg(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}")
    if not 1 <= seconds <= 60:
        raise argparse.ArgumentTypeError("timeout must be between 1 and 60 seconds")
    return seconds


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        # Usage errors share exit code 1 with every other failure
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="curconv",
        usage=USAGE,
        description="Convert amounts between currencies using central bank reference prices.",
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="'list', or '[convert] <amount> <from_currency> <to_currency>'",
    )
    parser.add_argument(
        "--list",
        dest="list_rates",
        action="store_true",
        help="List all available conversion rates.",
    )
    parser.add_argument(
        "--source",
        type=_source_arg,
        default=None,
        help="Rates file path or http(s) URL (default: $CURCONV_RATES_SOURCE or rates.json).",
    )
    parser.add_argument(
        "--timeout",
        type=_timeout_arg,
        default=None,
        help="HTTP timeout in seconds (default: $HTTP_TIMEOUT_SECONDS or 10).",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Colorize output (default: $CURCONV_COLOR or auto).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


_VALUE_OPTIONS = ("--source", "--timeout", "--color")
_NUMBER_MARK = "\x00"


def _is_negative_number(token: str) -> bool:
    if not token.startswith("-"):
        return False
    try:
        float(token)
    except ValueError:
        return False
    return True


def _mark_negative_numbers(argv: Sequence[str]) -> list:
    """
    Prefix negative numbers so argparse does not read them as options.

    argparse only recognizes plain forms like -5 or -.5, not -1e3 or -inf.
    Option values and anything after "--" are left alone.
    """
    marked = []
    previous = None
    for i, token in enumerate(argv):
        if token == "--":
            marked.extend(argv[i:])
            break
        if previous not in _VALUE_OPTIONS and _is_negative_number(token):
            token = _NUMBER_MARK + token
        marked.append(token)
        previous = token
    return marked


def parse_args(argv: Optional[Sequence[str]] = None) -> CliArgs:
    """
    Parse the command line into CliArgs.

    Exits with status 1 after printing usage on malformed input.
    """
    parser = build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    ns = parser.parse_args(_mark_negative_numbers(raw))
    positionals = [a[len(_NUMBER_MARK):] if a.startswith(_NUMBER_MARK) else a for a in ns.args]
    common = dict(source=ns.source, timeout=ns.timeout, color=ns.color, verbose=ns.verbose)

    if ns.list_rates or positionals == ["list"]:
        if positionals and positionals != ["list"]:
            parser.error("'list' takes no arguments")
        return CliArgs(command="list", **common)

    if positionals and positionals[0] == "convert":
        positionals = positionals[1:]
    if len(positionals) != 3:
        parser.error(f"expected <amount> <from_currency> <to_currency>, got {len(positionals)} argument(s)")

    amount, from_code, to_code = positionals
    return CliArgs(command="convert", amount=amount, from_code=from_code, to_code=to_code, **common)


def run(
    args: CliArgs,
    settings,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Execute one CLI invocation.

    Args:
        args: Parsed command line
        settings: Settings instance supplying defaults for unset options
        out: Stream for tables (default: sys.stdout)
        err: Stream for error messages (default: sys.stderr)

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    out = out or sys.stdout
    err = err or sys.stderr

    color_mode = args.color or settings.color
    out_style = choose_style(color_mode, out)
    err_style = choose_style(color_mode, err)

    location = args.source or settings.rates_source
    timeout = args.timeout or settings.http_timeout_seconds
    service = ConverterService(build_source(location, timeout=timeout))
    log.debug("Command %s, rates source %s", args.command, location)

    try:
        if args.command == "list":
            print(rates_table(service.rates(), out_style), file=out)
            return 0

        amount = parse_amount(args.amount)
        conversion = service.convert(amount, args.from_code, args.to_code)
    except ConverterError as e:
        log.error("%s failed: %s", args.command, e, extra=FILE_ONLY)
        print(error_line(_describe(e), err_style), file=err)
        return 1

    print(conversion_summary(conversion), file=out)
    print(conversion_table(conversion, out_style), file=out)
    print("\n" + farewell(out_style), file=out)
    return 0


def _describe(exc: ConverterError) -> str:
    """User-facing message with the prefix for the failing stage."""
    if isinstance(exc, (SourceUnavailableError, MalformedDataError)):
        return f"Failed to load rates: {exc}"
    if isinstance(exc, InvalidAmountError):
        return f"Invalid amount: {exc}"
    return f"Conversion failed: {exc}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point."""
    args = parse_args(argv)

    # Import settings here so configuration errors are reported, not raised at import
    try:
        from curconv.config import settings
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        level=logging.DEBUG if args.verbose else settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    sys.exit(run(args, settings))


if __name__ == "__main__":
    main()
