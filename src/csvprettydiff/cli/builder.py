#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/cli/builder.py
"""Argument parser and exit code mapping for the csvprettydiff CLI."""

from __future__ import annotations

import argparse

from csvprettydiff.constants import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_WATCH_DEBOUNCE_SECONDS,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
    FORMAT_TYPES,
    NAMED_DELIMITERS,
)
from csvprettydiff.exceptions import (
    DependencyError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from csvprettydiff.logging_utils import LOG_LEVELS

_HEADER_LOCATION_CHOICES = ["none", "first-row", "implicit"]


def _validate_context_lines(value: str) -> int:
    """Validate the --context argument."""
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def _validate_debounce(value: str) -> float:
    """Validate the --watch-debounce argument."""
    try:
        fvalue = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"debounce must be a number, got '{value}'") from e

    if fvalue < 0:
        raise argparse.ArgumentTypeError(f"debounce must be non-negative, got {fvalue}")

    return fvalue


def get_version() -> str:
    """Get the version of csvprettydiff package."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("csvprettydiff")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Format and delimiter flags default to None so that configuration file
    values apply unless a flag is given.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="csvprettydiff",
        description="Compare two CSV/TSV files after pretty-printing them with shared column widths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Unified diff of two CSV files laid out as grids
  csvprettydiff old.csv new.csv

  # Tab-separated files, whitespace-aligned, numbered header
  csvprettydiff old.tsv new.tsv --tsv --format simple --header-location implicit

  # Print both pretty-printed files instead of their diff
  csvprettydiff old.csv new.csv --print

  # Keep comparing while the files are edited
  csvprettydiff old.csv new.csv --watch
        """,
    )

    parser.add_argument("file_a", help="First delimited text file")
    parser.add_argument("file_b", help="Second delimited text file")

    delimiter_group = parser.add_argument_group("Parsing options")
    delimiter_choice = delimiter_group.add_mutually_exclusive_group()
    delimiter_choice.add_argument(
        "--delimiter",
        "-d",
        metavar="CHAR",
        help=f"Field delimiter: one character or one of {', '.join(NAMED_DELIMITERS)} (default: ',')",
    )
    for name, delimiter in NAMED_DELIMITERS.items():
        delimiter_choice.add_argument(
            f"--{name}",
            dest="delimiter",
            action="store_const",
            const=delimiter,
            help=f"Shorthand for --delimiter {delimiter!r}",
        )
    delimiter_group.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of both input files (default: utf-8)",
    )
    delimiter_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a file contains no tabular records instead of showing it as-is",
    )

    format_group = parser.add_argument_group("Formatting options")
    format_group.add_argument(
        "--format",
        "-f",
        dest="format_type",
        choices=list(FORMAT_TYPES),
        help="Layout: grid (bordered) or simple (whitespace-aligned) (default: grid)",
    )
    format_group.add_argument(
        "--header-location",
        choices=_HEADER_LOCATION_CHOICES,
        help="Header treatment: none, first-row (first record) or implicit (numbered) (default: first-row)",
    )
    format_group.add_argument(
        "--insert-line-between-rows",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Separate data rows with a rule (grid) or blank line (simple) (default: enabled)",
    )

    output_group = parser.add_argument_group("Output options")
    output_group.add_argument(
        "--print",
        dest="print_rendered",
        action="store_true",
        help="Print both pretty-printed files instead of their diff",
    )
    output_group.add_argument("--output", "-o", help="Write output to file (default: stdout)")
    output_group.add_argument(
        "--context",
        "-C",
        type=_validate_context_lines,
        default=DEFAULT_CONTEXT_LINES,
        help=f"Number of diff context lines (default: {DEFAULT_CONTEXT_LINES})",
    )
    output_group.add_argument(
        "--color",
        "--colour",
        dest="color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize output: auto (default, if terminal), always, never",
    )
    output_group.add_argument(
        "--rich",
        action="store_true",
        help="Use Rich syntax highlighting for terminal output (requires the rich extra)",
    )

    watch_group = parser.add_argument_group("Watch options")
    watch_group.add_argument(
        "--watch",
        action="store_true",
        help="Re-render and reprint whenever either file changes (requires the watch extra)",
    )
    watch_group.add_argument(
        "--watch-debounce",
        type=_validate_debounce,
        default=DEFAULT_WATCH_DEBOUNCE_SECONDS,
        metavar="SECONDS",
        help=f"Minimum delay between two updates of the same file (default: {DEFAULT_WATCH_DEBOUNCE_SECONDS})",
    )
    watch_group.add_argument(
        "--no-live-update",
        dest="update_view_when_text_changes",
        action="store_const",
        const=False,
        default=None,
        help="Ignore file changes in watch mode until restarted",
    )

    parser.add_argument(
        "--config",
        help="Path to configuration file (TOML, YAML or JSON). "
        "If not specified, searches for .csvprettydiff.toml/.yaml/.yml/.json or a pyproject.toml "
        "with [tool.csvprettydiff] from the current directory upwards, then in the home directory.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Disable loading of configuration files, including CSVPRETTYDIFF_CONFIG",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
