"""Command-line interface for csvprettydiff.

The CLI hosts one comparison session: it reads two delimited text files,
pretty-prints both with shared column widths, and prints either a unified
diff of the two renderings or the renderings themselves. In watch mode the
session stays open and is refreshed whenever a file changes.

Examples
--------
Compare two CSV files::

    $ csvprettydiff old.csv new.csv

Compare tab-separated files using the simple layout::

    $ csvprettydiff old.tsv new.tsv --tsv --format simple

Print the pretty-printed files::

    $ csvprettydiff old.csv new.csv --print --output both.txt

Keep the comparison live while editing::

    $ csvprettydiff old.csv new.csv --watch

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import IO, Any, Dict

from csvprettydiff.cli.builder import create_parser, get_exit_code_for_exception
from csvprettydiff.cli.config import load_config_with_priority, options_from_config, resolve_delimiter
from csvprettydiff.cli.output import (
    print_rich_diff,
    print_rich_rendered,
    should_use_color,
    should_use_rich_output,
    write_diff,
)
from csvprettydiff.constants import (
    CONFIG_ENV_VAR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from csvprettydiff.diff.context import DiffContext
from csvprettydiff.diff.provider import PrettyPrintProvider
from csvprettydiff.diff.text_diff import compare_context, make_label
from csvprettydiff.exceptions import CsvPrettyDiffError
from csvprettydiff.logging_utils import configure_logging
from csvprettydiff.options.pretty import FormatOptions, ParseOptions
from csvprettydiff.source import TextDocument

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Load the configuration unless --no-config is given."""
    if parsed_args.no_config:
        return {}
    return load_config_with_priority(explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR))


def build_session_options(
    parsed_args: argparse.Namespace, config: Dict[str, Any]
) -> tuple[FormatOptions, str, ParseOptions]:
    """Combine configuration values and command-line flags; flags win.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict
        Loaded configuration

    Returns
    -------
    tuple[FormatOptions, str, ParseOptions]
        Format options, delimiter and extra parse options for the session

    Raises
    ------
    ValueError
        If a flag value is invalid

    """
    options, delimiter = options_from_config(config)

    if parsed_args.delimiter is not None:
        delimiter = resolve_delimiter(parsed_args.delimiter)

    overrides = {
        "format_type": parsed_args.format_type,
        "header_location": parsed_args.header_location,
        "insert_line_between_rows": parsed_args.insert_line_between_rows,
        "update_view_when_text_changes": parsed_args.update_view_when_text_changes,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        options = options.create_updated(**overrides)

    parse_options = ParseOptions(delimiter=delimiter, require_records=parsed_args.strict)
    return options, delimiter, parse_options


def _read_document(path: Path, encoding: str) -> TextDocument:
    return TextDocument(str(path), path.read_text(encoding=encoding))


def render_session(context: DiffContext, parsed_args: argparse.Namespace, stream: IO[str]) -> None:
    """Write the session output: both renderings with --print, else their unified diff.

    Parameters
    ----------
    context : DiffContext
        Active comparison session
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    stream : IO[str]
        Destination stream

    """
    to_terminal = parsed_args.output is None
    use_rich = to_terminal and should_use_rich_output(parsed_args, raise_on_missing=True, stream=stream)

    if parsed_args.print_rendered:
        for index, document in enumerate(context.documents):
            if use_rich:
                print_rich_rendered(make_label(document), document.text)
                continue
            if index:
                stream.write("\n")
            stream.write(f"==> {make_label(document)} <==\n")
            stream.write(document.text)
        return

    diff = compare_context(context, context_lines=parsed_args.context)
    if not diff.has_changes:
        print("No differences found.", file=sys.stderr)
        return

    if use_rich:
        print_rich_diff(diff)
    else:
        write_diff(diff, stream, use_color=to_terminal and should_use_color(parsed_args.color, stream))


def _emit(context: DiffContext, parsed_args: argparse.Namespace) -> None:
    if parsed_args.output:
        output_path = Path(parsed_args.output)
        with open(output_path, "w", encoding="utf-8") as f:
            render_session(context, parsed_args, f)
        print(f"Output written to: {output_path}", file=sys.stderr)
    else:
        render_session(context, parsed_args, sys.stdout)
        sys.stdout.flush()


def _handle_watch_mode(
    provider: PrettyPrintProvider, context: DiffContext, parsed_args: argparse.Namespace, paths: list[Path]
) -> int:
    """Keep the session open and reprint it on every change."""
    from csvprettydiff.cli.watch import run_watch_mode

    last_uri = context.second_document.uri

    def reprint(uri: str) -> None:
        # both sides are signalled; the second one closes the update
        if uri == last_uri and context.is_active:
            _emit(context, parsed_args)

    unsubscribe = provider.on_did_change(reprint)
    try:
        return run_watch_mode(
            provider,
            {path: str(path) for path in paths},
            debounce=parsed_args.watch_debounce,
            encoding=parsed_args.encoding,
        )
    finally:
        unsubscribe()


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = _load_config(parsed_args)
        options, delimiter, parse_options = build_session_options(parsed_args, config)
    except (argparse.ArgumentTypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    paths = [Path(parsed_args.file_a), Path(parsed_args.file_b)]
    documents = []
    for path in paths:
        if not path.is_file():
            print(f"Error: Source file not found: {path}", file=sys.stderr)
            return EXIT_FILE_ERROR
        try:
            documents.append(_read_document(path, parsed_args.encoding))
        except (OSError, UnicodeDecodeError, LookupError) as e:
            print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR

    provider = PrettyPrintProvider()
    try:
        provider.register_documents(documents[0], documents[1], delimiter, options, parse_options)
        context = provider.contexts[-1]
        _emit(context, parsed_args)
    except CsvPrettyDiffError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error: Cannot write output: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if parsed_args.watch:
        return _handle_watch_mode(provider, context, parsed_args, paths)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
