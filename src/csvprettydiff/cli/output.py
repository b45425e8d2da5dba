"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/csvprettydiff/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import IO, Iterable

from csvprettydiff.diff.renderers.unified import colorize_diff
from csvprettydiff.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, raise_on_missing: bool = False, stream: IO[str] | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the --rich flag is set, Rich is installed and
    either --color=always is given or the stream is a TTY.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                "rich-output",
                ["rich"],
                message="Rich output requires the optional 'rich' dependency. "
                "Install with: pip install csvprettydiff[rich]",
            )
        return False

    if getattr(args, "color", "auto") == "always":
        return True

    return _is_tty(stream or sys.stdout)


def should_use_color(color: str, stream: IO[str] | None = None) -> bool:
    """Resolve a ``--color`` choice (auto, always, never) for ``stream``."""
    if color == "always":
        return True
    if color == "never":
        return False
    return _is_tty(stream or sys.stdout)


def _is_tty(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def write_diff(diff_lines: Iterable[str], stream: IO[str], use_color: bool = False) -> None:
    """Write unified diff lines to ``stream``, colored with ANSI codes if requested."""
    for line in colorize_diff(diff_lines, use_color=use_color):
        stream.write(f"{line}\n")


def print_rich_diff(diff_lines: Iterable[str], theme: str = "monokai") -> None:
    """Print unified diff lines with Rich diff syntax highlighting.

    Raises
    ------
    DependencyError
        If Rich is not installed

    """
    try:
        from rich.console import Console
        from rich.syntax import Syntax
    except ImportError as e:
        raise DependencyError("rich-output", ["rich"]) from e

    # Rich measures wide characters itself; word wrapping would break the columns
    console = Console()
    console.print(Syntax("\n".join(diff_lines), "diff", theme=theme, word_wrap=False), soft_wrap=True)


def print_rich_rendered(title: str, text: str) -> None:
    """Print one rendered document under a Rich rule titled ``title``.

    Raises
    ------
    DependencyError
        If Rich is not installed

    """
    try:
        from rich.console import Console
        from rich.rule import Rule
        from rich.text import Text
    except ImportError as e:
        raise DependencyError("rich-output", ["rich"]) from e

    console = Console()
    console.print(Rule(title))
    console.print(Text(text.rstrip("\n")), soft_wrap=True)
