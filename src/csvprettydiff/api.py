#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/api.py
"""One-shot helpers for callers that do not need a live session."""

from __future__ import annotations

from csvprettydiff.constants import DEFAULT_CONTEXT_LINES, DEFAULT_DELIMITER
from csvprettydiff.diff.context import DiffContext
from csvprettydiff.diff.text_diff import DiffResult, compare_context
from csvprettydiff.options.pretty import FormatOptions, ParseOptions
from csvprettydiff.parsers.csv import CsvParser
from csvprettydiff.renderers import get_renderer
from csvprettydiff.source import TextDocument


def _open_context(
    name_a: str,
    text_a: str,
    name_b: str,
    text_b: str,
    delimiter: str,
    options: FormatOptions | None,
) -> DiffContext:
    context = DiffContext(
        CsvParser(ParseOptions(delimiter=delimiter)),
        get_renderer(options or FormatOptions()),
    )
    context.initialize_documents(TextDocument(name_a, text_a), TextDocument(name_b, text_b))
    return context


def pretty_print_pair(
    text_a: str,
    text_b: str,
    delimiter: str = DEFAULT_DELIMITER,
    options: FormatOptions | None = None,
    name_a: str = "a",
    name_b: str = "b",
) -> tuple[str, str]:
    """Pretty-print two delimited texts with shared column widths.

    Parameters
    ----------
    text_a : str
        First delimited text
    text_b : str
        Second delimited text
    delimiter : str, default ","
        Field delimiter of both texts
    options : FormatOptions, optional
        Formatting options
    name_a : str, default "a"
        Name of the first text, used in error messages
    name_b : str, default "b"
        Name of the second text, used in error messages

    Returns
    -------
    tuple[str, str]
        Rendered first and second text

    Raises
    ------
    MalformedInputError
        If either text cannot be parsed

    Examples
    --------
        >>> left, right = pretty_print_pair("a,b\\n1,2\\n", "a\\n333\\n")
        >>> print(left, end="")
        +-----+---+
        | a   | b |
        +-----+---+
        | 1   | 2 |
        +-----+---+

    """
    context = _open_context(name_a, text_a, name_b, text_b, delimiter, options)
    try:
        return context.first_document.text, context.second_document.text
    finally:
        context.close()


def diff_texts(
    text_a: str,
    text_b: str,
    delimiter: str = DEFAULT_DELIMITER,
    options: FormatOptions | None = None,
    name_a: str = "a",
    name_b: str = "b",
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> DiffResult:
    """Pretty-print two delimited texts and compare the renderings line by line.

    Parameters are those of ``pretty_print_pair`` plus ``context_lines``, the
    number of unified diff context lines.

    Returns
    -------
    DiffResult
        Diff of the two renderings

    """
    context = _open_context(name_a, text_a, name_b, text_b, delimiter, options)
    try:
        return compare_context(context, context_lines=context_lines)
    finally:
        context.close()
