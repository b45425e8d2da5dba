"""csvprettydiff - pretty-print delimited text files for side-by-side comparison.

csvprettydiff turns two CSV/TSV/PSV files into aligned text tables whose
columns have the same display widths on both sides, so that any line-based
diff tool lines the two files up cell by cell.

Key Features
------------
- Resilient parsing: non-tabular preamble lines are kept and shown verbatim
- Width heuristic treating non-ASCII characters as double width
- Grid (bordered) and simple (whitespace-aligned) layouts
- Comparison sessions with stable rendered identities and live update
- Command-line host with unified diff, Rich output and watch mode

Requirements
------------
- Python 3.10+
- Optional dependencies: watchdog (watch mode), rich (highlighted output)

Examples
--------
Pretty-print two files with shared widths:

    >>> from csvprettydiff import pretty_print_pair
    >>> left, right = pretty_print_pair("a,bb\\n1,2\\n", "aaa,b\\n3,4\\n")

Run a live comparison session:

    >>> from csvprettydiff import PrettyPrintProvider, TextDocument
    >>> provider = PrettyPrintProvider()
    >>> uri_a, uri_b = provider.request_comparison("a.csv", "a,b\\n1,2\\n", "b.csv", "a,b\\n1,3\\n")
    >>> provider.provide_text_document_content(uri_a)
    '+---+---+\\n| a | b |\\n+---+---+\\n| 1 | 2 |\\n+---+---+\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "csvprettydiff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from csvprettydiff.api import diff_texts, pretty_print_pair  # noqa: E402
from csvprettydiff.diff import DiffContext, DiffResult, PrettyPrintedDocument, PrettyPrintProvider  # noqa: E402
from csvprettydiff.exceptions import (  # noqa: E402
    CsvPrettyDiffError,
    DependencyError,
    MalformedInputError,
    NoParsableContentError,
    ParsingError,
    RenderingError,
    SessionStateError,
    ValidationError,
)
from csvprettydiff.options import FormatOptions, ParseOptions  # noqa: E402
from csvprettydiff.parsers import CsvParser, get_parser, parse_csv  # noqa: E402
from csvprettydiff.renderers import GridRenderer, SimpleRenderer, get_renderer  # noqa: E402
from csvprettydiff.source import SourceFile, TextDocument  # noqa: E402
from csvprettydiff.utils.width import WidthCache, calc_value_width  # noqa: E402
from csvprettydiff.widths import calc_common_max_value_widths, calc_max_value_widths  # noqa: E402

__all__ = [
    "__version__",
    # Sessions
    "PrettyPrintProvider",
    "DiffContext",
    "PrettyPrintedDocument",
    "DiffResult",
    "TextDocument",
    # One-shot helpers
    "pretty_print_pair",
    "diff_texts",
    # Pipeline
    "CsvParser",
    "get_parser",
    "parse_csv",
    "SourceFile",
    "calc_value_width",
    "WidthCache",
    "calc_max_value_widths",
    "calc_common_max_value_widths",
    "GridRenderer",
    "SimpleRenderer",
    "get_renderer",
    # Options
    "FormatOptions",
    "ParseOptions",
    # Exceptions
    "CsvPrettyDiffError",
    "DependencyError",
    "MalformedInputError",
    "NoParsableContentError",
    "ParsingError",
    "RenderingError",
    "SessionStateError",
    "ValidationError",
]
