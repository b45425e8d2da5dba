#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/diff/__init__.py
"""Comparison sessions and line diffs of pretty-printed outputs.

Key Features
------------
- Sessions rendering both sides with shared column widths
- Stable rendered identities across live updates
- Any number of concurrent sessions, even over the same files
- Unified line diff of the rendered sides using difflib

Examples
--------
Compare two files and print the diff of their rendered forms:
    >>> from csvprettydiff.diff import PrettyPrintProvider, compare_context
    >>> provider = PrettyPrintProvider()
    >>> provider.request_comparison("a.csv", "a,b\\n1,2\\n", "b.csv", "a,b\\n1,3\\n")
    >>> for line in compare_context(provider.contexts[0]):
    ...     print(line)

"""

from csvprettydiff.diff.context import DiffContext, PrettyPrintedDocument
from csvprettydiff.diff.provider import PrettyPrintProvider
from csvprettydiff.diff.text_diff import DiffResult, compare_context, compare_rendered

__all__ = [
    "DiffContext",
    "DiffResult",
    "PrettyPrintProvider",
    "PrettyPrintedDocument",
    "compare_context",
    "compare_rendered",
]
