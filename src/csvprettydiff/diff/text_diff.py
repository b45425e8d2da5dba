#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/diff/text_diff.py
"""Line-based comparison of two pretty-printed outputs using difflib.

Both sides of a comparison are rendered with shared column widths, so a
plain line diff lines up cell by cell. This module hands the rendered texts
to ``difflib.unified_diff()`` the same way any external diff tool would see
them.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Iterator, Literal, Sequence

from csvprettydiff.constants import DEFAULT_CONTEXT_LINES, DIFF_EXTENSION
from csvprettydiff.diff.context import DiffContext, PrettyPrintedDocument


@dataclass(slots=True)
class DiffOp:
    """Structured diff operation between two sequences."""

    tag: Literal["replace", "delete", "insert", "equal"]
    old_slice: Sequence[str]
    new_slice: Sequence[str]
    old_range: tuple[int, int]
    new_range: tuple[int, int]


class DiffResult:
    """Bundle the rendered lines of both sides for diff renderers.

    Instances behave like an iterator over unified diff lines, while callers
    that need structure can introspect ``iter_operations()``.

    Parameters
    ----------
    old_lines : list of str
        Rendered lines of the first document
    new_lines : list of str
        Rendered lines of the second document
    old_label : str
        Label for the first document in the diff header
    new_label : str
        Label for the second document in the diff header
    context_lines : int
        Number of context lines to include when rendering unified diffs

    """

    def __init__(
        self,
        old_lines: list[str],
        new_lines: list[str],
        *,
        old_label: str,
        new_label: str,
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> None:
        """Store the rendered sequences and metadata."""
        self.old_lines = old_lines
        self.new_lines = new_lines
        self.old_label = old_label
        self.new_label = new_label
        self.context_lines = context_lines
        self._ops: list[DiffOp] | None = None

    def __iter__(self) -> Iterator[str]:
        """Iterate over the unified diff output."""
        yield from self.iter_unified_diff()

    @property
    def has_changes(self) -> bool:
        return self.old_lines != self.new_lines

    def iter_unified_diff(self, context_lines: int | None = None) -> Iterator[str]:
        """Yield unified diff lines using the cached sequences."""
        n = self.context_lines if context_lines is None else context_lines
        yield from difflib.unified_diff(
            self.old_lines,
            self.new_lines,
            fromfile=self.old_label,
            tofile=self.new_label,
            n=n,
            lineterm="",
        )

    def iter_operations(self) -> Iterator[DiffOp]:
        """Yield SequenceMatcher operations for structured renderers."""
        if self._ops is None:
            matcher = difflib.SequenceMatcher(
                None,
                self.old_lines,
                self.new_lines,
                autojunk=False,
            )
            self._ops = [
                DiffOp(
                    tag,
                    self.old_lines[i1:i2],
                    self.new_lines[j1:j2],
                    (i1, i2),
                    (j1, j2),
                )
                for tag, i1, i2, j1, j2 in matcher.get_opcodes()
            ]
        yield from self._ops

    def count_changes(self) -> tuple[int, int]:
        """Return the number of deleted and added lines."""
        deleted = 0
        added = 0
        for op in self.iter_operations():
            if op.tag in ("delete", "replace"):
                deleted += len(op.old_slice)
            if op.tag in ("insert", "replace"):
                added += len(op.new_slice)
        return deleted, added


def make_label(document: PrettyPrintedDocument) -> str:
    """Build a diff header label such as ``data.csv.pretty``."""
    return f"{document.file.file_name}{DIFF_EXTENSION}"


def compare_rendered(
    old_document: PrettyPrintedDocument,
    new_document: PrettyPrintedDocument,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> DiffResult:
    """Compare two rendered documents line by line.

    Parameters
    ----------
    old_document : PrettyPrintedDocument
        First side of the comparison
    new_document : PrettyPrintedDocument
        Second side of the comparison
    context_lines : int, default = 3
        Number of context lines to show around changes

    Returns
    -------
    DiffResult
        Diff result encapsulating sequences and render helpers

    """
    return DiffResult(
        old_document.text.splitlines(),
        new_document.text.splitlines(),
        old_label=make_label(old_document),
        new_label=make_label(new_document),
        context_lines=context_lines,
    )


def compare_context(context: DiffContext, context_lines: int = DEFAULT_CONTEXT_LINES) -> DiffResult:
    """Compare the two rendered sides of an active session.

    Raises
    ------
    SessionStateError
        If the session is not active

    """
    return compare_rendered(context.first_document, context.second_document, context_lines=context_lines)
