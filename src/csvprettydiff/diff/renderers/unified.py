#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/diff/renderers/unified.py
"""ANSI coloring for unified diffs of pretty-printed tables.

A rendered table is full of lines that look like diff syntax on their own:
grid rules start with ``+-`` and simple-layout rules with ``--``. Once such a
line is prefixed with ``-`` or ``+`` inside a hunk it can read as a ``---`` or
``+++`` file header. Lines are therefore classified with the position in the
diff in mind: file headers only exist before the first ``@@``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Literal, Mapping

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
RESET = "\033[0m"

LineKind = Literal["file_header", "hunk_header", "insert", "delete", "context"]

DEFAULT_STYLES: dict[LineKind, str] = {
    "file_header": BOLD,
    "hunk_header": CYAN,
    "insert": GREEN,
    "delete": RED,
    "context": "",
}


def classify_line(line: str, in_hunk: bool) -> LineKind:
    """Tell what part of a unified diff ``line`` is.

    Parameters
    ----------
    line : str
        One line of unified diff output
    in_hunk : bool
        Whether a ``@@`` hunk header has been seen already

    Returns
    -------
    LineKind
        Kind of the line

    """
    if line.startswith("@@"):
        return "hunk_header"
    if not in_hunk and line.startswith(("---", "+++")):
        return "file_header"
    if line.startswith("+"):
        return "insert"
    if line.startswith("-"):
        return "delete"
    return "context"


class UnifiedDiffRenderer:
    """Color unified diff lines for a terminal.

    Parameters
    ----------
    use_color : bool, default = True
        If False, lines are passed through unchanged
    styles : Mapping[LineKind, str], optional
        ANSI prefixes per line kind, merged over ``DEFAULT_STYLES``

    Examples
    --------
        >>> from csvprettydiff import diff_texts
        >>> renderer = UnifiedDiffRenderer(styles={"context": "\\033[2m"})
        >>> for line in renderer.render(diff_texts("a\\n1\\n", "a\\n2\\n")):
        ...     print(line)

    """

    def __init__(self, use_color: bool = True, styles: Mapping[LineKind, str] | None = None):
        self.use_color = use_color
        self.styles: dict[LineKind, str] = {**DEFAULT_STYLES, **(styles or {})}

    def style_line(self, line: str, kind: LineKind) -> str:
        """Wrap ``line`` in the style of ``kind``; unstyled kinds are returned as is."""
        prefix = self.styles.get(kind, "")
        if not prefix:
            return line
        return f"{prefix}{line}{RESET}"

    def render(self, diff_lines: Iterable[str]) -> Iterator[str]:
        """Yield ``diff_lines`` with ANSI colors applied.

        Parameters
        ----------
        diff_lines : Iterable[str]
            Lines of unified diff output, such as a ``DiffResult``

        Yields
        ------
        str
            Colored lines, or the original lines if color is disabled

        """
        if not self.use_color:
            yield from diff_lines
            return

        in_hunk = False
        for line in diff_lines:
            kind = classify_line(line, in_hunk)
            if kind == "hunk_header":
                in_hunk = True
            yield self.style_line(line, kind)


def colorize_diff(diff_lines: Iterable[str], use_color: bool = True) -> Iterator[str]:
    """Color unified diff lines with the default styles."""
    yield from UnifiedDiffRenderer(use_color=use_color).render(diff_lines)
