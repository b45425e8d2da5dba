#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/renderers/base.py
"""Base class for table renderers.

Every renderer emits a parsed file in the same order; subclasses only decide
how each part looks. For the grid renderer the parts map to output lines as
below::

    +----+----+----+----+ <= _render_header()
    | a  | b  | c  | d  | <= _render_header_row()
    +----+----+----+----+ <= _render_header_row()
    | 1  | 2  | 3  | 4  | <= _render_data_row()
    | 11 | 12 | 13 | 14 | <= _render_data_row()
    +----+----+----+----+ <= _render_footer()

Preceding (non-tabular) lines of the file are always written first, verbatim.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO
from typing import IO, Sequence

from csvprettydiff.options.pretty import FormatOptions
from csvprettydiff.source import SourceFile
from csvprettydiff.utils.width import WidthCache, calc_value_width


class BaseTableRenderer(ABC):
    """Abstract base class for pretty-printers of parsed files.

    Parameters
    ----------
    options : FormatOptions or None, default None
        Formatting options. If None, default options are used.
    width_cache : WidthCache or None, default None
        Cache for display widths; the process-wide cache is used when omitted

    """

    def __init__(self, options: FormatOptions | None = None, width_cache: WidthCache | None = None):
        """Initialize the renderer with its formatting options."""
        self.options = options or FormatOptions()
        self.width_cache = width_cache

    @property
    def header_location(self) -> str:
        return self.options.header_location

    @property
    def insert_line_between_rows(self) -> bool:
        return self.options.insert_line_between_rows

    def render(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        """Pretty-print ``file`` to ``output``.

        Parameters
        ----------
        file : SourceFile
            File to print
        max_widths : sequence of int
            Shared column widths of all compared files
        output : IO[str]
            Text stream to write to

        """
        for preceding in file.precedings:
            self._write_line(output, preceding)

        # no file in the comparison has a single column
        if not max_widths:
            return

        if self.header_location == "implicit":
            header_row: Sequence[str] = self.implicit_header_row(len(max_widths))
            max_widths = self.fit_widths_to_header(header_row, max_widths)
        else:
            header_row = file.first_row

        self._initialize(file, max_widths)
        self._render_header(file, max_widths, output)

        if self.header_location in ("first_row", "implicit"):
            self._render_header_row(header_row, file, max_widths, output)

        first_data_row = 1 if self.header_location == "first_row" else 0
        for row_index in range(first_data_row, file.row_count):
            self._render_data_row(row_index, file.records[row_index], file, max_widths, output)

        self._render_footer(file, max_widths, output)

    def render_to_string(self, file: SourceFile, max_widths: Sequence[int]) -> str:
        """Pretty-print ``file`` and return the text.

        Parameters
        ----------
        file : SourceFile
            File to print
        max_widths : sequence of int
            Shared column widths of all compared files

        Returns
        -------
        str
            Rendered text, one ``\\n``-terminated line per output line

        """
        buffer = StringIO()
        self.render(file, max_widths, buffer)
        return buffer.getvalue()

    @staticmethod
    def implicit_header_row(column_count: int) -> list[str]:
        """Return the 1-based column labels ``["1", "2", ...]``."""
        return [str(i + 1) for i in range(column_count)]

    def fit_widths_to_header(self, header_row: Sequence[str], max_widths: Sequence[int]) -> list[int]:
        """Widen each column to at least the width of its header label.

        The labels depend only on the column count, so every file of a
        comparison is widened the same way and the outputs stay aligned.
        """
        return [
            max(width, calc_value_width(label, self.width_cache)) for label, width in zip(header_row, max_widths)
        ]

    def _initialize(self, file: SourceFile, max_widths: Sequence[int]) -> None:
        """Prepare per-file state before any table line is written."""

    @abstractmethod
    def _render_header(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        """Write the lines above the header row."""

    @abstractmethod
    def _render_header_row(
        self, header_row: Sequence[str], file: SourceFile, max_widths: Sequence[int], output: IO[str]
    ) -> None:
        """Write the header row and whatever separates it from the data."""

    @abstractmethod
    def _render_data_row(
        self, row_index: int, row: Sequence[str], file: SourceFile, max_widths: Sequence[int], output: IO[str]
    ) -> None:
        """Write one data row."""

    @abstractmethod
    def _render_footer(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        """Write the lines below the last data row."""

    def format_cell(self, value: str, width: int, max_width: int) -> str:
        """Pad ``value`` (of display width ``width``) with spaces up to ``max_width``."""
        return f"{value}{' ' * (max_width - width)}"

    def format_cells(self, values: Sequence[str], max_widths: Sequence[int]) -> list[str]:
        """Pad every value to the width of its column."""
        return [
            self.format_cell(value, calc_value_width(value, self.width_cache), max_width)
            for value, max_width in zip(values, max_widths)
        ]

    @staticmethod
    def _write_line(output: IO[str], line: str = "") -> None:
        output.write(line)
        output.write("\n")
