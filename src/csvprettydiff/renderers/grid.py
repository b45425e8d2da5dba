#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/renderers/grid.py
"""Bordered grid renderer.

Prints records as below::

    +----+----+----+----+
    | a  | b  | c  | d  |
    +----+----+----+----+
    | 1  | 2  | 3  | 4  |
    | 11 | 12 | 13 | 14 |
    +----+----+----+----+

Columns that exist only in the other compared file are printed as blank
cells so both outputs have the same shape.
"""

from __future__ import annotations

from typing import IO, Sequence

from csvprettydiff.constants import GRID_CORNER, GRID_HORIZONTAL, GRID_VERTICAL
from csvprettydiff.exceptions import RenderingError
from csvprettydiff.options.pretty import FormatOptions
from csvprettydiff.renderers.base import BaseTableRenderer
from csvprettydiff.source import SourceFile
from csvprettydiff.utils.width import WidthCache


class GridRenderer(BaseTableRenderer):
    """Render a parsed file as a bordered grid."""

    def __init__(self, options: FormatOptions | None = None, width_cache: WidthCache | None = None):
        """Initialize the renderer with its formatting options."""
        super().__init__(options, width_cache=width_cache)
        # +----+----+ for the file being printed
        self._horizontal_grid_line = ""
        # cells of columns this file does not have
        self._blank_cells: list[str] = []

    def _initialize(self, file: SourceFile, max_widths: Sequence[int]) -> None:
        self._horizontal_grid_line = self.make_grid_line(max_widths)
        self._blank_cells = self._make_blank_cells(file, max_widths)

    @staticmethod
    def make_grid_line(max_widths: Sequence[int]) -> str:
        """Build a horizontal rule such as ``+-----+----+``."""
        segments = [GRID_HORIZONTAL * (width + 2) for width in max_widths]
        return f"{GRID_CORNER}{GRID_CORNER.join(segments)}{GRID_CORNER}"

    def _render_header(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        self._write_line(output, self._horizontal_grid_line)

    def _render_header_row(
        self, header_row: Sequence[str], file: SourceFile, max_widths: Sequence[int], output: IO[str]
    ) -> None:
        if self.header_location == "first_row":
            cells = self.format_cells(header_row, max_widths) + self._blank_cells
        elif self.header_location == "implicit":
            # already sized to every column of the comparison
            cells = self.format_cells(header_row, max_widths)
        else:
            raise RenderingError(
                f"Cannot render a header row with header_location={self.header_location!r}",
                rendering_stage="header_row",
            )

        self._write_line(output, self._format_row(cells))
        self._write_line(output, self._horizontal_grid_line)

    def _render_data_row(
        self, row_index: int, row: Sequence[str], file: SourceFile, max_widths: Sequence[int], output: IO[str]
    ) -> None:
        cells = self.format_cells(row, max_widths) + self._blank_cells
        self._write_line(output, self._format_row(cells))
        if self.insert_line_between_rows:
            self._write_line(output, self._horizontal_grid_line)

    def _render_footer(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        if not self.insert_line_between_rows:
            self._write_line(output, self._horizontal_grid_line)

    @staticmethod
    def _format_row(cells: Sequence[str]) -> str:
        separator = f" {GRID_VERTICAL} "
        return f"{GRID_VERTICAL} {separator.join(cells)} {GRID_VERTICAL}"

    def _make_blank_cells(self, file: SourceFile, max_widths: Sequence[int]) -> list[str]:
        return [self.format_cell("", 0, max_widths[i]) for i in range(file.column_count, len(max_widths))]
