#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/renderers/simple.py
"""Whitespace-aligned renderer without borders.

Prints records as below::

     a    b    c    d
    ---- ---- ---- ----
     1    2    3    4
     11   12   13   14

Unlike the grid renderer, columns that exist only in the other compared file
are not printed: they would be entirely blank.
"""

from __future__ import annotations

from typing import IO, Sequence

from csvprettydiff.constants import SIMPLE_COLUMN_GAP, SIMPLE_RULE_CHAR
from csvprettydiff.renderers.base import BaseTableRenderer
from csvprettydiff.source import SourceFile


class SimpleRenderer(BaseTableRenderer):
    """Render a parsed file as space-separated aligned columns."""

    def _render_header(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        pass

    def _render_header_row(
        self, header_row: Sequence[str], file: SourceFile, max_widths: Sequence[int], output: IO[str]
    ) -> None:
        if file.column_count == 0:
            return

        # An implicit header is sized to the whole comparison; cut it back to
        # this file's columns. The rule below follows this file's columns too.
        sliced_header_row = header_row[: file.column_count]
        sliced_max_widths = max_widths[: file.column_count]

        self._write_line(output, self._format_row(self.format_cells(sliced_header_row, max_widths)))
        self._write_line(output, " ".join(SIMPLE_RULE_CHAR * (width + 2) for width in sliced_max_widths))

    def _render_data_row(
        self, row_index: int, row: Sequence[str], file: SourceFile, max_widths: Sequence[int], output: IO[str]
    ) -> None:
        self._write_line(output, self._format_row(self.format_cells(row, max_widths)))
        if self.insert_line_between_rows and row_index != file.row_count - 1:
            self._write_line(output)

    def _render_footer(self, file: SourceFile, max_widths: Sequence[int], output: IO[str]) -> None:
        pass

    @staticmethod
    def _format_row(cells: Sequence[str]) -> str:
        return f" {SIMPLE_COLUMN_GAP.join(cells)}".rstrip()
