#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/widths.py
"""Column width reconciliation across the two files being compared.

Both rendered outputs of a comparison must use identical column widths,
otherwise a line diff reports alignment noise instead of data changes. The
shared width vector is the elementwise maximum of each file's own column
widths; when the files have different column counts the extra columns of the
wider file are carried over unchanged.
"""

from __future__ import annotations

from csvprettydiff.source import SourceFile
from csvprettydiff.utils.width import WidthCache, calc_value_width


def calc_max_value_widths(file: SourceFile, cache: WidthCache | None = None) -> list[int]:
    """Compute the maximum display width of each column of ``file``.

    Parameters
    ----------
    file : SourceFile
        Parsed file
    cache : WidthCache, optional
        Width cache to use

    Returns
    -------
    list[int]
        One width per column (empty when the file has no records)

    """
    max_widths = [0] * file.column_count
    for record in file.records:
        for index, value in enumerate(record):
            value_width = calc_value_width(value, cache)
            if value_width > max_widths[index]:
                max_widths[index] = value_width
    return max_widths


def merge_max_widths(a: list[int], b: list[int]) -> list[int]:
    """Merge two width vectors elementwise, keeping the tail of the longer one."""
    longer, shorter = (a, b) if len(a) > len(b) else (b, a)
    return [max(width, shorter[i]) if i < len(shorter) else width for i, width in enumerate(longer)]


def calc_common_max_value_widths(
    file_a: SourceFile, file_b: SourceFile, cache: WidthCache | None = None
) -> list[int]:
    """Compute the shared width vector for two files.

    Parameters
    ----------
    file_a : SourceFile
        First file
    file_b : SourceFile
        Second file
    cache : WidthCache, optional
        Width cache to use

    Returns
    -------
    list[int]
        Width vector of length ``max(file_a.column_count, file_b.column_count)``
        whose entries are at least each file's own maximum for that column

    """
    return merge_max_widths(calc_max_value_widths(file_a, cache), calc_max_value_widths(file_b, cache))
