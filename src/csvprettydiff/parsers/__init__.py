#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning raw delimited text into ``SourceFile`` objects."""

from csvprettydiff.parsers.csv import CsvParser, InconsistentFieldCountError, get_parser, parse_csv

__all__ = [
    "CsvParser",
    "InconsistentFieldCountError",
    "get_parser",
    "parse_csv",
]
