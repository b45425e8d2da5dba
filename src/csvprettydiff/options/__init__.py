#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for parsing and formatting."""

from csvprettydiff.options.base import CloneFrozenMixin
from csvprettydiff.options.pretty import (
    FormatOptions,
    ParseOptions,
    normalize_format_type,
    normalize_header_location,
)

__all__ = [
    "CloneFrozenMixin",
    "FormatOptions",
    "ParseOptions",
    "normalize_format_type",
    "normalize_header_location",
]
