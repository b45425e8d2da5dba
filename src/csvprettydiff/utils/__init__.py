#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Utility helpers shared by the parser, renderers and sessions."""

from csvprettydiff.utils.ids import generate_id
from csvprettydiff.utils.width import DEFAULT_WIDTH_CACHE, WidthCache, calc_value_width, measure_width

__all__ = [
    "DEFAULT_WIDTH_CACHE",
    "WidthCache",
    "calc_value_width",
    "generate_id",
    "measure_width",
]
