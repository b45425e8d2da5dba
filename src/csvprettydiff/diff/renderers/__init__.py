#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/diff/renderers/__init__.py
"""Renderers for the line diff of two pretty-printed outputs.

Available Renderers
-------------------
- UnifiedDiffRenderer: Colorized unified diff output for terminal

"""

from csvprettydiff.diff.renderers.unified import UnifiedDiffRenderer, classify_line, colorize_diff

__all__ = [
    "UnifiedDiffRenderer",
    "classify_line",
    "colorize_diff",
]
