#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/renderers/__init__.py
"""Renderers turning parsed files into aligned text.

Available Renderers
-------------------
- GridRenderer: bordered table with ``+``/``-``/``|`` rules
- SimpleRenderer: whitespace-aligned columns with a dashed header rule

Examples
--------
    >>> from csvprettydiff.options import FormatOptions
    >>> from csvprettydiff.parsers import parse_csv
    >>> from csvprettydiff.renderers import get_renderer
    >>> from csvprettydiff.widths import calc_max_value_widths
    >>> file = parse_csv("a.csv", "a,bb\\n1,22\\n")
    >>> renderer = get_renderer(FormatOptions())
    >>> print(renderer.render_to_string(file, calc_max_value_widths(file)), end="")
    +---+----+
    | a | bb |
    +---+----+
    | 1 | 22 |
    +---+----+

"""

from __future__ import annotations

from csvprettydiff.exceptions import ValidationError
from csvprettydiff.options.pretty import FormatOptions
from csvprettydiff.renderers.base import BaseTableRenderer
from csvprettydiff.renderers.grid import GridRenderer
from csvprettydiff.renderers.simple import SimpleRenderer
from csvprettydiff.utils.width import WidthCache

_RENDERERS: dict[str, type[BaseTableRenderer]] = {
    "grid": GridRenderer,
    "simple": SimpleRenderer,
}


def get_renderer(options: FormatOptions, width_cache: WidthCache | None = None) -> BaseTableRenderer:
    """Get the renderer matching ``options.format_type``.

    Parameters
    ----------
    options : FormatOptions
        Formatting options
    width_cache : WidthCache, optional
        Cache for display widths

    Returns
    -------
    BaseTableRenderer
        Renderer instance

    Raises
    ------
    ValidationError
        If the format type has no renderer

    """
    renderer_class = _RENDERERS.get(options.format_type)
    if renderer_class is None:
        raise ValidationError(
            f"Unsupported format type: {options.format_type!r}",
            parameter_name="format_type",
            parameter_value=options.format_type,
        )
    return renderer_class(options, width_cache=width_cache)


__all__ = [
    "BaseTableRenderer",
    "GridRenderer",
    "SimpleRenderer",
    "get_renderer",
]
