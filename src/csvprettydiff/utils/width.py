#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/utils/width.py
"""Display width calculation for cell values.

Rendered character widths depend on the font the reader uses, so the width
of a value is approximated: every code point up to 127 counts as one column
and every other code point counts as two. This treats all non-ASCII text as
East Asian wide, so accented Latin text is over-padded.

Widths are memoized per exact string value. A process-wide cache is used
unless a ``WidthCache`` is passed explicitly; passing ``max_entries`` bounds
the cache with least-recently-used eviction.

Examples
--------
    >>> calc_value_width("abc")
    3
    >>> calc_value_width("ああ")
    4
    >>> cache = WidthCache(max_entries=1024)
    >>> calc_value_width("déjà", cache=cache)
    6

"""

from __future__ import annotations

import logging
from collections import OrderedDict

from csvprettydiff.constants import ASCII_MAX_CODE_POINT, NARROW_CHAR_WIDTH, WIDE_CHAR_WIDTH

logger = logging.getLogger(__name__)


def measure_width(value: str) -> int:
    """Compute the display width of ``value`` without caching."""
    width = 0
    for char in value:
        if ord(char) <= ASCII_MAX_CODE_POINT:
            width += NARROW_CHAR_WIDTH
        else:
            width += WIDE_CHAR_WIDTH
    return width


class WidthCache:
    """Memoization table for display widths.

    Parameters
    ----------
    max_entries : int or None, default None
        Maximum number of cached values. ``None`` keeps every value for the
        lifetime of the cache; a positive number evicts the least recently
        used entry once the limit is reached.

    """

    def __init__(self, max_entries: int | None = None) -> None:
        """Initialize an empty cache."""
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive when specified, got {max_entries}")
        self.max_entries = max_entries
        self._widths: OrderedDict[str, int] = OrderedDict()

    def get_width(self, value: str) -> int:
        """Return the display width of ``value``, computing it on a miss."""
        cached = self._widths.get(value)
        if cached is not None:
            if self.max_entries is not None:
                self._widths.move_to_end(value)
            return cached

        width = measure_width(value)
        self._widths[value] = width
        if self.max_entries is not None and len(self._widths) > self.max_entries:
            evicted, _ = self._widths.popitem(last=False)
            logger.debug(f"Evicted {evicted!r} from width cache")
        return width

    def clear(self) -> None:
        """Drop every cached width."""
        self._widths.clear()

    def __len__(self) -> int:
        return len(self._widths)

    def __contains__(self, value: object) -> bool:
        return value in self._widths


DEFAULT_WIDTH_CACHE = WidthCache()


def calc_value_width(value: str, cache: WidthCache | None = None) -> int:
    """Calculate the display width of a cell value.

    Parameters
    ----------
    value : str
        Input text value
    cache : WidthCache, optional
        Cache to consult; defaults to the process-wide cache

    Returns
    -------
    int
        Number of display columns the value occupies (0 for an empty string)

    """
    if cache is None:
        cache = DEFAULT_WIDTH_CACHE
    return cache.get_width(value)
