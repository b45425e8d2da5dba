#  Copyright (c) 2025 Tom Villani, Ph.D.

# csvprettydiff/options/pretty.py
"""Configuration options for parsing and pretty-printing delimited text.

``ParseOptions`` controls how raw text is turned into records and
``FormatOptions`` controls how records are laid out for comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from csvprettydiff.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_FORMAT_TYPE,
    DEFAULT_HEADER_LOCATION,
    DEFAULT_INSERT_LINE_BETWEEN_ROWS,
    DEFAULT_QUOTE_CHAR,
    DEFAULT_REQUIRE_RECORDS,
    DEFAULT_SKIP_EMPTY_LINES,
    DEFAULT_UPDATE_VIEW_WHEN_TEXT_CHANGES,
    FORMAT_TYPE_ALIASES,
    FORMAT_TYPES,
    HEADER_LOCATION_ALIASES,
    HEADER_LOCATIONS,
    FormatType,
    HeaderLocation,
)
from csvprettydiff.options.base import CloneFrozenMixin


def normalize_format_type(value: str) -> FormatType:
    """Normalize a format type spelling (``"Grid"``, ``"simple"``...) to its canonical form.

    Raises
    ------
    ValueError
        If the value is not a known format type

    """
    key = str(value).strip().lower()
    if key not in FORMAT_TYPE_ALIASES:
        raise ValueError(f"format_type must be one of {', '.join(FORMAT_TYPES)}, got {value!r}")
    return FORMAT_TYPE_ALIASES[key]  # type: ignore[return-value]


def normalize_header_location(value: str) -> HeaderLocation:
    """Normalize a header location spelling (``"FirstRow"``, ``"first-row"``...) to its canonical form.

    Raises
    ------
    ValueError
        If the value is not a known header location

    """
    key = str(value).strip().lower()
    if key not in HEADER_LOCATION_ALIASES:
        raise ValueError(f"header_location must be one of {', '.join(HEADER_LOCATIONS)}, got {value!r}")
    return HEADER_LOCATION_ALIASES[key]  # type: ignore[return-value]


@dataclass(frozen=True)
class ParseOptions(CloneFrozenMixin):
    r"""Configuration options for the resilient delimited-text parser.

    Parameters
    ----------
    delimiter : str, default ","
        Single-character field separator (e.g., ',', '\\t', '|', ';').
    quote_char : str, default '"'
        Character used to quote fields containing delimiters or line breaks.
    skip_empty_lines : bool, default True
        Whether blank lines are ignored instead of forming single-cell records.
    require_records : bool, default False
        Raise ``NoParsableContentError`` when no tabular records are found.
        By default an input without records parses to an empty file.

    """

    delimiter: str = field(
        default=DEFAULT_DELIMITER,
        metadata={"help": "Field delimiter (e.g., ',', '\\t', '|')", "importance": "core"},
    )
    quote_char: str = field(
        default=DEFAULT_QUOTE_CHAR,
        metadata={"help": "Quote character for fields", "importance": "advanced"},
    )
    skip_empty_lines: bool = field(
        default=DEFAULT_SKIP_EMPTY_LINES,
        metadata={"help": "Ignore blank lines", "importance": "advanced"},
    )
    require_records: bool = field(
        default=DEFAULT_REQUIRE_RECORDS,
        metadata={"help": "Fail when no tabular records are found", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate delimiter and quote settings.

        Raises
        ------
        ValueError
            If the delimiter or quote character is not a single character, or they collide.

        """
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
        if len(self.quote_char) != 1:
            raise ValueError(f"quote_char must be a single character, got {self.quote_char!r}")
        if self.quote_char == self.delimiter:
            raise ValueError(f"quote_char and delimiter cannot both be {self.delimiter!r}")


@dataclass(frozen=True)
class FormatOptions(CloneFrozenMixin):
    """Configuration options for pretty-printing a parsed file.

    Parameters
    ----------
    format_type : {"grid", "simple"}, default "grid"
        Render style: bordered grid or whitespace-aligned columns.
    insert_line_between_rows : bool, default True
        Insert a separator (grid rule or blank line) between data rows.
    header_location : {"none", "first_row", "implicit"}, default "first_row"
        Header treatment:
        - "none": no header section
        - "first_row": the first record is the header
        - "implicit": a numeric 1-based header row is generated
    update_view_when_text_changes : bool, default True
        Whether comparison sessions re-render when a source document changes.

    Examples
    --------
        >>> options = FormatOptions(format_type="Simple", header_location="Implicit")
        >>> options.format_type, options.header_location
        ('simple', 'implicit')

    """

    format_type: FormatType = field(
        default=DEFAULT_FORMAT_TYPE,
        metadata={"help": "Render style", "choices": list(FORMAT_TYPES), "importance": "core"},
    )
    insert_line_between_rows: bool = field(
        default=DEFAULT_INSERT_LINE_BETWEEN_ROWS,
        metadata={"help": "Insert separator lines between data rows", "importance": "core"},
    )
    header_location: HeaderLocation = field(
        default=DEFAULT_HEADER_LOCATION,
        metadata={"help": "Header treatment", "choices": list(HEADER_LOCATIONS), "importance": "core"},
    )
    update_view_when_text_changes: bool = field(
        default=DEFAULT_UPDATE_VIEW_WHEN_TEXT_CHANGES,
        metadata={"help": "Re-render comparisons when a source changes", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize and validate the enumerated fields.

        Raises
        ------
        ValueError
            If format_type or header_location is not a known value, or a flag is not a bool.

        """
        object.__setattr__(self, "format_type", normalize_format_type(self.format_type))
        object.__setattr__(self, "header_location", normalize_header_location(self.header_location))
        for name in ("insert_line_between_rows", "update_view_when_text_changes"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean, got {value!r}")
