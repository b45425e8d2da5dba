#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for csvprettydiff.

This module centralizes the literal types, default option values and naming
constants used across the parser, renderers and comparison sessions.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Parsing Defaults - Delimiters and reader settings
3. Formatting Defaults - Render style and header handling
4. Session Constants - Rendered identity naming
5. CLI Constants - Configuration file names and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FormatType = Literal["grid", "simple"]
HeaderLocation = Literal["none", "first_row", "implicit"]
SessionState = Literal["uninitialized", "active", "closed"]

FORMAT_TYPES: tuple[str, ...] = ("grid", "simple")
HEADER_LOCATIONS: tuple[str, ...] = ("none", "first_row", "implicit")

# Spellings accepted from configuration files and older option objects
FORMAT_TYPE_ALIASES: dict[str, str] = {
    "grid": "grid",
    "simple": "simple",
    "compact": "simple",
}
HEADER_LOCATION_ALIASES: dict[str, str] = {
    "none": "none",
    "firstrow": "first_row",
    "first_row": "first_row",
    "first-row": "first_row",
    "implicit": "implicit",
}

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_DELIMITER = ","
DEFAULT_QUOTE_CHAR = '"'
DEFAULT_SKIP_EMPTY_LINES = True
DEFAULT_REQUIRE_RECORDS = False

NAMED_DELIMITERS: dict[str, str] = {
    "csv": ",",
    "tsv": "\t",
    "psv": "|",
}

UTF8_BOM = "\ufeff"

# =============================================================================
# Formatting Defaults
# =============================================================================

DEFAULT_FORMAT_TYPE: FormatType = "grid"
DEFAULT_INSERT_LINE_BETWEEN_ROWS = True
DEFAULT_HEADER_LOCATION: HeaderLocation = "first_row"
DEFAULT_UPDATE_VIEW_WHEN_TEXT_CHANGES = True

# Code points up to this value count as a single display column
ASCII_MAX_CODE_POINT = 127
NARROW_CHAR_WIDTH = 1
WIDE_CHAR_WIDTH = 2

GRID_CORNER = "+"
GRID_HORIZONTAL = "-"
GRID_VERTICAL = "|"
SIMPLE_COLUMN_GAP = "   "
SIMPLE_RULE_CHAR = "-"

# =============================================================================
# Session Constants
# =============================================================================

DIFF_SCHEME = "csv-pretty-diff"
DIFF_EXTENSION = ".pretty"
DIFF_ID_LENGTH = 8

# =============================================================================
# CLI Constants
# =============================================================================

CONFIG_ENV_VAR = "CSVPRETTYDIFF_CONFIG"
CONFIG_FILENAMES = [
    ".csvprettydiff.toml",
    ".csvprettydiff.yaml",
    ".csvprettydiff.yml",
    ".csvprettydiff.json",
]
PYPROJECT_TOOL_SECTION = "csvprettydiff"

DEFAULT_CONTEXT_LINES = 3
DEFAULT_WATCH_DEBOUNCE_SECONDS = 0.5

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
