#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for diff/renderers/unified.py UnifiedDiffRenderer."""

import pytest

from csvprettydiff.diff.renderers.unified import (
    BOLD,
    CYAN,
    GREEN,
    RED,
    RESET,
    UnifiedDiffRenderer,
    classify_line,
    colorize_diff,
)

GRID_DIFF = [
    "--- a.csv.pretty",
    "+++ b.csv.pretty",
    "@@ -1,5 +1,5 @@",
    "-+---+---+",
    "-| a | b |",
    "++---+-----+",
    "+| a | bbb |",
    " ...",
]


@pytest.mark.unit
class TestUnifiedDiffRenderer:
    """Tests for the UnifiedDiffRenderer class."""

    def test_init_defaults(self):
        """Test default initialization."""
        assert UnifiedDiffRenderer().use_color is True

    def test_render_without_color(self):
        """Test rendering without color codes passes lines through."""
        renderer = UnifiedDiffRenderer(use_color=False)

        assert list(renderer.render(iter(GRID_DIFF))) == GRID_DIFF

    def test_file_headers_bold(self):
        """Test that file headers before the first hunk are rendered in bold."""
        result = list(UnifiedDiffRenderer().render(GRID_DIFF[:2]))

        assert result == [f"{BOLD}--- a.csv.pretty{RESET}", f"{BOLD}+++ b.csv.pretty{RESET}"]

    def test_hunk_header_cyan(self):
        """Test that hunk headers are rendered in cyan."""
        result = list(UnifiedDiffRenderer().render(GRID_DIFF))

        assert result[2] == f"{CYAN}@@ -1,5 +1,5 @@{RESET}"

    def test_grid_rules_inside_hunk_are_changes(self):
        """Test removed and added grid rules are colored as changes, not headers."""
        result = list(UnifiedDiffRenderer().render(GRID_DIFF))

        assert result[3] == f"{RED}-+---+---+{RESET}"
        assert result[5] == f"{GREEN}++---+-----+{RESET}"

    def test_simple_rule_inside_hunk(self):
        """Test a removed simple-layout rule is not mistaken for a file header."""
        lines = ["--- a.pretty", "+++ b.pretty", "@@ -1,2 +1,2 @@", "---- ----", "+----- ----"]
        result = list(UnifiedDiffRenderer().render(lines))

        assert result[3] == f"{RED}---- ----{RESET}"
        assert result[4] == f"{GREEN}+----- ----{RESET}"

    def test_context_lines_uncolored(self):
        """Test context lines are left as they are."""
        result = list(UnifiedDiffRenderer().render(GRID_DIFF))

        assert result[-1] == " ..."


    def test_custom_styles(self):
        """Test styles can be overridden per line kind."""
        renderer = UnifiedDiffRenderer(styles={"context": BOLD, "insert": ""})
        result = list(renderer.render(GRID_DIFF))

        assert result[-1] == f"{BOLD} ...{RESET}"
        assert result[5] == "++---+-----+"
        assert result[3] == f"{RED}-+---+---+{RESET}"


@pytest.mark.unit
class TestClassifyLine:
    """Tests for classify_line()."""

    @pytest.mark.parametrize(
        "line,in_hunk,expected",
        [
            ("--- a.csv.pretty", False, "file_header"),
            ("--- a.csv.pretty", True, "delete"),
            ("+++ b.csv.pretty", True, "insert"),
            ("@@ -1 +1 @@", False, "hunk_header"),
            ("@@ -1 +1 @@", True, "hunk_header"),
            ("+| 1 |", True, "insert"),
            ("-| 1 |", True, "delete"),
            (" | 1 |", True, "context"),
            ("", True, "context"),
        ],
    )
    def test_kinds(self, line, in_hunk, expected):
        """Test each line kind with and without a preceding hunk header."""
        assert classify_line(line, in_hunk) == expected


@pytest.mark.unit
class TestColorizeDiff:
    """Tests for the colorize_diff helper."""

    def test_with_color(self):
        """Test colorizing through the helper."""
        assert list(colorize_diff(["+x"])) == [f"{GREEN}+x{RESET}"]

    def test_without_color(self):
        """Test the helper can pass lines through unchanged."""
        assert list(colorize_diff(["+x", "-y"], use_color=False)) == ["+x", "-y"]
