"""Unit tests for the grid and simple table renderers."""

import io

import pytest

from csvprettydiff.exceptions import RenderingError, ValidationError
from csvprettydiff.options import FormatOptions
from csvprettydiff.parsers import parse_csv
from csvprettydiff.renderers import GridRenderer, SimpleRenderer, get_renderer
from csvprettydiff.source import SourceFile
from csvprettydiff.widths import calc_common_max_value_widths, calc_max_value_widths

GRID_HEADER_A = """\
+-----+----+-----+----------+
| a   | bb | ccc | ああああ |
+-----+----+-----+----------+
| 1   | 22 | 333 | いいい   |
+-----+----+-----+----------+
| 4   | 55 | 666 | うう     |
+-----+----+-----+----------+
"""

GRID_HEADER_B = """\
+-----+----+-----+----------+
| aaa | bb | c   |          |
+-----+----+-----+----------+
| 111 | 22 | 3   |          |
+-----+----+-----+----------+
| 444 | 55 | 6   |          |
+-----+----+-----+----------+
"""

# (format_type, insert_line_between_rows, header_location, expected_a, expected_b)
RENDER_CASES = [
    ("grid", True, "none", GRID_HEADER_A, GRID_HEADER_B),
    ("grid", True, "first_row", GRID_HEADER_A, GRID_HEADER_B),
    (
        "grid",
        True,
        "implicit",
        """\
+-----+----+-----+----------+
| 1   | 2  | 3   | 4        |
+-----+----+-----+----------+
| a   | bb | ccc | ああああ |
+-----+----+-----+----------+
| 1   | 22 | 333 | いいい   |
+-----+----+-----+----------+
| 4   | 55 | 666 | うう     |
+-----+----+-----+----------+
""",
        """\
+-----+----+-----+----------+
| 1   | 2  | 3   | 4        |
+-----+----+-----+----------+
| aaa | bb | c   |          |
+-----+----+-----+----------+
| 111 | 22 | 3   |          |
+-----+----+-----+----------+
| 444 | 55 | 6   |          |
+-----+----+-----+----------+
""",
    ),
    (
        "grid",
        False,
        "none",
        """\
+-----+----+-----+----------+
| a   | bb | ccc | ああああ |
| 1   | 22 | 333 | いいい   |
| 4   | 55 | 666 | うう     |
+-----+----+-----+----------+
""",
        """\
+-----+----+-----+----------+
| aaa | bb | c   |          |
| 111 | 22 | 3   |          |
| 444 | 55 | 6   |          |
+-----+----+-----+----------+
""",
    ),
    (
        "grid",
        False,
        "first_row",
        """\
+-----+----+-----+----------+
| a   | bb | ccc | ああああ |
+-----+----+-----+----------+
| 1   | 22 | 333 | いいい   |
| 4   | 55 | 666 | うう     |
+-----+----+-----+----------+
""",
        """\
+-----+----+-----+----------+
| aaa | bb | c   |          |
+-----+----+-----+----------+
| 111 | 22 | 3   |          |
| 444 | 55 | 6   |          |
+-----+----+-----+----------+
""",
    ),
    (
        "grid",
        False,
        "implicit",
        """\
+-----+----+-----+----------+
| 1   | 2  | 3   | 4        |
+-----+----+-----+----------+
| a   | bb | ccc | ああああ |
| 1   | 22 | 333 | いいい   |
| 4   | 55 | 666 | うう     |
+-----+----+-----+----------+
""",
        """\
+-----+----+-----+----------+
| 1   | 2  | 3   | 4        |
+-----+----+-----+----------+
| aaa | bb | c   |          |
| 111 | 22 | 3   |          |
| 444 | 55 | 6   |          |
+-----+----+-----+----------+
""",
    ),
    (
        "simple",
        True,
        "none",
        """\
 a     bb   ccc   ああああ

 1     22   333   いいい

 4     55   666   うう
""",
        """\
 aaa   bb   c

 111   22   3

 444   55   6
""",
    ),
    (
        "simple",
        True,
        "first_row",
        """\
 a     bb   ccc   ああああ
----- ---- ----- ----------
 1     22   333   いいい

 4     55   666   うう
""",
        """\
 aaa   bb   c
----- ---- -----
 111   22   3

 444   55   6
""",
    ),
    (
        "simple",
        True,
        "implicit",
        """\
 1     2    3     4
----- ---- ----- ----------
 a     bb   ccc   ああああ

 1     22   333   いいい

 4     55   666   うう
""",
        """\
 1     2    3
----- ---- -----
 aaa   bb   c

 111   22   3

 444   55   6
""",
    ),
    (
        "simple",
        False,
        "none",
        """\
 a     bb   ccc   ああああ
 1     22   333   いいい
 4     55   666   うう
""",
        """\
 aaa   bb   c
 111   22   3
 444   55   6
""",
    ),
    (
        "simple",
        False,
        "first_row",
        """\
 a     bb   ccc   ああああ
----- ---- ----- ----------
 1     22   333   いいい
 4     55   666   うう
""",
        """\
 aaa   bb   c
----- ---- -----
 111   22   3
 444   55   6
""",
    ),
    (
        "simple",
        False,
        "implicit",
        """\
 1     2    3     4
----- ---- ----- ----------
 a     bb   ccc   ああああ
 1     22   333   いいい
 4     55   666   うう
""",
        """\
 1     2    3
----- ---- -----
 aaa   bb   c
 111   22   3
 444   55   6
""",
    ),
]


@pytest.fixture
def sample_files(input_a, input_b, width_cache):
    """Parse both samples and compute their shared widths."""
    file_a = parse_csv("a", input_a)
    file_b = parse_csv("b", input_b)
    return file_a, file_b, calc_common_max_value_widths(file_a, file_b, width_cache)


@pytest.mark.unit
class TestRenderCombinations:
    """Every layout, separator and header combination for two differently shaped files."""

    def test_shared_widths(self, sample_files):
        """Test the width vector the expectations below are built on."""
        _, _, max_widths = sample_files
        assert max_widths == [3, 2, 3, 8]

    @pytest.mark.parametrize(
        "format_type,insert_line,header_location,expected_a,expected_b",
        RENDER_CASES,
        ids=[f"{case[0]}-{'lines' if case[1] else 'nolines'}-{case[2]}" for case in RENDER_CASES],
    )
    def test_render(self, sample_files, format_type, insert_line, header_location, expected_a, expected_b):
        """Test rendering both files with shared widths."""
        file_a, file_b, max_widths = sample_files
        options = FormatOptions(
            format_type=format_type,
            insert_line_between_rows=insert_line,
            header_location=header_location,
        )
        renderer = get_renderer(options)

        assert renderer.render_to_string(file_a, max_widths) == expected_a
        assert renderer.render_to_string(file_b, max_widths) == expected_b


@pytest.mark.unit
class TestGridRenderer:
    """Tests for GridRenderer specifics."""

    def test_grid_line(self):
        """Test rule segments are two wider than the column."""
        assert GridRenderer.make_grid_line([3, 2]) == "+-----+----+"

    def test_small_table(self):
        """Test a two-column table with a header row."""
        file = parse_csv("f", "a,b\n1,22\n")
        output = GridRenderer(FormatOptions()).render_to_string(file, calc_max_value_widths(file))

        assert output == "+---+----+\n| a | b  |\n+---+----+\n| 1 | 22 |\n+---+----+\n"

    def test_precedings_written_first(self):
        """Test preamble lines appear verbatim above the table."""
        file = parse_csv("f", "Report 2024\na,b\n1,2\n")
        output = GridRenderer(FormatOptions(insert_line_between_rows=False)).render_to_string(
            file, calc_max_value_widths(file)
        )

        assert output.splitlines()[0] == "Report 2024"
        assert output.splitlines()[1] == "+---+---+"

    def test_render_to_stream(self):
        """Test render() writes to any text stream."""
        file = parse_csv("f", "a\n")
        buffer = io.StringIO()
        GridRenderer().render(file, [1], buffer)

        assert buffer.getvalue() == "+---+\n| a |\n+---+\n"

    def test_empty_width_vector_writes_only_precedings(self):
        """Test no grid scaffolding is emitted when no file has columns."""
        file = SourceFile("f", records=(), precedings=("just text",))

        assert GridRenderer().render_to_string(file, []) == "just text\n"

    def test_file_without_records_gets_blank_rows(self):
        """Test a file with no records still has the other file's shape."""
        file = SourceFile("f")
        output = GridRenderer().render_to_string(file, [1, 2])

        assert output == "+---+----+\n|   |    |\n+---+----+\n"

    def test_implicit_labels_widen_narrow_columns(self):
        """Test labels of ten or more columns fit their cells on every line."""
        file_a = parse_csv("a", ",".join("abcdefghij") + "\n")
        file_b = parse_csv("b", ",".join("0123456789") + "\n")
        max_widths = calc_common_max_value_widths(file_a, file_b)
        renderer = GridRenderer(FormatOptions(header_location="implicit"))

        output_a = renderer.render_to_string(file_a, max_widths)
        output_b = renderer.render_to_string(file_b, max_widths)

        assert {len(line) for line in output_a.splitlines() + output_b.splitlines()} == {42}
        assert output_a.splitlines()[1].endswith("| 9 | 10 |")
        assert output_a.splitlines()[3].endswith("| i | j  |")

    def test_unknown_header_location_rejected(self):
        """Test the header row hook refuses header locations it cannot draw."""
        renderer = GridRenderer()
        file = parse_csv("f", "a\n")
        renderer._initialize(file, [1])

        object.__setattr__(renderer.options, "header_location", "none")
        with pytest.raises(RenderingError):
            renderer._render_header_row(["a"], file, [1], io.StringIO())


@pytest.mark.unit
class TestSimpleRenderer:
    """Tests for SimpleRenderer specifics."""

    def test_trailing_whitespace_trimmed(self):
        """Test rows do not end with padding."""
        file = parse_csv("f", "a,b\n1,2\n")
        output = SimpleRenderer(FormatOptions(format_type="simple")).render_to_string(file, [5, 5])

        assert all(line == line.rstrip() for line in output.splitlines())

    def test_rule_sliced_to_own_columns(self):
        """Test the rule follows the file's own column count, not the comparison's."""
        file = parse_csv("f", "a\n1\n")
        output = SimpleRenderer(FormatOptions(format_type="simple", header_location="implicit")).render_to_string(
            file, [1, 4, 2]
        )

        assert output.splitlines()[:2] == [" 1", "---"]

    def test_no_blank_line_after_last_row(self):
        """Test the row separator is only placed between rows."""
        file = parse_csv("f", "a\n1\n2\n")
        output = SimpleRenderer(FormatOptions(format_type="simple")).render_to_string(file, [1])

        assert output == " a\n---\n 1\n\n 2\n"

    def test_implicit_labels_widen_narrow_columns(self):
        """Test the rule under implicit labels covers the widest label."""
        file = parse_csv("f", ",".join("abcdefghij") + "\n")
        output = SimpleRenderer(FormatOptions(format_type="simple", header_location="implicit")).render_to_string(
            file, calc_max_value_widths(file)
        )

        header, rule, row = output.splitlines()
        assert header.endswith("9   10")
        assert rule.endswith("--- ----")
        assert row.endswith("i   j")

    def test_file_without_records_has_no_header(self):
        """Test an empty file renders only its preceding lines."""
        file = SourceFile("f", precedings=("note",))
        output = SimpleRenderer(FormatOptions(format_type="simple")).render_to_string(file, [3])

        assert output == "note\n"


@pytest.mark.unit
class TestGetRenderer:
    """Tests for get_renderer()."""

    def test_grid(self):
        """Test grid selection."""
        assert isinstance(get_renderer(FormatOptions(format_type="grid")), GridRenderer)

    def test_simple(self):
        """Test simple selection, including aliases."""
        assert isinstance(get_renderer(FormatOptions(format_type="Simple")), SimpleRenderer)

    def test_unknown_format(self):
        """Test a format type without renderer raises ValidationError."""
        options = FormatOptions()
        object.__setattr__(options, "format_type", "html")

        with pytest.raises(ValidationError):
            get_renderer(options)
