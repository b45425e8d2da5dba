"""Unit tests for the resilient delimited-text parser."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from csvprettydiff.exceptions import MalformedInputError, NoParsableContentError, ParsingError
from csvprettydiff.options import ParseOptions
from csvprettydiff.parsers import CsvParser, get_parser, parse_csv


@pytest.mark.unit
class TestParseRecords:
    """Tests for well-formed input."""

    def test_basic(self, input_a):
        """Test quoted and unquoted fields with double-width values."""
        source = parse_csv("a", input_a)

        assert source.file_name == "a"
        assert source.precedings == ()
        assert source.records == (
            ("a", "bb", "ccc", "ああああ"),
            ("1", "22", "333", "いいい"),
            ("4", "55", "666", "うう"),
        )
        assert source.column_count == 4
        assert source.row_count == 3
        assert source.first_row == ("a", "bb", "ccc", "ああああ")

    def test_tab_delimiter(self):
        """Test tab-separated input with a bound parser."""
        source = get_parser("\t").parse("t", "a\tb\n1\t2\n")

        assert source.records == (("a", "b"), ("1", "2"))
        assert source.delimiter == "\t"

    def test_pipe_delimiter(self):
        """Test pipe-separated input."""
        source = parse_csv("p", "a|b\n1|2\n", delimiter="|")

        assert source.records == (("a", "b"), ("1", "2"))

    def test_quoted_delimiter_and_newline(self):
        """Test quoted fields may hold delimiters and line breaks."""
        source = parse_csv("q", 'a,b\n"x,y","line1\nline2"\n')

        assert source.records[1] == ("x,y", "line1\nline2")

    def test_escaped_quote(self):
        """Test doubled quotes inside a quoted field."""
        source = parse_csv("q", 'a\n"say ""hi"""\n')

        assert source.records[1] == ('say "hi"',)

    def test_no_trailing_newline(self):
        """Test the last record does not need a terminator."""
        assert parse_csv("f", "a,b\n1,2").records == (("a", "b"), ("1", "2"))

    def test_crlf(self):
        """Test Windows line endings."""
        assert parse_csv("f", "a,b\r\n1,2\r\n").records == (("a", "b"), ("1", "2"))

    def test_bom_dropped(self):
        """Test a leading byte order mark is not part of the first cell."""
        assert parse_csv("f", "\ufeffa,b\n1,2\n").first_row == ("a", "b")

    def test_blank_lines_skipped(self):
        """Test blank lines do not form records by default."""
        assert parse_csv("f", "a,b\n\n1,2\n\n").records == (("a", "b"), ("1", "2"))

    def test_blank_lines_kept_when_disabled(self):
        """Test blank lines become single-cell records when not skipped."""
        options = ParseOptions(skip_empty_lines=False)
        source = CsvParser(options).parse("f", "a\n\nb\n")

        assert source.records == (("a",), ("",), ("b",))


@pytest.mark.unit
class TestPrecedingLines:
    """Tests for recovery from non-tabular leading lines."""

    def test_single_preamble_line(self):
        """Test a title line above the table is moved to precedings."""
        source = parse_csv("f", "Sales report\na,b\n1,2\n")

        assert source.precedings == ("Sales report",)
        assert source.records == (("a", "b"), ("1", "2"))

    def test_multiple_preamble_lines(self):
        """Test several leading lines are skipped one at a time, in order."""
        source = parse_csv("f", "title\nexported by,tool,v1\na,b\n1,2\n")

        assert source.precedings == ("title", "exported by,tool,v1")
        assert source.records == (("a", "b"), ("1", "2"))

    def test_crlf_preamble_consumes_whole_terminator(self):
        """Test a skipped CRLF line leaves no stray carriage return."""
        source = parse_csv("f", "title\r\na,b\r\n1,2\r\n")

        assert source.precedings == ("title",)
        assert source.first_row == ("a", "b")

    def test_skipped_lines_logged(self, caplog):
        """Test every skipped line is reported at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="csvprettydiff.parsers.csv"):
            parse_csv("f", "title\na,b\n1,2\n")

        assert "skipping preceding line 1: 'title'" in caplog.text

    def test_last_line_alone_forms_table(self):
        """Test skipping stops as soon as the remaining lines agree."""
        source = parse_csv("f", "a,b\n1\n")

        # the last line alone is a valid one-record table
        assert source.precedings == ("a,b",)
        assert source.records == (("1",),)

    def test_unterminated_last_record_after_preamble(self):
        """Test the table may end without a line terminator after skipped lines."""
        source = parse_csv("f", "title\na,b")

        assert source.precedings == ("title",)
        assert source.records == (("a", "b"),)

    def test_quoted_line_break_after_preamble(self):
        """Test a line break inside a quoted cell does not split the record being kept."""
        source = parse_csv("f", 'note\n"a\nb",c\n')

        assert source.precedings == ("note",)
        assert source.records == (("a\nb", "c"),)

    def test_empty_input(self):
        """Test empty input yields an empty file."""
        source = parse_csv("f", "")

        assert source.records == ()
        assert source.precedings == ()
        assert source.column_count == 0

    def test_only_blank_lines(self):
        """Test blank-only input yields an empty file."""
        assert parse_csv("f", "\n\n\n").row_count == 0

    def test_require_records(self):
        """Test strict mode rejects input without records."""
        parser = CsvParser(ParseOptions(require_records=True))

        with pytest.raises(NoParsableContentError, match="No parsable records in empty.csv"):
            parser.parse("empty.csv", "\n\n")

    @given(st.lists(st.text(alphabet="abc,\n ", max_size=12), max_size=6).map("\n".join))
    def test_column_count_invariant(self, text):
        """Test every parsed record has the column count of the first record."""
        source = parse_csv("f", text)

        assert all(len(record) == source.column_count for record in source.records)


@pytest.mark.unit
class TestMalformedInput:
    """Tests for reader failures that are not recoverable."""

    def test_unterminated_quote(self):
        """Test an unterminated quoted field raises MalformedInputError."""
        with pytest.raises(MalformedInputError) as exc_info:
            parse_csv("bad.csv", 'a,b\n1,"open\n')

        assert exc_info.value.file_name == "bad.csv"
        assert exc_info.value.parsing_stage == "records"
        assert exc_info.value.original_error is not None

    def test_text_after_closing_quote(self):
        """Test characters after a closing quote are rejected in strict mode."""
        with pytest.raises(ParsingError):
            parse_csv("bad.csv", 'a,b\n"1"x,2\n')


@pytest.mark.unit
class TestParseOptions:
    """Tests for ParseOptions validation."""

    def test_defaults(self):
        """Test default options."""
        options = ParseOptions()
        assert options.delimiter == ","
        assert options.quote_char == '"'
        assert options.skip_empty_lines is True
        assert options.require_records is False

    @pytest.mark.parametrize("delimiter", ["", ";;"])
    def test_delimiter_must_be_one_character(self, delimiter):
        """Test empty and multi-character delimiters are rejected."""
        with pytest.raises(ValueError, match="single character"):
            ParseOptions(delimiter=delimiter)

    def test_quote_char_cannot_be_delimiter(self):
        """Test the quote character must differ from the delimiter."""
        with pytest.raises(ValueError):
            ParseOptions(delimiter='"')

    def test_parser_exposes_delimiter(self):
        """Test the parser reports the delimiter it is bound to."""
        assert get_parser(";").delimiter == ";"
