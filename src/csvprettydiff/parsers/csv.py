#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/parsers/csv.py
"""Resilient delimited-text parser.

Files being compared often start with lines that are not part of the table,
such as export banners or comments above the header. The parser reads the
whole text as delimited records; when a record has a different number of
cells than the first one, it assumes the first line is such a preamble line,
moves it to ``precedings`` and starts over on the rest of the text. This
repeats until the remaining text parses cleanly or nothing is left.

Any other reader failure (an unterminated quoted field, text after a closing
quote) is reported as ``MalformedInputError`` without retrying.

"""

from __future__ import annotations

import csv
import io
import logging
import re
from typing import Any, Iterator

from csvprettydiff.constants import UTF8_BOM
from csvprettydiff.exceptions import MalformedInputError, NoParsableContentError
from csvprettydiff.options.pretty import ParseOptions
from csvprettydiff.source import SourceFile

logger = logging.getLogger(__name__)

_NEW_LINE_RE = re.compile(r"\r\n|\r|\n")


class InconsistentFieldCountError(Exception):
    """Raised internally when a record's cell count differs from the first record's."""

    def __init__(self, record_index: int, expected: int, actual: int):
        """Record where the mismatch happened."""
        super().__init__(f"Record {record_index} has {actual} fields, expected {expected}")
        self.record_index = record_index
        self.expected = expected
        self.actual = actual


def _make_csv_dialect(delimiter: str, quotechar: str) -> type[csv.Dialect]:
    """Create a strict CSV dialect class based on ``csv.excel``.

    Parameters
    ----------
    delimiter : str
        The delimiter character
    quotechar : str
        The quote character

    Returns
    -------
    type[csv.Dialect]
        A dialect class with the given delimiter and quote character

    """
    attrs: dict[str, Any] = {"delimiter": delimiter, "quotechar": quotechar, "strict": True}
    return type("PrettyDiffDialect", (csv.excel,), attrs)


class CsvParser:
    """Parse delimited text into a ``SourceFile``, skipping non-tabular leading lines.

    Parameters
    ----------
    options : ParseOptions or None
        Parsing options; defaults to comma-delimited

    Examples
    --------
        >>> parser = CsvParser(ParseOptions(delimiter=","))
        >>> source = parser.parse("data.csv", "exported 2024-01-01\\na,b\\n1,2\\n")
        >>> source.precedings
        ('exported 2024-01-01',)
        >>> source.records
        (('a', 'b'), ('1', '2'))

    """

    def __init__(self, options: ParseOptions | None = None):
        """Initialize the parser with its options."""
        self.options = options or ParseOptions()
        self._dialect = _make_csv_dialect(self.options.delimiter, self.options.quote_char)

    @property
    def delimiter(self) -> str:
        """Delimiter this parser splits fields on."""
        return self.options.delimiter

    def parse(self, file_name: str, text: str) -> SourceFile:
        """Parse ``text`` into a ``SourceFile``.

        Parameters
        ----------
        file_name : str
            Identity of the source
        text : str
            Raw file contents

        Returns
        -------
        SourceFile
            Parsed records plus any skipped leading lines. A file with no
            tabular content yields zero records.

        Raises
        ------
        MalformedInputError
            If the reader fails for a reason other than an inconsistent field count
        NoParsableContentError
            If no records were found and ``require_records`` is enabled

        """
        precedings: list[str] = []
        remains = text[1:] if text.startswith(UTF8_BOM) else text

        while remains:
            try:
                records = self._read_records(file_name, remains)
                return self._build_file(file_name, records, precedings)
            except InconsistentFieldCountError as e:
                # a mismatch needs a second record, so a line terminator is always found
                line, remains = _NEW_LINE_RE.split(remains, maxsplit=1)
                logger.debug(f"{file_name}: skipping preceding line {len(precedings) + 1}: {line!r} ({e})")
                precedings.append(line)

        return self._build_file(file_name, [], precedings)

    def _iter_records(self, file_name: str, text: str) -> Iterator[list[str]]:
        """Yield records from ``text`` as the reader produces them."""
        reader = csv.reader(io.StringIO(text, newline=""), dialect=self._dialect)
        try:
            for row in reader:
                if not row:
                    if self.options.skip_empty_lines:
                        continue
                    row = [""]
                yield row
        except csv.Error as e:
            raise MalformedInputError(
                f"Malformed delimited text in {file_name} near line {reader.line_num}: {e}",
                file_name=file_name,
                original_error=e,
            ) from e

    def _read_records(self, file_name: str, text: str) -> list[list[str]]:
        """Read all records, enforcing a consistent field count."""
        records: list[list[str]] = []
        expected: int | None = None
        for index, record in enumerate(self._iter_records(file_name, text)):
            if expected is None:
                expected = len(record)
            elif len(record) != expected:
                raise InconsistentFieldCountError(index, expected, len(record))
            records.append(record)
        return records

    def _build_file(self, file_name: str, records: list[list[str]], precedings: list[str]) -> SourceFile:
        if not records and self.options.require_records:
            raise NoParsableContentError(file_name)

        if precedings:
            logger.debug(f"{file_name}: skipped {len(precedings)} preceding line(s)")
        return SourceFile(
            file_name=file_name,
            records=tuple(tuple(record) for record in records),
            precedings=tuple(precedings),
            delimiter=self.options.delimiter,
        )


def get_parser(delimiter: str, **kwargs: Any) -> CsvParser:
    r"""Get a parser bound to ``delimiter``.

    Parameters
    ----------
    delimiter : str
        Field delimiter (e.g., ',', '\\t', '|')
    **kwargs
        Additional ``ParseOptions`` fields

    Returns
    -------
    CsvParser
        Parser instance

    """
    return CsvParser(ParseOptions(delimiter=delimiter, **kwargs))


def parse_csv(file_name: str, text: str, delimiter: str = ",", options: ParseOptions | None = None) -> SourceFile:
    """Parse delimited text into a ``SourceFile``.

    Parameters
    ----------
    file_name : str
        Identity of the source
    text : str
        Raw file contents
    delimiter : str, default ","
        Field delimiter; ignored when ``options`` is given
    options : ParseOptions, optional
        Full parsing options

    Returns
    -------
    SourceFile
        Parsed file

    """
    if options is None:
        options = ParseOptions(delimiter=delimiter)
    return CsvParser(options).parse(file_name, text)
