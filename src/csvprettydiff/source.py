#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/source.py
"""Data model for parsed delimited-text sources.

A ``SourceFile`` is the result of one parse call. It is immutable; when the
underlying document changes the file is re-parsed and replaced as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextDocument:
    """A source document handed over by the host.

    Parameters
    ----------
    file_name : str
        Stable identity of the document (usually its path)
    text : str
        Current full text of the document

    """

    file_name: str
    text: str


@dataclass(frozen=True)
class SourceFile:
    """Parsed delimited-text file.

    Parameters
    ----------
    file_name : str
        Identity of the source (name or path)
    records : tuple of tuple of str
        Parsed records; every record has the same number of cells
    precedings : tuple of str
        Leading lines that were skipped because they are not part of the table
    delimiter : str
        Delimiter the records were parsed with

    """

    file_name: str
    records: tuple[tuple[str, ...], ...] = ()
    precedings: tuple[str, ...] = ()
    delimiter: str = ","
    _column_count: int = field(init=False, repr=False, compare=False, default=0)

    def __post_init__(self) -> None:
        """Freeze sequences and validate the column-count invariant.

        Raises
        ------
        ValueError
            If records do not all have the same number of cells

        """
        records = tuple(tuple(record) for record in self.records)
        object.__setattr__(self, "records", records)
        object.__setattr__(self, "precedings", tuple(self.precedings))

        column_count = len(records[0]) if records else 0
        for index, record in enumerate(records):
            if len(record) != column_count:
                raise ValueError(
                    f"Record {index} of {self.file_name} has {len(record)} cells, expected {column_count}"
                )
        object.__setattr__(self, "_column_count", column_count)

    @property
    def first_row(self) -> tuple[str, ...]:
        """First record, or an empty tuple when there are no records."""
        return self.records[0] if self.records else ()

    @property
    def column_count(self) -> int:
        """Number of cells per record (0 when there are no records)."""
        return self._column_count

    @property
    def row_count(self) -> int:
        """Number of records."""
        return len(self.records)
