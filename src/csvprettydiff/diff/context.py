#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/diff/context.py
"""A single comparison session between two source documents.

A ``DiffContext`` parses both documents, reconciles their column widths and
renders both sides. Each rendered side is published under a synthetic
identity made of the source file name and a token unique to the session, so
comparing the same two files twice never produces colliding identities.

States::

    uninitialized --initialize_documents()--> active --close()--> closed
                                              active --update_document()--> active

The identities stay the same across updates; only the rendered text bound to
them is replaced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from csvprettydiff.constants import DIFF_SCHEME, SessionState
from csvprettydiff.exceptions import SessionStateError
from csvprettydiff.parsers.csv import CsvParser
from csvprettydiff.renderers.base import BaseTableRenderer
from csvprettydiff.source import SourceFile, TextDocument
from csvprettydiff.utils.ids import generate_id
from csvprettydiff.utils.width import WidthCache
from csvprettydiff.widths import calc_common_max_value_widths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrettyPrintedDocument:
    """Rendered output of one side of a comparison.

    Parameters
    ----------
    uri : str
        Synthetic identity the text is published under
    file : SourceFile
        Parsed source the text was rendered from
    text : str
        Rendered text

    """

    uri: str
    file: SourceFile
    text: str


class DiffContext:
    """Comparison session keeping two rendered documents consistent.

    Parameters
    ----------
    parser : CsvParser
        Parser bound to the session's delimiter
    renderer : BaseTableRenderer
        Renderer bound to the session's format options
    width_cache : WidthCache, optional
        Cache used for width reconciliation

    """

    def __init__(self, parser: CsvParser, renderer: BaseTableRenderer, width_cache: WidthCache | None = None):
        """Create an uninitialized session."""
        self._parser = parser
        self._renderer = renderer
        self._width_cache = width_cache
        self._diff_id = generate_id()
        self._state: SessionState = "uninitialized"
        self._first_document: PrettyPrintedDocument | None = None
        self._second_document: PrettyPrintedDocument | None = None

    @property
    def diff_id(self) -> str:
        """Token distinguishing this session's identities from other sessions'."""
        return self._diff_id

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == "active"

    @property
    def live_update(self) -> bool:
        """Whether change notifications re-render this session."""
        return self._renderer.options.update_view_when_text_changes

    @property
    def first_document(self) -> PrettyPrintedDocument:
        self._require_active("first_document")
        assert self._first_document is not None
        return self._first_document

    @property
    def second_document(self) -> PrettyPrintedDocument:
        self._require_active("second_document")
        assert self._second_document is not None
        return self._second_document

    @property
    def documents(self) -> tuple[PrettyPrintedDocument, PrettyPrintedDocument]:
        return self.first_document, self.second_document

    @property
    def uris(self) -> tuple[str, str]:
        return self.first_document.uri, self.second_document.uri

    def make_uri(self, file_name: str) -> str:
        """Build the rendered identity for ``file_name`` within this session."""
        return f"{DIFF_SCHEME}:{file_name}.{self._diff_id}"

    def initialize_documents(self, document_a: TextDocument, document_b: TextDocument) -> None:
        """Parse and render both documents, activating the session.

        Parameters
        ----------
        document_a : TextDocument
            First source document
        document_b : TextDocument
            Second source document

        Raises
        ------
        SessionStateError
            If the session was already initialized or closed
        MalformedInputError
            If either document cannot be parsed

        """
        if self._state != "uninitialized":
            raise SessionStateError(f"Cannot initialize a session that is {self._state}", state=self._state)

        file_a = self._create_file(document_a)
        file_b = self._create_file(document_b)
        self._update_documents_from_files(file_a, file_b)
        self._state = "active"
        logger.info(f"Comparing {file_a.file_name} with {file_b.file_name} (session {self._diff_id})")

    def contains(self, file_name: str) -> bool:
        """Return whether ``file_name`` is one of the session's two sources."""
        if not self.is_active:
            return False
        return file_name in (self.first_document.file.file_name, self.second_document.file.file_name)

    def update_document(self, document: TextDocument) -> bool:
        """Re-parse the matching side and re-render both sides.

        Parameters
        ----------
        document : TextDocument
            Changed document

        Returns
        -------
        bool
            True if the document belongs to this session and both sides were
            re-rendered, False if it is unrelated to the session

        Raises
        ------
        MalformedInputError
            If the changed document cannot be parsed; the previous output is kept

        """
        if not self.is_active:
            return False

        matches_first = self.first_document.file.file_name == document.file_name
        matches_second = self.second_document.file.file_name == document.file_name
        if not (matches_first or matches_second):
            return False

        # a file compared with itself changes on both sides
        changed = self._create_file(document)
        file_a = changed if matches_first else self.first_document.file
        file_b = changed if matches_second else self.second_document.file

        self._update_documents_from_files(file_a, file_b)
        logger.debug(f"Session {self._diff_id} re-rendered after change to {document.file_name}")
        return True

    def close(self) -> None:
        """Discard both rendered documents."""
        if self._state == "closed":
            return
        self._first_document = None
        self._second_document = None
        self._state = "closed"
        logger.info(f"Closed comparison session {self._diff_id}")

    def _require_active(self, attribute: str) -> None:
        if self._state != "active":
            raise SessionStateError(f"{attribute} is not available while the session is {self._state}", self._state)

    def _create_file(self, document: TextDocument) -> SourceFile:
        return self._parser.parse(document.file_name, document.text)

    def _update_documents_from_files(self, file_a: SourceFile, file_b: SourceFile) -> None:
        max_widths = calc_common_max_value_widths(file_a, file_b, self._width_cache)
        first = self._create_pretty_printed_document(file_a, max_widths)
        second = self._create_pretty_printed_document(file_b, max_widths)
        self._first_document, self._second_document = first, second

    def _create_pretty_printed_document(self, file: SourceFile, max_widths: list[int]) -> PrettyPrintedDocument:
        text = self._renderer.render_to_string(file, max_widths)
        return PrettyPrintedDocument(uri=self.make_uri(file.file_name), file=file, text=text)
