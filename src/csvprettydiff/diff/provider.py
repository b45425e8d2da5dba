#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csvprettydiff/diff/provider.py
"""Content provider serving pretty-printed comparison outputs to a host.

The host (an editor, the command-line watcher, a test) talks to the provider
through five touchpoints:

- ``register_documents()`` starts a comparison and returns the two rendered
  identities
- ``update_document()`` reports a changed source document
- ``remove_document()`` reports a closed source document
- ``provide_text_document_content()`` resolves a rendered identity to text
- ``on_did_change()`` subscribes to "rendered identity changed" signals

Several comparisons may be open at once; notifications are routed to all of
them because one source can take part in more than one comparison.

Examples
--------
    >>> provider = PrettyPrintProvider()
    >>> uri_a, uri_b = provider.request_comparison("a.csv", "a,b\\n1,2\\n", "b.csv", "a,b\\n1,3\\n")
    >>> changed = []
    >>> unsubscribe = provider.on_did_change(changed.append)
    >>> provider.update_document(TextDocument("a.csv", "a,b\\n1,22\\n"))
    >>> changed == [uri_a, uri_b]
    True

"""

from __future__ import annotations

import logging
from typing import Callable

from csvprettydiff.diff.context import DiffContext
from csvprettydiff.exceptions import CsvPrettyDiffError
from csvprettydiff.options.pretty import FormatOptions, ParseOptions
from csvprettydiff.parsers.csv import CsvParser
from csvprettydiff.renderers import get_renderer
from csvprettydiff.source import TextDocument
from csvprettydiff.utils.width import WidthCache

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]
"""Callable receiving the rendered identity whose text changed."""


class PrettyPrintProvider:
    """Manage comparison sessions and serve their rendered text.

    Parameters
    ----------
    width_cache : WidthCache, optional
        Cache shared by every session; the process-wide cache is used when omitted

    """

    def __init__(self, width_cache: WidthCache | None = None):
        """Create a provider with no sessions."""
        self._width_cache = width_cache
        self._contexts: list[DiffContext] = []
        self._listeners: list[ChangeListener] = []

    @property
    def contexts(self) -> tuple[DiffContext, ...]:
        return tuple(self._contexts)

    def __len__(self) -> int:
        return len(self._contexts)

    def provide_text_document_content(self, uri: str) -> str:
        """Return the rendered text for ``uri``, or an empty string if it is unknown."""
        for context in self._contexts:
            for document in context.documents:
                if document.uri == uri:
                    return document.text

        logger.debug(f"No rendered content for {uri}")
        return ""

    def register_documents(
        self,
        document_a: TextDocument,
        document_b: TextDocument,
        delimiter: str,
        options: FormatOptions | None = None,
        parse_options: ParseOptions | None = None,
    ) -> tuple[str, str]:
        """Start a comparison of two documents.

        Parameters
        ----------
        document_a : TextDocument
            First input document
        document_b : TextDocument
            Second input document
        delimiter : str
            Delimiter of both documents
        options : FormatOptions, optional
            Formatting options for the session
        parse_options : ParseOptions, optional
            Extra parsing options; its delimiter is replaced by ``delimiter``

        Returns
        -------
        tuple[str, str]
            Rendered identities of the first and second document

        Raises
        ------
        MalformedInputError
            If either document cannot be parsed; no session is registered

        """
        options = options or FormatOptions()
        parse_options = (parse_options or ParseOptions()).create_updated(delimiter=delimiter)

        context = DiffContext(
            CsvParser(parse_options),
            get_renderer(options, width_cache=self._width_cache),
            width_cache=self._width_cache,
        )
        context.initialize_documents(document_a, document_b)
        self._contexts.append(context)

        return context.uris

    def request_comparison(
        self,
        file_name_a: str,
        text_a: str,
        file_name_b: str,
        text_b: str,
        delimiter: str = ",",
        options: FormatOptions | None = None,
    ) -> tuple[str, str]:
        """Start a comparison from raw names and texts; see ``register_documents``."""
        return self.register_documents(
            TextDocument(file_name_a, text_a), TextDocument(file_name_b, text_b), delimiter, options
        )

    def update_document(self, document: TextDocument) -> None:
        """Re-render every session that tracks ``document``.

        Both rendered identities of each affected session are signalled to
        the change listeners. Sessions with live update disabled are skipped.

        Parameters
        ----------
        document : TextDocument
            Changed document

        Raises
        ------
        CsvPrettyDiffError
            The first error raised by a session, after every other session
            has been updated; failed sessions keep their previous rendering

        """
        matched = False
        first_error: CsvPrettyDiffError | None = None
        for context in list(self._contexts):
            if not context.live_update:
                continue
            try:
                updated = context.update_document(document)
            except CsvPrettyDiffError as e:
                logger.warning(f"Could not re-render {document.file_name} in comparison {context.diff_id}: {e}")
                if first_error is None:
                    first_error = e
                continue
            if updated:
                matched = True
                first_uri, second_uri = context.uris
                self._fire_did_change(first_uri)
                self._fire_did_change(second_uri)

        if first_error is not None:
            raise first_error
        if not matched:
            logger.debug(f"Change to {document.file_name} matches no comparison")

    def remove_document(self, file_name: str) -> None:
        """Close every session that tracks ``file_name``.

        Parameters
        ----------
        file_name : str
            Identity of the closed source document

        """
        remaining: list[DiffContext] = []
        for context in self._contexts:
            if context.contains(file_name):
                context.close()
            else:
                remaining.append(context)

        if len(remaining) == len(self._contexts):
            logger.debug(f"Closing {file_name} matches no comparison")
        self._contexts = remaining

    def on_did_change(self, listener: ChangeListener) -> Callable[[], None]:
        """Subscribe to rendered-content changes.

        Parameters
        ----------
        listener : callable
            Called with the rendered identity every time its text is regenerated

        Returns
        -------
        callable
            Function removing the subscription

        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _fire_did_change(self, uri: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(uri)
            except Exception as e:
                # Log but don't stop notifying the other listeners
                logger.warning(f"Change listener raised exception: {e}", exc_info=True)
