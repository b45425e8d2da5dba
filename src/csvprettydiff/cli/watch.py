"""Watch mode implementation for csvprettydiff CLI.

This module monitors the compared files and forwards their changes to a
``PrettyPrintProvider``: modified files are re-read and re-rendered, deleted
files close every comparison they take part in.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Dict, Mapping, Set

from csvprettydiff.constants import DEFAULT_WATCH_DEBOUNCE_SECONDS, EXIT_DEPENDENCY_ERROR, EXIT_SUCCESS
from csvprettydiff.diff.provider import PrettyPrintProvider
from csvprettydiff.exceptions import CsvPrettyDiffError
from csvprettydiff.source import TextDocument

logger = logging.getLogger(__name__)


def _key(path: str | bytes | Path) -> str:
    return str(Path(os.fsdecode(path)).resolve())


class SessionEventRouter:
    """Route file system events of watched files to a provider.

    Parameters
    ----------
    provider : PrettyPrintProvider
        Provider holding the comparison sessions
    watched_files : Mapping[Path, str]
        Paths to watch, mapped to the file names their sessions know them by
    debounce_seconds : float, default 0.5
        Minimum delay between two updates of the same file. A change arriving
        inside the delay is re-read once the delay has passed.
    encoding : str, default "utf-8"
        Encoding used to read changed files

    """

    def __init__(
        self,
        provider: PrettyPrintProvider,
        watched_files: Mapping[Path, str],
        debounce_seconds: float = DEFAULT_WATCH_DEBOUNCE_SECONDS,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the router with the files to watch."""
        self.provider = provider
        self.debounce_seconds = debounce_seconds
        self.encoding = encoding
        self._file_names: Dict[str, str] = {_key(path): name for path, name in watched_files.items()}

        self._last_processed: Dict[str, float] = {}
        self._last_text: Dict[str, str] = {}
        self._processing: Set[str] = set()
        self._pending: Dict[str, threading.Timer] = {}
        self._lock = threading.Lock()
        # serializes re-reads coming from the observer and from timers
        self._process_lock = threading.Lock()

    @property
    def directories(self) -> Set[Path]:
        """Directories that need an observer to see every watched file."""
        return {Path(key).parent for key in self._file_names}

    def should_process(self, file_path: str | bytes) -> bool:
        """Check if a changed file belongs to a comparison and is due for processing.

        Parameters
        ----------
        file_path : str
            Path reported by the file system event

        Returns
        -------
        bool
            True if file should be processed

        """
        key = _key(file_path)

        if key not in self._file_names:
            return False

        if key in self._processing:
            logger.debug(f"Skipping {key}: already processing")
            return False

        now = time.time()
        if now - self._last_processed.get(key, 0) < self.debounce_seconds:
            logger.debug(f"Skipping {key}: debounce delay not met")
            return False

        return True

    def handle_modified(self, file_path: str | bytes) -> bool:
        """Re-read a changed file and update its comparisons.

        Returns
        -------
        bool
            True if the provider was notified

        """
        key = _key(file_path)
        if not self.should_process(file_path):
            if key in self._file_names:
                self._schedule_retry(key)
            return False

        return self._process(key)

    def cancel_pending(self) -> None:
        """Drop every delayed re-read that has not run yet."""
        with self._lock:
            timers = list(self._pending.values())
            self._pending.clear()
        for timer in timers:
            timer.cancel()

    def _schedule_retry(self, key: str) -> None:
        with self._lock:
            if key in self._pending:
                # the scheduled re-read will see this change too
                return
            elapsed = time.time() - self._last_processed.get(key, 0)
            timer = threading.Timer(max(self.debounce_seconds - elapsed, 0), self._retry, args=(key,))
            timer.daemon = True
            self._pending[key] = timer
        logger.debug(f"Re-reading {key} in {timer.interval:.2f}s")
        timer.start()

    def _retry(self, key: str) -> None:
        with self._lock:
            self._pending.pop(key, None)
        if key in self._file_names:
            self._process(key)

    def _process(self, key: str) -> bool:
        file_name = self._file_names.get(key)
        if file_name is None:
            return False

        with self._lock:
            self._processing.add(key)
        try:
            with self._process_lock:
                return self._update_from_disk(key, file_name)
        finally:
            with self._lock:
                self._processing.discard(key)

    def _update_from_disk(self, key: str, file_name: str) -> bool:
        try:
            text = Path(key).read_text(encoding=self.encoding)
            if self._last_text.get(key) == text:
                logger.debug(f"Skipping {file_name}: content unchanged")
                return False

            self.provider.update_document(TextDocument(file_name, text))
            self._last_text[key] = text
            self._last_processed[key] = time.time()
            return True

        except OSError as e:
            logger.warning(f"Could not read {file_name}: {e}")
        except CsvPrettyDiffError as e:
            # previous rendering stays in place
            logger.error(f"Could not re-render {file_name}: {e}")

        return False

    def handle_deleted(self, file_path: str | bytes) -> bool:
        """Close the comparisons of a deleted file.

        Returns
        -------
        bool
            True if the file was watched

        """
        key = _key(file_path)
        file_name = self._file_names.pop(key, None)
        if file_name is None:
            return False

        with self._lock:
            timer = self._pending.pop(key, None)
        if timer is not None:
            timer.cancel()

        logger.info(f"{file_name} was removed")
        self.provider.remove_document(file_name)
        self._last_text.pop(key, None)
        return True

    def handle_moved(self, src_path: str | bytes, dest_path: str | bytes) -> None:
        """Handle renames; editors often save by moving a temporary file over the original."""
        if _key(dest_path) in self._file_names:
            # bypass debounce: the rename completes the save
            self._last_processed.pop(_key(dest_path), None)
            self.handle_modified(dest_path)
        elif _key(src_path) in self._file_names:
            self.handle_deleted(src_path)


def _make_event_handler(router: SessionEventRouter) -> Any:
    """Wrap ``router`` in a watchdog event handler."""
    from watchdog.events import FileSystemEventHandler

    class SessionEventHandler(FileSystemEventHandler):
        def on_modified(self, event: Any) -> None:
            if not event.is_directory:
                router.handle_modified(event.src_path)

        def on_created(self, event: Any) -> None:
            if not event.is_directory:
                router.handle_modified(event.src_path)

        def on_deleted(self, event: Any) -> None:
            if not event.is_directory:
                router.handle_deleted(event.src_path)

        def on_moved(self, event: Any) -> None:
            if not event.is_directory:
                router.handle_moved(event.src_path, event.dest_path)

    return SessionEventHandler()


def run_watch_mode(
    provider: PrettyPrintProvider,
    watched_files: Mapping[Path, str],
    debounce: float = DEFAULT_WATCH_DEBOUNCE_SECONDS,
    encoding: str = "utf-8",
    poll_interval: float = 0.5,
) -> int:
    """Keep comparisons alive and updated until interrupted.

    Watching stops on Ctrl+C or once every comparison has been closed
    because its files were deleted.

    Parameters
    ----------
    provider : PrettyPrintProvider
        Provider holding the comparison sessions
    watched_files : Mapping[Path, str]
        Paths to watch, mapped to the file names their sessions know them by
    debounce : float, default 0.5
        Debounce delay in seconds
    encoding : str, default "utf-8"
        Encoding used to read changed files
    poll_interval : float, default 0.5
        Delay between checks for remaining comparisons

    Returns
    -------
    int
        Exit code (0 for success)

    """
    try:
        from watchdog.observers import Observer
    except ImportError:
        logger.error("Watch mode (--watch) requires the watchdog library. Install with: pip install csvprettydiff[watch]")
        return EXIT_DEPENDENCY_ERROR

    router = SessionEventRouter(provider, watched_files, debounce_seconds=debounce, encoding=encoding)
    handler = _make_event_handler(router)

    observer = Observer()
    for directory in router.directories:
        observer.schedule(handler, str(directory), recursive=False)
        logger.info(f"Watching directory: {directory}")

    observer.start()

    print(f"Watch mode active. Monitoring {len(watched_files)} file(s). Press Ctrl+C to stop.")

    try:
        while len(provider):
            time.sleep(poll_interval)
        print("All comparisons closed.")
    except KeyboardInterrupt:
        print("\nStopping watch mode...")
    finally:
        router.cancel_pending()
        observer.stop()

    observer.join()
    logger.info("Watch mode stopped")
    return EXIT_SUCCESS
