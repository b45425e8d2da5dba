#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Logging setup for the csvprettydiff command-line host.

The library itself only creates module loggers; handlers are installed by
entry points through ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# noisy at DEBUG in watch mode
_THIRD_PARTY_LOGGERS = ("watchdog",)


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"info"`` into its numeric value, defaulting to INFO."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    return logging.Formatter("%(levelname)s: %(message)s")


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    quiet_loggers: Iterable[str] = _THIRD_PARTY_LOGGERS,
) -> logging.Logger:
    """Configure root logging handlers for the command-line host.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    quiet_loggers : iterable of str
        Loggers kept at WARNING unless ``trace_mode`` is set.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    if not trace_mode:
        for name in quiet_loggers:
            logging.getLogger(name).setLevel(max(resolved_level, logging.WARNING))

    return root_logger
