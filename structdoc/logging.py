"""Loggers for the structdoc package.

Every module logs through ``get_logger(<module>)`` so that a single call to
``configure_logging`` controls scanner warnings, assembler progress and
service messages alike. Console output is kept short; the optional log file
records timestamps and the emitting module.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "structdoc"
CONSOLE_FORMAT = "[structdoc] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for a structdoc component, e.g. ``structdoc.scanner``."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route structdoc records to stderr and, when given, to ``log_file``.

    Calling this again replaces the handlers installed by the previous call,
    closing any open log file.
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = get_logger()
    root.setLevel(level)
    root.propagate = False

    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    root.addHandler(_handler(logging.StreamHandler(), level, CONSOLE_FORMAT))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), level, FILE_FORMAT)
        )
    return root


__all__ = ["configure_logging", "get_logger"]
