"""Diagnostics logger for originlog itself.

originlog reports its own trouble (a format template that does not match its
arguments, a destination that stopped accepting writes) here rather than on
the destination it manages. Applications can attach handlers or change the
level; by default only WARNING and above reach stderr.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional

DIAGNOSTICS_NAME = "originlog"
DIAGNOSTICS_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

_LOGGER: Optional[logging.Logger] = None
_LOCK = threading.Lock()


def _configure(logger: logging.Logger) -> logging.Logger:
    # Leave alone a logger the application already set up.
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DIAGNOSTICS_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER
    with _LOCK:
        if _LOGGER is None:
            _LOGGER = _configure(logging.getLogger(DIAGNOSTICS_NAME))
        return _LOGGER

__all__ = ["DIAGNOSTICS_NAME", "get_logger"]
