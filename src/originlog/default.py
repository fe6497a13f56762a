"""Process-wide logger and module-level shortcuts.

The default logger is created on first use from ``LoggerConfig.from_env()``
and closed at interpreter exit. Code that prefers explicit wiring can build
its own ``Logger`` and pass it around instead.
"""
from __future__ import annotations

import atexit
import threading
from typing import Any, Optional

from .config import LoggerConfig
from .logger import Logger, PathLike
from .origin import OriginSpec, Tier

_DEFAULT: Optional[Logger] = None
_LOCK = threading.Lock()


def get_default() -> Logger:
    global _DEFAULT
    with _LOCK:
        if _DEFAULT is None:
            _DEFAULT = Logger(LoggerConfig.from_env())
        return _DEFAULT


def set_default(logger: Logger) -> Optional[Logger]:
    """Install ``logger`` as the default; returns the one it replaces (not closed)."""
    global _DEFAULT
    with _LOCK:
        previous, _DEFAULT = _DEFAULT, logger
    return previous


def reset_default() -> None:
    global _DEFAULT
    with _LOCK:
        previous, _DEFAULT = _DEFAULT, None
    if previous is not None:
        previous.close()


atexit.register(reset_default)


# Shortcuts. stacklevel is bumped so LINE/FUNCTION origins point at the caller.

def emit(tier: Tier, message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
    get_default().emit(tier, message, *args, origin=origin, stacklevel=stacklevel + 1)


def debug(message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
    get_default().debug(message, *args, origin=origin, stacklevel=stacklevel + 1)


def log(message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
    get_default().log(message, *args, origin=origin, stacklevel=stacklevel + 1)


def warn(message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
    get_default().warn(message, *args, origin=origin, stacklevel=stacklevel + 1)


def set_enabled(flag: bool) -> None:
    get_default().set_enabled(flag)


def redirect_to_file(path: PathLike, capture_stderr: bool = False) -> None:
    get_default().redirect_to_file(path, capture_stderr=capture_stderr)


def restore_default_destination() -> None:
    get_default().restore_default_destination()


__all__ = [
    "get_default",
    "set_default",
    "reset_default",
    "emit",
    "debug",
    "log",
    "warn",
    "set_enabled",
    "redirect_to_file",
    "restore_default_destination",
]
