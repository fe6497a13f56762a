"""Package metadata and public API for originlog.

Expose a single source of truth for the version. Prefer reading from
importlib.metadata so that an editable install or wheel always reports
the version declared in pyproject.toml. Fallback to a hardcoded string
to avoid import errors when metadata is unavailable (e.g. direct source
usage without installation).
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .config import LoggerConfig
from .default import (
    debug,
    emit,
    get_default,
    log,
    redirect_to_file,
    reset_default,
    restore_default_destination,
    set_default,
    set_enabled,
    warn,
)
from .logger import Logger
from .origin import FUNCTION, LINE, Capture, Origin, Tier

__all__ = [
    "__version__",
    "Logger",
    "LoggerConfig",
    "Tier",
    "Origin",
    "Capture",
    "LINE",
    "FUNCTION",
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

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via metadata test
	__version__ = _metadata.version("originlog")  # type: ignore[assignment]
except Exception:  # pragma: no cover - fallback exercised if metadata missing
	__version__ = _FALLBACK_VERSION
