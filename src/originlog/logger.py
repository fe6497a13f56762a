from __future__ import annotations

import contextlib
import logging
import os
import sys
from typing import Any, Iterator, Optional, Union

from .config import LoggerConfig
from .destination import DestinationHandler, open_log_file
from .origin import Capture, OriginSpec, Tier, compose_line, render_message, resolve_origin

PathLike = Union[str, "os.PathLike[str]"]


def build_formatter(cfg: LoggerConfig) -> logging.Formatter:
    return logging.Formatter(cfg.prefix_format + "%(message)s", datefmt=cfg.date_format)


class Logger:
    """Console logger with source annotation, a debug gate and file redirection.

    Three tiers are available. ``debug`` lines are written only while the gate
    is on (see ``set_enabled``); ``log`` and ``warn`` lines are always written,
    the latter marked with ``WARNING:``. Any call may carry an origin, either
    an explicit ``Origin`` or ``LINE`` / ``FUNCTION`` to take it from the
    calling frame::

        logger.warn("retrying %s", host, origin=FUNCTION)
        # 2025-01-01 12:00:00.000 app[123] WARNING: net.py:88 (connect) retrying alpha

    Output goes to standard error until ``redirect_to_file`` is called.
    """

    def __init__(self, config: Optional[LoggerConfig] = None, name: str = "originlog.console") -> None:
        self.config = config if config is not None else LoggerConfig.from_env()
        self.name = name
        self._enabled = bool(self.config.enabled)
        self._handler = DestinationHandler()
        self._handler.setFormatter(build_formatter(self.config))

    # -- state -------------------------------------------------------------

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def debug_active(self) -> bool:
        return self.config.debug_build and self._enabled

    @property
    def destination(self) -> Optional[str]:
        """Path of the log file, or None while writing to standard error."""
        return self._handler.path

    @property
    def capturing_stderr(self) -> bool:
        return self._handler.stderr_redirect.active

    def set_enabled(self, flag: bool) -> None:
        self._handler.acquire()
        try:
            self._enabled = bool(flag)
        finally:
            self._handler.release()

    # -- emitting ----------------------------------------------------------

    def emit(self, tier: Tier, message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
        self._emit(tier, message, args, origin, stacklevel)

    def debug(self, message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
        self._emit(Tier.DEBUG, message, args, origin, stacklevel)

    def log(self, message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
        self._emit(Tier.NORMAL, message, args, origin, stacklevel)

    def warn(self, message: Any, *args: Any, origin: OriginSpec = None, stacklevel: int = 1) -> None:
        self._emit(Tier.WARNING, message, args, origin, stacklevel)

    def _emit(self, tier: Tier, message: Any, args: tuple, origin: OriginSpec, stacklevel: int) -> None:
        if tier is Tier.DEBUG and not self.debug_active:
            return
        frame = None
        if isinstance(origin, Capture):
            try:
                # 0 is this frame, 1 the public method, 2 its caller
                frame = sys._getframe(stacklevel + 1)
            except ValueError:
                frame = None
        where = resolve_origin(origin, frame)
        body = compose_line(tier, render_message(message, args), where)
        record = logging.LogRecord(
            self.name,
            tier.value,
            where.file if where else "",
            where.line if where else 0,
            body,
            (),
            None,
            func=where.function if where else None,
        )
        record.progname = self.config.progname
        self._handler.handle(record)

    # -- destination -------------------------------------------------------

    def redirect_to_file(self, path: PathLike, capture_stderr: bool = False) -> None:
        """Append subsequent lines to ``path``, creating it if needed.

        Raises OSError if the file cannot be opened; the current destination is
        left in place. With ``capture_stderr`` the process's stderr descriptor
        is pointed at the file too, until ``restore_default_destination``.
        """
        target = os.fspath(path)
        handle = open_log_file(target, self.config.encoding)
        try:
            self._handler.switch_to(handle, target, capture_stderr=capture_stderr)
        except BaseException:
            handle.close()
            raise

    def restore_default_destination(self) -> None:
        self._handler.restore()

    @contextlib.contextmanager
    def redirected(self, path: PathLike, capture_stderr: bool = False) -> Iterator["Logger"]:
        """Redirect for the duration of a ``with`` block, then go back to stderr."""
        self.redirect_to_file(path, capture_stderr=capture_stderr)
        try:
            yield self
        finally:
            self.restore_default_destination()

    def close(self) -> None:
        self._handler.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Logger {self.name} enabled={self._enabled} destination={self.destination or '<stderr>'}>"


__all__ = ["Logger", "build_formatter"]
