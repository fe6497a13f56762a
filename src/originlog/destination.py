"""Where log lines go.

``DestinationHandler`` is a ``logging.StreamHandler`` whose stream is either
the process's standard error (looked up on every write, like logging's
last-resort handler, so a replaced ``sys.stderr`` is honoured) or a single
append-mode file it owns. Switching destinations happens under the handler
lock, the same lock ``Handler.handle`` holds while writing.

``StderrRedirect`` optionally points file descriptor 2 itself at the log file
so that everything else the process writes to stderr ends up there as well.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

from .logutil import get_logger

STDERR_FD = 2


def open_log_file(path: str, encoding: str = "utf-8") -> IO[str]:
    return open(path, "a", encoding=encoding)


def _flush_stderr() -> None:
    stream = sys.stderr
    if stream is not None and hasattr(stream, "flush"):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass


class StderrRedirect:
    """Swap the process-level stderr descriptor and put it back."""

    def __init__(self, fd: int = STDERR_FD) -> None:
        self.fd = fd
        self._saved: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._saved is not None

    def point_at(self, handle: IO[str]) -> None:
        _flush_stderr()
        created = self._saved is None
        if created:
            self._saved = os.dup(self.fd)
        try:
            os.dup2(handle.fileno(), self.fd)
        except OSError:
            if created and self._saved is not None:
                os.close(self._saved)
                self._saved = None
            raise

    def restore(self) -> None:
        if self._saved is None:
            return
        _flush_stderr()
        saved, self._saved = self._saved, None
        try:
            os.dup2(saved, self.fd)
        finally:
            os.close(saved)


class DestinationHandler(logging.StreamHandler):
    terminator = "\n"

    def __init__(self) -> None:
        # Skip StreamHandler.__init__: the stream is derived, not stored.
        logging.Handler.__init__(self)
        self._file: Optional[IO[str]] = None
        self._path: Optional[str] = None
        self._failure_reported = False
        self.stderr_redirect = StderrRedirect()

    @property
    def stream(self):  # type: ignore[override]
        return self._file if self._file is not None else sys.stderr

    @property
    def path(self) -> Optional[str]:
        return self._path

    def switch_to(self, handle: IO[str], path: str, capture_stderr: bool = False) -> None:
        """Make ``handle`` the destination, closing the file it replaces."""
        self.acquire()
        try:
            if capture_stderr:
                self.stderr_redirect.point_at(handle)
            else:
                self.stderr_redirect.restore()
            previous = self._file
            self._file = handle
            self._path = path
            self._failure_reported = False
            self._close_file(previous)
        finally:
            self.release()

    def restore(self) -> None:
        self.acquire()
        try:
            self.stderr_redirect.restore()
            if self._file is None:
                return
            previous = self._file
            self._file = None
            self._path = None
            self._failure_reported = False
            self._close_file(previous)
        finally:
            self.release()

    def close(self) -> None:
        self.restore()
        super().close()

    def handleError(self, record: logging.LogRecord) -> None:
        # Write failures are dropped; the first one per destination is reported.
        if self._failure_reported:
            return
        self._failure_reported = True
        exc = sys.exc_info()[1]
        get_logger().warning(
            "cannot write log line to %s (%s); further failures on this destination are dropped",
            self._path or "<stderr>",
            exc,
        )

    @staticmethod
    def _close_file(handle: Optional[IO[str]]) -> None:
        if handle is None:
            return
        try:
            handle.flush()
        except (OSError, ValueError):
            pass
        try:
            handle.close()
        except OSError as exc:
            get_logger().warning("error closing log file: %s", exc)


__all__ = ["DestinationHandler", "StderrRedirect", "open_log_file"]
