"""Tiers, call-site origins and line composition.

A log line body is built from three parts, in order:

- the tier marker: ``"WARNING: "`` for the warning tier, nothing otherwise
- the origin descriptor: ``"file:line "`` or ``"file:line (function) "``
- the rendered message

The console prefix (timestamp, program, pid) is not part of the body; the
destination handler's formatter adds it.
"""
from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from types import FrameType
from collections.abc import Mapping
from typing import Any, Optional, Tuple, Union

from .logutil import get_logger


class Tier(enum.Enum):
    DEBUG = logging.DEBUG
    NORMAL = logging.INFO
    WARNING = logging.WARNING

    @property
    def marker(self) -> str:
        return "WARNING: " if self is Tier.WARNING else ""


class Capture(enum.Enum):
    """Ask for the origin to be taken from the calling frame."""

    LINE = "line"
    FUNCTION = "function"


LINE = Capture.LINE
FUNCTION = Capture.FUNCTION

OriginSpec = Union["Origin", Capture, None]


@dataclass(frozen=True)
class Origin:
    file: str
    line: int
    function: Optional[str] = None

    def describe(self) -> str:
        if self.function:
            return f"{self.file}:{self.line} ({self.function})"
        return f"{self.file}:{self.line}"

    @classmethod
    def from_frame(cls, frame: Optional[FrameType], with_function: bool = False) -> "Origin":
        if frame is None:
            # Same placeholders logging.Logger.findCaller uses
            return cls("(unknown file)", 0, "(unknown function)" if with_function else None)
        code = frame.f_code
        return cls(
            os.path.basename(code.co_filename),
            frame.f_lineno,
            code.co_name if with_function else None,
        )


def resolve_origin(wanted: OriginSpec, frame: Optional[FrameType]) -> Optional[Origin]:
    if wanted is None or isinstance(wanted, Origin):
        return wanted
    return Origin.from_frame(frame, with_function=wanted is Capture.FUNCTION)


def render_message(message: Any, args: Tuple[Any, ...]) -> str:
    """printf-style rendering with logging's argument conventions.

    Without args the message is used verbatim, so a literal ``%`` is safe. A
    single mapping argument feeds ``%(name)s`` templates. A template that does
    not match its arguments never raises: the raw template is kept, followed by
    the arguments, and the mismatch is reported on the diagnostics logger.
    The same applies to values that cannot be converted (``%d`` of infinity,
    an argument whose ``__str__`` raises).
    """
    msg = _printable(str, message)
    if not args:
        return msg
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        fmt_args: Any = args[0]
    else:
        fmt_args = args
    try:
        return msg % fmt_args
    except Exception as exc:  # noqa: BLE001 - rendering must never reach the caller
        shown = _args_repr(args)
        get_logger().warning(
            "format %s does not match arguments %s: %s",
            _printable(repr, msg),
            shown,
            _printable(str, exc),
        )
        return f"{msg} {shown}"


def _printable(convert, value: Any) -> str:
    try:
        return convert(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__} object>"


def _args_repr(args: Tuple[Any, ...]) -> str:
    parts = [_printable(repr, a) for a in args]
    if len(parts) == 1:
        return f"({parts[0]},)"
    return "(" + ", ".join(parts) + ")"


def compose_line(tier: Tier, message: str, origin: Optional[Origin] = None) -> str:
    if origin is None:
        return f"{tier.marker}{message}"
    return f"{tier.marker}{origin.describe()} {message}"


__all__ = [
    "Tier",
    "Capture",
    "LINE",
    "FUNCTION",
    "Origin",
    "OriginSpec",
    "resolve_origin",
    "render_message",
    "compose_line",
]
