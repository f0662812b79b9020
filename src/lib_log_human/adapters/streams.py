"""Stream helpers turning destinations into writable sink targets.

Purpose
-------
Let sinks wrap text streams, binary streams, and in-memory buffers
uniformly, and answer the conservative "is this a terminal" question used by
``ColourChoice.AUTO``.

Contents
--------
* :class:`BinaryStreamWriter` - UTF-8 encoding wrapper for byte streams.
* :func:`as_writable` - pick the right wrapper for a destination.
* :func:`is_standard_terminal` - interactivity probe for the standard streams.
"""

from __future__ import annotations

import io
import sys
from typing import BinaryIO

from lib_log_human.application.ports.writable import WritablePort


class BinaryStreamWriter(WritablePort):
    """Encode text as UTF-8 before writing it to a byte stream."""

    def __init__(self, stream: BinaryIO, *, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding

    def write(self, text: str) -> int:
        return self._stream.write(text.encode(self._encoding))

    def flush(self) -> None:
        self._stream.flush()


def as_writable(destination: object) -> WritablePort:
    """Return ``destination`` ready for text writes.

    Byte streams are wrapped in :class:`BinaryStreamWriter`; any other object
    exposing ``write`` and ``flush`` is used as is.
    """
    if isinstance(destination, (io.RawIOBase, io.BufferedIOBase)):
        return BinaryStreamWriter(destination)  # type: ignore[arg-type]
    if not isinstance(destination, WritablePort):
        raise TypeError(f"destination must provide write() and flush(), got {type(destination).__name__}")
    return destination


def _standard_streams() -> tuple[object, ...]:
    return tuple(
        stream
        for stream in (sys.stdin, sys.stdout, sys.stderr, sys.__stdin__, sys.__stdout__, sys.__stderr__)
        if stream is not None
    )


def is_standard_terminal(destination: object) -> bool:
    """Return ``True`` only for a standard stream attached to a terminal.

    Any other destination, including files and buffers that happen to be
    terminals, reports ``False``.
    """
    if not any(destination is stream for stream in _standard_streams()):
        return False
    isatty = getattr(destination, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


__all__ = ["BinaryStreamWriter", "as_writable", "is_standard_terminal"]
