"""Port describing a destination a sink can write lines to."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class WritablePort(Protocol):
    """Text destination with ``write`` and ``flush`` (files, streams, buffers)."""

    def write(self, text: str) -> Any: ...

    def flush(self) -> None: ...


__all__ = ["WritablePort"]
