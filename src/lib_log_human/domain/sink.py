"""Sink entity: a labeled, filtered, colour-resolved output destination.

Purpose
-------
Own one destination handle together with the severities it accepts and the
one-way ``enabled`` latch that trips on the first I/O failure.

Contents
--------
* :class:`Sink` - shared, lock-protected destination wrapper.
* :class:`SinkFailure` - value describing the failure that disabled a sink.

System Role
-----------
Every registry bucket that lists a sink holds a reference to the same
:class:`Sink` instance, so disabling it through one bucket disables it for
all of them. The per-sink lock is held for exactly one write or flush.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .levels import Severity

if TYPE_CHECKING:
    from lib_log_human.application.ports.writable import WritablePort


@dataclass(slots=True, frozen=True)
class SinkFailure:
    """Failure that permanently disabled a sink."""

    label: str
    operation: str
    error: BaseException

    def describe(self) -> str:
        """Return the one-line diagnostic reported on the error channel.

        Examples
        --------
        >>> SinkFailure("file", "write", OSError("disk full")).describe()
        "Failed to write to writer 'file': disk full (will not attempt again)"
        """
        verb = "write to" if self.operation == "write" else self.operation
        return f"Failed to {verb} writer '{self.label}': {self.error} (will not attempt again)"


class Sink:
    """Destination plus accepted severities and a permanent-disable latch."""

    __slots__ = ("label", "colour", "levels", "_writer", "_enabled", "_lock")

    def __init__(
        self,
        *,
        label: str,
        writer: "WritablePort",
        colour: bool,
        levels: Iterable[Severity],
    ) -> None:
        self.label = label
        self.colour = colour
        self.levels: frozenset[Severity] = frozenset(levels)
        self._writer = writer
        self._enabled = True
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        levels = ",".join(level.name for level in sorted(self.levels))
        return f"Sink(label={self.label!r}, colour={self.colour}, levels={{{levels}}}, enabled={self._enabled})"

    @property
    def enabled(self) -> bool:
        """Return ``False`` once a write or flush has failed."""

        return self._enabled

    def accepts(self, level: Severity) -> bool:
        return level in self.levels

    def write(self, text: str) -> SinkFailure | None:
        """Write ``text`` unless disabled; return the failure that disables the sink."""

        with self._lock:
            if not self._enabled:
                return None
            try:
                self._writer.write(text)
            except Exception as exc:  # noqa: BLE001
                self._enabled = False
                return SinkFailure(self.label, "write", exc)
        return None

    def flush(self) -> SinkFailure | None:
        """Flush the destination unless disabled; failures latch like writes."""

        with self._lock:
            if not self._enabled:
                return None
            try:
                self._writer.flush()
            except Exception as exc:  # noqa: BLE001
                self._enabled = False
                return SinkFailure(self.label, "flush", exc)
        return None


__all__ = ["Sink", "SinkFailure"]
