"""Port for the wall clock consulted by the verbose render modes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_human.domain.timestamps import Instant


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current instant in the process's local zone."""

    def now(self) -> Instant: ...


__all__ = ["ClockPort"]
