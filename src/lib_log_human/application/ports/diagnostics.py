"""Port for the error channel receiving sink failure diagnostics."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_human.domain.sink import SinkFailure


@runtime_checkable
class DiagnosticsPort(Protocol):
    """Report a sink failure once, at the moment the sink is disabled."""

    def report(self, failure: SinkFailure) -> None: ...


__all__ = ["DiagnosticsPort"]
