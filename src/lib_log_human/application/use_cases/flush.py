"""Flush orchestration across every configured sink."""

from __future__ import annotations

from collections.abc import Callable

from lib_log_human.application.ports.diagnostics import DiagnosticsPort
from lib_log_human.domain import SinkRegistry


def create_flush(*, registry: SinkRegistry, diagnostics: DiagnosticsPort) -> Callable[[], None]:
    """Return a callable flushing each live sink exactly once."""

    def flush() -> None:
        """Flush sinks by identity, not by bucket, so shared sinks flush once."""
        for sink in registry.unique_sinks():
            failure = sink.flush()
            if failure is not None:
                diagnostics.report(failure)

    return flush


__all__ = ["create_flush"]
