"""Error-channel adapter reporting disabled sinks.

Writes one ``WARNING: Failed to ... (will not attempt again)`` line per
failure to the process's standard error, resolved at report time so
redirections made after construction are honoured.
"""

from __future__ import annotations

import sys
from typing import TextIO

from lib_log_human.application.ports.diagnostics import DiagnosticsPort
from lib_log_human.application.ports.stylizer import StylizerPort
from lib_log_human.domain.sink import SinkFailure

from .console.rich_stylizer import RichStylizer
from .streams import is_standard_terminal


class StderrDiagnostics(DiagnosticsPort):
    """Report sink failures on ``sys.stderr`` (or an explicit stream)."""

    def __init__(self, *, stream: TextIO | None = None, stylizer: StylizerPort | None = None) -> None:
        self._stream = stream
        self._stylizer = stylizer or RichStylizer()

    def report(self, failure: SinkFailure) -> None:
        """Write the diagnostic line; an unusable error channel is ignored."""
        stream = self._stream if self._stream is not None else sys.stderr
        if stream is None:
            return
        try:
            prefix = "WARNING"
            if is_standard_terminal(stream):
                prefix = self._stylizer.stylize(prefix, "bold yellow")
            stream.write(f"{prefix}: {failure.describe()}\n")
            stream.flush()
        except Exception:  # noqa: BLE001
            # Nowhere left to report to; the sink is already disabled.
            return


__all__ = ["StderrDiagnostics"]
