"""Bridge from the stdlib :mod:`logging` facade to a router.

Purpose
-------
Make the router the process-wide logging sink: stdlib records are converted
to :class:`LogRecord` and dispatched through the router's buckets.

Contents
--------
* :class:`RouterHandler` - :class:`logging.Handler` delegating to a router.

System Role
-----------
Installed on the root logger by :func:`lib_log_human.runtime.install`. The
handler does not take the handler-wide lock around ``emit``; each sink
serialises its own writes.
"""

from __future__ import annotations

import logging
from typing import Protocol

from lib_log_human.domain import LogRecord, Severity


class _RouterLike(Protocol):
    def emit(self, record: LogRecord) -> None: ...

    def flush(self) -> None: ...

    def is_enabled(self, level: Severity) -> bool: ...


class RouterHandler(logging.Handler):
    """Route stdlib log records through a router.

    Examples
    --------
    >>> import io, logging
    >>> from lib_log_human.runtime import new, new_sink
    >>> from lib_log_human.domain import ColourChoice, VerbosityMode
    >>> buffer = io.StringIO()
    >>> router = new([new_sink("mem", buffer, ColourChoice.NEVER, [Severity.WARN])], VerbosityMode.FRIENDLY)
    >>> demo = logging.getLogger("doctest.bridge")
    >>> demo.propagate = False
    >>> demo.addHandler(RouterHandler(router))
    >>> demo.warning("low on %s", "disk")
    >>> buffer.getvalue()
    'WARNING: low on disk\\n'
    """

    def __init__(self, router: _RouterLike, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.router = router
        self._detached = False

    def handle(self, record: logging.LogRecord) -> bool | logging.LogRecord:  # type: ignore[override]
        rv = self.filter(record)
        if isinstance(rv, logging.LogRecord):
            record = rv
        if rv:
            self.emit(record)
        return rv

    def emit(self, record: logging.LogRecord) -> None:
        if not self.router.is_enabled(Severity.from_python_level(record.levelno)):
            return
        try:
            converted = LogRecord.from_stdlib(record)
        except Exception:  # noqa: BLE001
            self.handleError(record)
            return
        self.router.emit(converted)

    def flush(self) -> None:
        if not self._detached:
            self.router.flush()

    def close(self) -> None:
        """Stop forwarding flushes; :func:`logging.shutdown` may still call us."""
        self._detached = True
        super().close()


__all__ = ["RouterHandler"]
