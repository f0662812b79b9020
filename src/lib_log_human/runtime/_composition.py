"""Composition helpers: sink factories and the router façade."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable

from lib_log_human.adapters import RichStylizer, StderrDiagnostics, as_writable, is_standard_terminal
from lib_log_human.application.ports import ClockPort, DiagnosticsPort, StylizerPort
from lib_log_human.application.use_cases import create_flush, create_is_enabled, create_process_record
from lib_log_human.domain import (
    ColourChoice,
    Instant,
    LogRecord,
    Severity,
    Sink,
    SinkRegistry,
    VerbosityMode,
)

STDOUT_LEVELS = frozenset({Severity.TRACE, Severity.DEBUG, Severity.INFO})
STDERR_LEVELS = frozenset({Severity.WARN, Severity.ERROR})


class SystemClock(ClockPort):
    """Clock port reading the wall clock in the process's local zone."""

    def now(self) -> Instant:
        return Instant.from_epoch_ns(time.time_ns())


def new_sink(
    label: str,
    destination: object,
    colour: ColourChoice | str = ColourChoice.AUTO,
    levels: Iterable[Severity | str] = (),
    *,
    interactive: bool | None = None,
) -> Sink:
    """Wrap ``destination`` in a :class:`Sink`.

    Parameters
    ----------
    label:
        Name used in diagnostics when the sink fails.
    destination:
        Text stream, byte stream, or any object with ``write``/``flush``.
    colour:
        :class:`ColourChoice` (or its name) resolved once, right here.
    levels:
        Severities (or their names) accepted by the sink. Empty makes the
        sink inert.
    interactive:
        Caller-supplied answer to "is ``destination`` a terminal" for
        ``AUTO``. ``None`` falls back to :func:`is_standard_terminal`, which
        only recognises the process's standard streams.
    """
    choice = ColourChoice.from_name(colour) if isinstance(colour, str) else colour
    if interactive is None:
        resolved = choice.resolve(lambda: is_standard_terminal(destination))
    else:
        resolved = choice.resolve(lambda: interactive)
    accepted = [Severity.from_name(level) if isinstance(level, str) else level for level in levels]
    return Sink(label=label, writer=as_writable(destination), colour=resolved, levels=accepted)


def stdout_sink(colour: ColourChoice = ColourChoice.AUTO) -> Sink:
    """Return the terminal sink for trace, debug, and info records."""

    return new_sink("stdout", sys.stdout, colour, STDOUT_LEVELS)


def stderr_sink(colour: ColourChoice = ColourChoice.AUTO) -> Sink:
    """Return the terminal sink for warnings and errors."""

    return new_sink("stderr", sys.stderr, colour, STDERR_LEVELS)


class Router:
    """Logger façade holding the sink registry and the active mode.

    Instances are built with :func:`terminal` or :func:`new` and usually
    installed once through :func:`lib_log_human.runtime.install`. All public
    methods are safe to call from multiple threads and never raise for sink
    I/O failures.
    """

    def __init__(
        self,
        sinks: Iterable[Sink],
        mode: VerbosityMode,
        *,
        stylizer: StylizerPort | None = None,
        clock: ClockPort | None = None,
        diagnostics: DiagnosticsPort | None = None,
    ) -> None:
        self._registry = SinkRegistry(sinks)
        self._mode = mode
        if diagnostics is None:
            diagnostics = StderrDiagnostics()
        self._process = create_process_record(
            registry=self._registry,
            mode=mode,
            stylizer=stylizer if stylizer is not None else RichStylizer(),
            clock=clock if clock is not None else SystemClock(),
            diagnostics=diagnostics,
        )
        self._flush = create_flush(registry=self._registry, diagnostics=diagnostics)
        self._is_enabled = create_is_enabled(self._registry)

    def __repr__(self) -> str:
        return f"Router(mode={self._mode.name}, sinks={list(self._registry.sinks)!r})"

    @property
    def mode(self) -> VerbosityMode:
        return self._mode

    @property
    def registry(self) -> SinkRegistry:
        return self._registry

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._registry.sinks

    def is_enabled(self, level: Severity) -> bool:
        """Return ``True`` while at least one live sink accepts ``level``."""
        return self._is_enabled(level)

    def emit(self, record: LogRecord) -> None:
        """Render ``record`` and write it to every live sink in its bucket."""
        self._process(record)

    def flush(self) -> None:
        """Flush every live sink once."""
        self._flush()


def terminal(mode: VerbosityMode, *, colour: ColourChoice = ColourChoice.AUTO) -> Router:
    """Return a router logging info and below to stdout, warnings and errors to stderr.

    Examples
    --------
    >>> router = terminal(VerbosityMode.FRIENDLY)
    >>> [sink.label for sink in router.sinks]
    ['stdout', 'stderr']
    """

    return Router([stdout_sink(colour), stderr_sink(colour)], mode)


def new(
    sinks: Iterable[Sink],
    mode: VerbosityMode,
    *,
    stylizer: StylizerPort | None = None,
    clock: ClockPort | None = None,
    diagnostics: DiagnosticsPort | None = None,
) -> Router:
    """Return a router over an arbitrary sink configuration."""

    return Router(sinks, mode, stylizer=stylizer, clock=clock, diagnostics=diagnostics)


__all__ = [
    "Router",
    "STDERR_LEVELS",
    "STDOUT_LEVELS",
    "SystemClock",
    "new",
    "new_sink",
    "stderr_sink",
    "stdout_sink",
    "terminal",
]
