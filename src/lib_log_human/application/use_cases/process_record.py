"""Use cases dispatching records to sinks and querying enablement.

Purpose
-------
Freeze the router's wiring (registry, mode, stylizer, clock, diagnostics)
into the callables executed for every record, implementing the fail-soft
write policy.

Contents
--------
* :func:`create_process_record` - factory for the per-record emit callable.
* :func:`create_is_enabled` - factory for the per-level enablement query.

System Role
-----------
Application-layer orchestrator assembled by the runtime's
:class:`~lib_log_human.runtime.Router`.

Failure Policy
--------------
A failing sink is reported once through the :class:`DiagnosticsPort`, latched
disabled, and skipped for all later records. Other sinks in the bucket are
still attempted; nothing is raised to the caller.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_log_human.application.ports import ClockPort, DiagnosticsPort, StylizerPort
from lib_log_human.domain import LogRecord, Severity, SinkRegistry, VerbosityMode

from .render import render_record

ProcessCallable = Callable[[LogRecord], None]
IsEnabledCallable = Callable[[Severity], bool]


def create_process_record(
    *,
    registry: SinkRegistry,
    mode: VerbosityMode,
    stylizer: StylizerPort,
    clock: ClockPort,
    diagnostics: DiagnosticsPort,
) -> ProcessCallable:
    """Build the emit callable for a fixed registry and mode.

    Parameters
    ----------
    registry:
        :class:`SinkRegistry` supplying the bucket for each record's level.
    mode:
        :class:`VerbosityMode` selecting the layout.
    stylizer:
        Adapter applying ANSI styles for colour-enabled sinks.
    clock:
        Read once per record in the verbose modes so all sinks share a stamp.
    diagnostics:
        Receives the :class:`SinkFailure` of every sink that gets disabled.

    Examples
    --------
    >>> import io
    >>> from lib_log_human.domain import Sink
    >>> class NoStyle:
    ...     def stylize(self, text, style):
    ...         return text
    >>> buffer = io.StringIO()
    >>> sink = Sink(label="mem", writer=buffer, colour=False, levels=[Severity.ERROR])
    >>> process = create_process_record(
    ...     registry=SinkRegistry([sink]),
    ...     mode=VerbosityMode.FRIENDLY,
    ...     stylizer=NoStyle(),
    ...     clock=None,
    ...     diagnostics=None,
    ... )
    >>> process(LogRecord(level=Severity.ERROR, target="app", message="disk full"))
    >>> buffer.getvalue()
    'ERROR: disk full\\n'
    """
    needs_clock = mode is not VerbosityMode.FRIENDLY

    def process(record: LogRecord) -> None:
        bucket = registry.bucket(record.level)
        if not bucket:
            return
        instant = clock.now() if needs_clock else None
        rendered: dict[bool, str] = {}
        for sink in bucket:
            if not sink.enabled:
                continue
            line = rendered.get(sink.colour)
            if line is None:
                line = render_record(record, mode, colour=sink.colour, stylizer=stylizer, instant=instant)
                rendered[sink.colour] = line
            failure = sink.write(line + "\n")
            if failure is not None:
                diagnostics.report(failure)

    return process


def create_is_enabled(registry: SinkRegistry) -> IsEnabledCallable:
    """Return a query telling whether any live sink accepts a level.

    Evaluated on every call; a level stops being enabled once all of its
    sinks have failed.
    """

    def is_enabled(level: Severity) -> bool:
        return any(sink.enabled for sink in registry.bucket(level))

    return is_enabled


__all__ = ["IsEnabledCallable", "ProcessCallable", "create_is_enabled", "create_process_record"]
