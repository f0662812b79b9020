"""Render engine turning a record into one console line.

Purpose
-------
Hold the single definition of how each verbosity mode lays out a record, so
every sink receives the same text (modulo colour).

Contents
--------
* :data:`LEVEL_STYLES` - style names per severity.
* :func:`render_record` - pure ``(record, mode, colour, instant) -> line``.

System Role
-----------
Called by :func:`create_process_record` once per colour flavour per record.
Styling is delegated to a :class:`StylizerPort`; when colour is off the
stylizer is replaced by an identity function for the whole line.

Layouts
-------
``FRIENDLY``  ``LEVEL: message``
``DEBUG``     ``[time LEVEL [module ]target] message``
``FULL``      ``[time LEVEL [file[:line] ]target] message``
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from lib_log_human.application.ports.stylizer import StylizerPort
from lib_log_human.domain.levels import Severity
from lib_log_human.domain.modes import VerbosityMode
from lib_log_human.domain.records import LogRecord
from lib_log_human.domain.timestamps import Instant

LEVEL_STYLES: Mapping[Severity, str] = {
    Severity.TRACE: "bold",
    Severity.DEBUG: "bold blue",
    Severity.INFO: "bold green",
    Severity.WARN: "bold yellow",
    Severity.ERROR: "bold red",
}
ANNOTATION_STYLE = "dim"
TARGET_STYLE = "bold"

_Style = Callable[[str, str], str]


def _plain(text: str, style: str) -> str:
    return text


def render_record(
    record: LogRecord,
    mode: VerbosityMode,
    *,
    colour: bool,
    stylizer: StylizerPort,
    instant: Instant | None = None,
) -> str:
    """Return the formatted line for ``record`` without a trailing newline.

    ``instant`` is required for ``DEBUG`` and ``FULL`` modes and ignored in
    ``FRIENDLY`` mode.

    Examples
    --------
    >>> class NoStyle:
    ...     def stylize(self, text, style):
    ...         return text
    >>> record = LogRecord(level=Severity.ERROR, target="app", message="disk full")
    >>> render_record(record, VerbosityMode.FRIENDLY, colour=False, stylizer=NoStyle())
    'ERROR: disk full'
    """
    style: _Style = stylizer.stylize if colour else _plain
    level = style(record.level.label, LEVEL_STYLES[record.level])

    if mode is VerbosityMode.FRIENDLY:
        return f"{level}: {record.message}"

    if instant is None:
        raise ValueError(f"{mode.name} mode requires a timestamp")

    if mode is VerbosityMode.DEBUG:
        stamp = instant.seconds_text()
        origin = _module_annotation(record, style)
    else:
        stamp = instant.rfc3339_text()
        origin = _location_annotation(record, style)

    target = style(record.target, TARGET_STYLE)
    return f"[{style(stamp, ANNOTATION_STYLE)} {level}{origin} {target}] {record.message}"


def _module_annotation(record: LogRecord, style: _Style) -> str:
    module_path = record.module_path
    if module_path is None or module_path == record.target:
        return ""
    return " " + style(module_path, ANNOTATION_STYLE)


def _location_annotation(record: LogRecord, style: _Style) -> str:
    if record.file is None:
        return ""
    text = " " + style(record.file, ANNOTATION_STYLE)
    if record.line is not None:
        text += style(f":{record.line}", ANNOTATION_STYLE)
    return text


__all__ = ["ANNOTATION_STYLE", "LEVEL_STYLES", "TARGET_STYLE", "render_record"]
