"""Log record handed to the router by the logging facade.

Purpose
-------
Provide the immutable input of the routing pipeline: severity, target,
message, and the optional source-location metadata rendered in the verbose
modes.

Contents
--------
* :class:`LogRecord` dataclass with :meth:`LogRecord.from_stdlib`.

System Role
-----------
Domain value object; the stdlib bridge builds it from
:class:`logging.LogRecord` instances and callers may construct it directly.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import lru_cache

from .levels import Severity

_EXCEPTION_FORMATTER = logging.Formatter()


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record routed to sinks.

    Attributes
    ----------
    level:
        :class:`Severity` selecting the registry bucket.
    target:
        Logical origin of the record (the logger name for stdlib records).
    message:
        Fully formatted message text.
    module_path:
        Dotted module the record came from; rendered in debug mode when it
        differs from ``target``.
    file, line:
        Source location rendered in full mode.
    """

    level: Severity
    target: str
    message: str
    module_path: str | None = None
    file: str | None = None
    line: int | None = None

    @classmethod
    def from_stdlib(cls, record: logging.LogRecord) -> "LogRecord":
        """Translate a stdlib :class:`logging.LogRecord`.

        A ``module_path`` attribute (``extra={"module_path": ...}``) wins;
        otherwise the dotted module is derived from the logger name or the
        loaded module owning ``pathname``, falling back to the bare stdlib
        ``module`` field. Exception and stack information are
        appended to the message the way :class:`logging.Formatter` does.
        """
        message = record.getMessage()
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = _EXCEPTION_FORMATTER.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{_EXCEPTION_FORMATTER.formatStack(record.stack_info)}"
        module_path = getattr(record, "module_path", None) or _dotted_module(record)
        return cls(
            level=Severity.from_python_level(record.levelno),
            target=record.name,
            message=message,
            module_path=module_path,
            file=record.pathname or None,
            line=record.lineno or None,
        )


def _dotted_module(record: logging.LogRecord) -> str | None:
    """Return the dotted module that emitted ``record``.

    Examples
    --------
    >>> rec = logging.makeLogRecord({"name": "app.http", "module": "http"})
    >>> _dotted_module(rec)
    'app.http'
    """
    module = record.module
    if not module:
        return None
    name = record.name
    if name == module or name.endswith("." + module):
        return name
    return _module_for_path(record.pathname) or module


@lru_cache(maxsize=256)
def _module_for_path(pathname: str) -> str | None:
    if not pathname:
        return None
    for name, loaded in list(sys.modules.items()):
        if getattr(loaded, "__file__", None) == pathname:
            return name
    return None


__all__ = ["LogRecord"]
