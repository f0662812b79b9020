"""Severity abstraction shared by the router, the renderer, and the stdlib bridge.

Purpose
-------
Offer a five-step severity scale (``TRACE`` through ``ERROR``) that maps onto
the stdlib :mod:`logging` numbers while keeping the presentation labels used
on the console in one place.

Contents
--------
* :class:`Severity` enum with conversion helpers and presentation labels.
* ``TRACE`` constant: the stdlib level number registered for trace records.

System Role
-----------
Severities key the registry buckets. Ordering is only consulted for the
global threshold; bucket dispatch is pure set membership.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class Severity(Enum):
    """Ordered log severities: ``TRACE < DEBUG < INFO < WARN < ERROR``."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    @property
    def label(self) -> str:
        """Return the word printed on the console for this severity."""

        return _LABEL_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level number matching this severity."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Parse ``name`` case-insensitively; ``warning`` is accepted for ``WARN``.

        Examples
        --------
        >>> Severity.from_name("Warning") is Severity.WARN
        True
        """
        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Severity":
        """Floor an arbitrary stdlib level number onto the five severities.

        ``CRITICAL`` (and anything above ``ERROR``) becomes ``ERROR``; anything
        below ``DEBUG`` becomes ``TRACE``.
        """
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARN
        if level >= logging.INFO:
            return cls.INFO
        if level >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


# Stdlib level number registered as "TRACE" on install.
TRACE = Severity.TRACE.value

_LABEL_TABLE = {
    Severity.TRACE: "TRACE",
    Severity.DEBUG: "DEBUG",
    Severity.INFO: "INFO",
    Severity.WARN: "WARNING",
    Severity.ERROR: "ERROR",
}


__all__ = ["Severity", "TRACE"]
