"""Verbosity modes and the global severity threshold they imply."""

from __future__ import annotations

from enum import Enum

from .levels import Severity


class VerbosityMode(Enum):
    """Formatting and filtering preset chosen once per router."""

    FRIENDLY = "friendly"
    DEBUG = "debug"
    FULL = "full"

    @property
    def global_threshold(self) -> Severity:
        """Return the lowest severity the logging facade should let through."""

        return _THRESHOLDS[self]

    @classmethod
    def from_verbosity_count(cls, count: int) -> "VerbosityMode":
        """Map a ``-v`` repetition count onto a mode.

        Examples
        --------
        >>> [VerbosityMode.from_verbosity_count(n).name for n in (0, 1, 2, 5)]
        ['FRIENDLY', 'DEBUG', 'FULL', 'FULL']
        """
        if count >= 2:
            return cls.FULL
        if count == 1:
            return cls.DEBUG
        return cls.FRIENDLY

    @classmethod
    def from_name(cls, name: str) -> "VerbosityMode":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown verbosity mode: {name!r}") from exc


_THRESHOLDS = {
    VerbosityMode.FRIENDLY: Severity.WARN,
    VerbosityMode.DEBUG: Severity.DEBUG,
    VerbosityMode.FULL: Severity.TRACE,
}


def mode_from_verbosity_count(count: int) -> VerbosityMode:
    """Return the mode selected by ``count`` repetitions of a verbosity flag."""

    return VerbosityMode.from_verbosity_count(count)


def global_threshold(mode: VerbosityMode) -> Severity:
    """Return the facade-wide minimum severity for ``mode``."""

    return mode.global_threshold


__all__ = ["VerbosityMode", "global_threshold", "mode_from_verbosity_count"]
