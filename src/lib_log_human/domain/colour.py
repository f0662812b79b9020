"""Colour selection for sinks."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class ColourChoice(Enum):
    """Whether a sink should emit ANSI styling."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"

    def resolve(self, probe: Callable[[], bool]) -> bool:
        """Return the concrete colour flag; ``probe`` is only called for ``AUTO``."""

        if self is ColourChoice.ALWAYS:
            return True
        if self is ColourChoice.NEVER:
            return False
        return bool(probe())

    @classmethod
    def from_name(cls, name: str) -> "ColourChoice":
        """Parse ``always``/``never``/``auto``; ``yes`` and ``no`` are aliases.

        Examples
        --------
        >>> ColourChoice.from_name("yes") is ColourChoice.ALWAYS
        True
        """
        normalized = name.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown colour choice: {name!r}") from exc


_ALIASES = {"yes": "always", "no": "never"}


__all__ = ["ColourChoice"]
