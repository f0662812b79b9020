"""Stylizer port describing the ANSI styling capability.

Purpose
-------
Keep escape-sequence rendering out of the render engine so the engine stays a
pure function over text and style names.

Contents
--------
* :class:`StylizerPort` - runtime-checkable protocol with a single
  ``stylize`` method.

System Role
-----------
Adapters (e.g. Rich) implement the protocol; the render engine only calls it
for sinks whose colour flag is set.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StylizerPort(Protocol):
    """Wrap text in the escape sequences for a style such as ``"bold red"``."""

    def stylize(self, text: str, style: str) -> str:
        """Return ``text`` rendered with ``style``."""


__all__ = ["StylizerPort"]
