"""Protocols the use cases depend on; adapters provide the implementations."""

from __future__ import annotations

from .diagnostics import DiagnosticsPort
from .stylizer import StylizerPort
from .time import ClockPort
from .writable import WritablePort

__all__ = [
    "ClockPort",
    "DiagnosticsPort",
    "StylizerPort",
    "WritablePort",
]
