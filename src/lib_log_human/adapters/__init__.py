"""Adapter implementations for the application ports."""

from __future__ import annotations

from .console.rich_stylizer import RichStylizer
from .diagnostics import StderrDiagnostics
from .stdlib_bridge import RouterHandler
from .streams import BinaryStreamWriter, as_writable, is_standard_terminal

__all__ = [
    "BinaryStreamWriter",
    "RichStylizer",
    "RouterHandler",
    "StderrDiagnostics",
    "as_writable",
    "is_standard_terminal",
]
