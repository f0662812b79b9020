"""Console styling adapters."""

from __future__ import annotations

from .rich_stylizer import RichStylizer

__all__ = ["RichStylizer"]
