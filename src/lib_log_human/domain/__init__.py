"""Domain entities and value objects used by the routing engine."""

from __future__ import annotations

from .colour import ColourChoice
from .levels import TRACE, Severity
from .modes import VerbosityMode, global_threshold, mode_from_verbosity_count
from .records import LogRecord
from .registry import SinkRegistry
from .sink import Sink, SinkFailure
from .timestamps import Instant

__all__ = [
    "ColourChoice",
    "Instant",
    "LogRecord",
    "Severity",
    "Sink",
    "SinkFailure",
    "SinkRegistry",
    "TRACE",
    "VerbosityMode",
    "global_threshold",
    "mode_from_verbosity_count",
]
