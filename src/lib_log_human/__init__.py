"""Public package surface of the human-friendly log router.

``terminal``/``new`` build a :class:`Router`; ``install`` (or the
environment-aware ``init``) makes it the process-wide :mod:`logging` sink;
``shutdown`` undoes the installation.
"""

from __future__ import annotations

from .application.use_cases.render import render_record
from .domain import (
    TRACE,
    ColourChoice,
    Instant,
    LogRecord,
    Severity,
    Sink,
    SinkRegistry,
    VerbosityMode,
    global_threshold,
    mode_from_verbosity_count,
)
from .runtime import (
    LoggerAlreadyInstalled,
    Router,
    current_router,
    flush,
    init,
    install,
    is_installed,
    new,
    new_sink,
    shutdown,
    stderr_sink,
    stdout_sink,
    terminal,
)


def summary_info() -> str:
    """Return the metadata banner as a single newline-terminated string."""

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "\n".join(lines) + "\n"


__all__ = [
    "ColourChoice",
    "Instant",
    "LogRecord",
    "LoggerAlreadyInstalled",
    "Router",
    "Severity",
    "Sink",
    "SinkRegistry",
    "TRACE",
    "VerbosityMode",
    "current_router",
    "flush",
    "global_threshold",
    "init",
    "install",
    "is_installed",
    "mode_from_verbosity_count",
    "new",
    "new_sink",
    "render_record",
    "shutdown",
    "stderr_sink",
    "stdout_sink",
    "summary_info",
    "terminal",
]
