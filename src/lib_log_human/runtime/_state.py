"""Process-wide installation state and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock

from lib_log_human.adapters.stdlib_bridge import RouterHandler

from ._composition import Router


class LoggerAlreadyInstalled(RuntimeError):
    """Raised when a router is installed while another one is active."""


@dataclass(slots=True)
class InstalledLogger:
    """The active router plus what is needed to undo its installation."""

    router: Router
    handler: RouterHandler
    root_logger: logging.Logger
    previous_level: int


_STATE: InstalledLogger | None = None
_STATE_LOCK = RLock()


def set_installed(installed: InstalledLogger) -> None:
    """Store ``installed`` as the active singleton; refuse to replace one."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is not None:
            raise LoggerAlreadyInstalled(
                "a logger is already installed; call lib_log_human.shutdown() first",
            )
        _STATE = installed


def clear_installed() -> InstalledLogger | None:
    """Remove and return the active installation, if any."""

    with _STATE_LOCK:
        global _STATE
        installed, _STATE = _STATE, None
        return installed


def current_installed() -> InstalledLogger:
    """Return the active installation or raise when nothing is installed."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_human.install() must be called before using the installed router")
        return _STATE


def is_installed() -> bool:
    """Return ``True`` while a router is installed."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "InstalledLogger",
    "LoggerAlreadyInstalled",
    "clear_installed",
    "current_installed",
    "is_installed",
    "set_installed",
]
