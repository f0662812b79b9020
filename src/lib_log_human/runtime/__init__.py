"""Runtime façade installing a router as the process-wide logger.

Purpose
-------
Expose the stable entry points (``terminal``, ``new``, ``install``, ``init``,
``flush``, ``shutdown``) host applications use instead of wiring the inner
layers by hand.

Contents
--------
* Router construction: :func:`terminal`, :func:`new`, :func:`new_sink`,
  :func:`stdout_sink`, :func:`stderr_sink`.
* Installation: :func:`install`, :func:`init`, :func:`shutdown`,
  :func:`current_router`, :func:`is_installed`, :func:`flush`.

System Role
-----------
Outer shell of the clean-architecture stack: it binds the router to the
stdlib :mod:`logging` root logger and sets the root level to the mode's
global threshold. Installation is one-shot; :func:`shutdown` is the reset
hook that allows a fresh install (tests rely on it).
"""

from __future__ import annotations

import logging

from lib_log_human import config
from lib_log_human.adapters.stdlib_bridge import RouterHandler
from lib_log_human.domain import TRACE, ColourChoice, VerbosityMode

from . import _state as _state_module
from ._composition import (
    STDERR_LEVELS,
    STDOUT_LEVELS,
    Router,
    SystemClock,
    new,
    new_sink,
    stderr_sink,
    stdout_sink,
    terminal,
)
from ._state import InstalledLogger, LoggerAlreadyInstalled, is_installed

LOGGER = logging.getLogger(__name__)


def install(router: Router) -> None:
    """Make ``router`` the process-wide logging sink.

    Side Effects
    ------------
    * Registers the ``TRACE`` level name with :mod:`logging`.
    * Attaches a :class:`RouterHandler` to the root logger; the handler level
      is the mode's global threshold, so loggers with their own lower level
      are gated too.
    * Sets the root logger level to the same threshold.

    Raises
    ------
    LoggerAlreadyInstalled
        When another router is already installed.
    """

    LOGGER.debug("installing %r", router)
    root = logging.getLogger()
    threshold = router.mode.global_threshold.to_python_level()
    handler = RouterHandler(router, level=threshold)
    installed = InstalledLogger(
        router=router,
        handler=handler,
        root_logger=root,
        previous_level=root.level,
    )
    _state_module.set_installed(installed)
    logging.addLevelName(TRACE, "TRACE")
    root.addHandler(handler)
    root.setLevel(threshold)


def init(
    verbosity: int | VerbosityMode | str | None = None,
    colour: ColourChoice | str | None = None,
) -> Router:
    """Build a terminal router from arguments and ``LOG_*`` overrides, then install it.

    Environment variables win over arguments (``LOG_VERBOSITY``,
    ``LOG_COLOR``, ``LOG_FORCE_COLOR``, ``LOG_NO_COLOR``); see
    :mod:`lib_log_human.config`.

    Examples
    --------
    >>> import lib_log_human as log  # doctest: +SKIP
    >>> log.init(verbosity=1)  # doctest: +SKIP
    >>> logging.getLogger("app").debug("ready")  # doctest: +SKIP
    >>> log.shutdown()  # doctest: +SKIP
    """

    mode = config.resolve_mode(verbosity)
    choice = config.resolve_colour(colour)
    router = terminal(mode, colour=choice)
    install(router)
    return router


def current_router() -> Router:
    """Return the installed router or raise :class:`RuntimeError`."""

    return _state_module.current_installed().router


def flush() -> None:
    """Flush the installed router; a no-op when nothing is installed."""

    if not is_installed():
        return
    current_router().flush()


def shutdown() -> None:
    """Flush and uninstall the active router, restoring the root logger.

    Raises
    ------
    RuntimeError
        When no router is installed.
    """

    installed = _state_module.clear_installed()
    if installed is None:
        raise RuntimeError("lib_log_human.shutdown() called without an installed router")
    installed.router.flush()
    installed.root_logger.removeHandler(installed.handler)
    installed.handler.close()
    installed.root_logger.setLevel(installed.previous_level)
    LOGGER.debug("uninstalled %r", installed.router)


__all__ = [
    "LoggerAlreadyInstalled",
    "Router",
    "STDERR_LEVELS",
    "STDOUT_LEVELS",
    "SystemClock",
    "current_router",
    "flush",
    "init",
    "install",
    "is_installed",
    "new",
    "new_sink",
    "shutdown",
    "stderr_sink",
    "stdout_sink",
    "terminal",
]
