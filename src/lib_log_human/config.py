"""Environment-driven configuration for the terminal router.

Purpose
-------
Translate ``LOG_*`` environment variables (optionally loaded from a nearby
``.env`` via python-dotenv) into the verbosity mode and colour choice used by
:func:`lib_log_human.init` and the CLI.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle consulted by the CLI before loading ``.env``.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - dotenv handling.
* :func:`resolve_mode` / :func:`resolve_colour` - argument + environment
  resolution with environment precedence.

Variables
---------
``LOG_VERBOSITY``    integer count (``0``, ``1``, ``2``...) or mode name.
``LOG_COLOR``        ``always``/``never``/``auto`` (``yes``/``no`` aliases).
``LOG_FORCE_COLOR``  boolean; forces ``ALWAYS``.
``LOG_NO_COLOR``     boolean; forces ``NEVER`` and wins over the others.
"""

from __future__ import annotations

import os
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

from lib_log_human.domain import ColourChoice, VerbosityMode

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
VERBOSITY_ENV_VAR = "LOG_VERBOSITY"
COLOR_ENV_VAR = "LOG_COLOR"
FORCE_COLOR_ENV_VAR = "LOG_FORCE_COLOR"
NO_COLOR_ENV_VAR = "LOG_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_EXAMPLE_BOOL', True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = 'off'
    >>> _env_bool('LOG_EXAMPLE_BOOL', True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    """
    value = os.getenv(name)
    if value is None:
        return default
    return _parse_bool(name, value)


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` should be loaded; an explicit flag beats the variable."""

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return _parse_bool(DOTENV_ENV_VAR, env_value)


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding variables that are already set.

    Searches ``search_from`` (default: the working directory) and its parents.
    Returns the resolved path of the loaded file, or ``None`` when no file was
    found. Repeated calls reuse the first result.
    """

    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        if _DOTENV_LOADED is not None:
            return _DOTENV_LOADED
        if search_from is None:
            found = find_dotenv(usecwd=True)
            candidate = Path(found) if found else None
        else:
            candidate = _find_upwards(Path(search_from))
        if candidate is None:
            return None
        load_dotenv(candidate, override=False)
        _DOTENV_LOADED = candidate.resolve()
        return _DOTENV_LOADED


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


def resolve_mode(value: int | VerbosityMode | str | None = None) -> VerbosityMode:
    """Return the verbosity mode from ``LOG_VERBOSITY`` or ``value``.

    Integers are verbosity counts; strings may be counts or mode names.
    ``None`` means :attr:`VerbosityMode.FRIENDLY`.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_VERBOSITY', None)
    >>> resolve_mode(2).name
    'FULL'
    >>> resolve_mode("debug").name
    'DEBUG'
    """

    raw = os.getenv(VERBOSITY_ENV_VAR)
    if raw is not None and raw.strip():
        value = raw
    if value is None:
        return VerbosityMode.FRIENDLY
    if isinstance(value, VerbosityMode):
        return value
    if isinstance(value, int):
        return VerbosityMode.from_verbosity_count(value)
    text = value.strip()
    if text.lstrip("-").isdigit():
        return VerbosityMode.from_verbosity_count(int(text))
    return VerbosityMode.from_name(text)


def resolve_colour(value: ColourChoice | str | None = None) -> ColourChoice:
    """Return the colour choice after applying ``LOG_*`` colour overrides.

    Precedence: ``LOG_NO_COLOR`` > ``LOG_FORCE_COLOR`` > ``LOG_COLOR`` >
    ``value`` > :attr:`ColourChoice.AUTO`.
    """

    if _env_bool(NO_COLOR_ENV_VAR, False):
        return ColourChoice.NEVER
    if _env_bool(FORCE_COLOR_ENV_VAR, False):
        return ColourChoice.ALWAYS
    raw = os.getenv(COLOR_ENV_VAR)
    if raw is not None and raw.strip():
        return ColourChoice.from_name(raw)
    if value is None:
        return ColourChoice.AUTO
    if isinstance(value, ColourChoice):
        return value
    return ColourChoice.from_name(value)


__all__ = [
    "COLOR_ENV_VAR",
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "VERBOSITY_ENV_VAR",
    "enable_dotenv",
    "resolve_colour",
    "resolve_mode",
    "should_use_dotenv",
]
