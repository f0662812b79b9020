from __future__ import annotations

import pytest

from lib_log_human.application.use_cases.render import render_record
from lib_log_human.domain import LogRecord, Severity, VerbosityMode

from tests._doubles import FIXED_INSTANT, TaggingStylizer
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]

DEBUG_STAMP = "2023-03-03T16:52:22Z"
FULL_STAMP = "2023-03-03T16:52:22.123456789+00:00"


def _record(**overrides) -> LogRecord:
    values = {
        "level": Severity.INFO,
        "target": "app",
        "message": "ready",
        "module_path": "app.server",
        "file": "src/app/server.py",
        "line": 42,
    }
    values.update(overrides)
    return LogRecord(**values)


def _plain(record: LogRecord, mode: VerbosityMode) -> str:
    return render_record(record, mode, colour=False, stylizer=TaggingStylizer(), instant=FIXED_INSTANT)


@pytest.mark.parametrize(
    "level, expected",
    [
        (Severity.TRACE, "TRACE: ready"),
        (Severity.DEBUG, "DEBUG: ready"),
        (Severity.INFO, "INFO: ready"),
        (Severity.WARN, "WARNING: ready"),
        (Severity.ERROR, "ERROR: ready"),
    ],
)
def test_friendly_layout(level: Severity, expected: str) -> None:
    assert _plain(_record(level=level), VerbosityMode.FRIENDLY) == expected


def test_friendly_layout_needs_no_instant() -> None:
    line = render_record(_record(), VerbosityMode.FRIENDLY, colour=False, stylizer=TaggingStylizer())
    assert line == "INFO: ready"


def test_debug_layout_with_distinct_module() -> None:
    assert _plain(_record(), VerbosityMode.DEBUG) == f"[{DEBUG_STAMP} INFO app.server app] ready"


@pytest.mark.parametrize("module_path", [None, "app"])
def test_debug_layout_omits_redundant_module(module_path: str | None) -> None:
    line = _plain(_record(module_path=module_path), VerbosityMode.DEBUG)
    assert line == f"[{DEBUG_STAMP} INFO app] ready"


def test_full_layout_with_file_and_line() -> None:
    assert _plain(_record(), VerbosityMode.FULL) == f"[{FULL_STAMP} INFO src/app/server.py:42 app] ready"


def test_full_layout_with_file_only() -> None:
    line = _plain(_record(line=None), VerbosityMode.FULL)
    assert line == f"[{FULL_STAMP} INFO src/app/server.py app] ready"


def test_full_layout_without_file_ignores_line() -> None:
    line = _plain(_record(file=None), VerbosityMode.FULL)
    assert line == f"[{FULL_STAMP} INFO app] ready"


def test_full_layout_does_not_show_module() -> None:
    line = _plain(_record(file=None), VerbosityMode.FULL)
    assert "app.server" not in line


def test_coloured_friendly_styles_only_the_level() -> None:
    line = render_record(
        _record(level=Severity.ERROR, message="disk full"),
        VerbosityMode.FRIENDLY,
        colour=True,
        stylizer=TaggingStylizer(),
    )
    assert line == "<bold red>ERROR</>: disk full"


def test_coloured_debug_styles_every_fragment() -> None:
    line = render_record(
        _record(level=Severity.WARN),
        VerbosityMode.DEBUG,
        colour=True,
        stylizer=TaggingStylizer(),
        instant=FIXED_INSTANT,
    )
    assert line == f"[<dim>{DEBUG_STAMP}</> <bold yellow>WARNING</> <dim>app.server</> <bold>app</>] ready"


def test_coloured_full_styles_location() -> None:
    line = render_record(
        _record(level=Severity.DEBUG),
        VerbosityMode.FULL,
        colour=True,
        stylizer=TaggingStylizer(),
        instant=FIXED_INSTANT,
    )
    assert line == f"[<dim>{FULL_STAMP}</> <bold blue>DEBUG</> <dim>src/app/server.py</><dim>:42</> <bold>app</>] ready"


def test_message_is_never_styled() -> None:
    line = render_record(
        _record(message="<payload>"),
        VerbosityMode.FRIENDLY,
        colour=True,
        stylizer=TaggingStylizer(),
    )
    assert line.endswith(": <payload>")


@pytest.mark.parametrize("mode", [VerbosityMode.DEBUG, VerbosityMode.FULL])
def test_verbose_modes_require_an_instant(mode: VerbosityMode) -> None:
    with pytest.raises(ValueError, match="requires a timestamp"):
        render_record(_record(), mode, colour=False, stylizer=TaggingStylizer())


@pytest.mark.parametrize("mode", list(VerbosityMode))
def test_rendering_is_deterministic(mode: VerbosityMode) -> None:
    record = _record(level=Severity.TRACE)
    assert _plain(record, mode) == _plain(record, mode)
