from __future__ import annotations

import io
import sys

import pytest

from lib_log_human.adapters import StderrDiagnostics
from lib_log_human.domain import SinkFailure

from tests._doubles import TaggingStylizer


def test_report_writes_one_warning_line() -> None:
    stream = io.StringIO()
    StderrDiagnostics(stream=stream).report(SinkFailure("file", "write", OSError("disk full")))

    assert stream.getvalue() == "WARNING: Failed to write to writer 'file': disk full (will not attempt again)\n"


def test_report_resolves_stderr_at_call_time(monkeypatch: pytest.MonkeyPatch) -> None:
    diagnostics = StderrDiagnostics(stylizer=TaggingStylizer())
    redirected = io.StringIO()
    monkeypatch.setattr(sys, "stderr", redirected)

    diagnostics.report(SinkFailure("pipe", "flush", OSError("gone")))

    assert redirected.getvalue() == "WARNING: Failed to flush writer 'pipe': gone (will not attempt again)\n"


def test_report_styles_prefix_on_a_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeTty(io.StringIO):
        def isatty(self) -> bool:
            return True

    fake = FakeTty()
    monkeypatch.setattr(sys, "stderr", fake)

    StderrDiagnostics(stylizer=TaggingStylizer()).report(SinkFailure("pipe", "write", OSError("gone")))

    assert fake.getvalue().startswith("<bold yellow>WARNING</>: Failed to write to writer 'pipe'")


def test_report_ignores_an_unusable_error_channel() -> None:
    closed = io.StringIO()
    closed.close()

    StderrDiagnostics(stream=closed).report(SinkFailure("file", "write", OSError("disk full")))


def test_report_swallows_any_error_channel_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    class BrokenStderr(io.StringIO):
        def write(self, text: str) -> int:
            raise RuntimeError("stderr wrapper broke")

    monkeypatch.setattr(sys, "stderr", BrokenStderr())

    StderrDiagnostics().report(SinkFailure("file", "write", OSError("disk full")))
