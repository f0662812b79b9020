from __future__ import annotations

import pytest

from lib_log_human.runtime import is_installed, shutdown

from tests._doubles import FixedClock, RecordingDiagnostics, TaggingStylizer


@pytest.fixture(autouse=True)
def reset_installation():
    try:
        yield
    finally:
        if is_installed():
            shutdown()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture
def tagging_stylizer() -> TaggingStylizer:
    return TaggingStylizer()
