from __future__ import annotations

import io

import pytest

from lib_log_human.domain import Severity, Sink, SinkFailure, SinkRegistry

from tests._doubles import CountingBuffer, FailingWriter
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def _sink(label: str, writer=None, levels=(Severity.INFO,)) -> Sink:
    return Sink(label=label, writer=writer if writer is not None else io.StringIO(), colour=False, levels=levels)


def test_sink_accepts_only_configured_levels() -> None:
    sink = _sink("mem", levels=[Severity.WARN, Severity.ERROR])
    assert sink.accepts(Severity.ERROR)
    assert not sink.accepts(Severity.INFO)


def test_sink_write_reaches_destination() -> None:
    buffer = io.StringIO()
    sink = _sink("mem", buffer)
    assert sink.write("hello\n") is None
    assert buffer.getvalue() == "hello\n"


def test_failed_write_latches_sink_disabled() -> None:
    writer = FailingWriter()
    sink = _sink("broken", writer)

    failure = sink.write("one\n")

    assert isinstance(failure, SinkFailure)
    assert failure.operation == "write"
    assert not sink.enabled
    assert sink.write("two\n") is None
    assert sink.flush() is None
    assert writer.write_attempts == 1
    assert writer.flush_attempts == 0


def test_failed_flush_latches_sink_disabled() -> None:
    writer = FailingWriter(fail_write=False, fail_flush=True)
    sink = _sink("flaky", writer)

    failure = sink.flush()

    assert failure is not None
    assert failure.describe() == "Failed to flush writer 'flaky': device gone (will not attempt again)"
    assert not sink.enabled
    assert sink.write("after\n") is None
    assert writer.write_attempts == 0


def test_failure_description_for_writes() -> None:
    failure = SinkFailure("file", "write", OSError("broken pipe"))
    assert failure.describe() == "Failed to write to writer 'file': broken pipe (will not attempt again)"


def test_registry_buckets_preserve_configuration_order() -> None:
    first = _sink("first", levels=[Severity.ERROR])
    second = _sink("second", levels=list(Severity))
    registry = SinkRegistry([first, second])

    assert registry.bucket(Severity.ERROR) == (first, second)
    assert registry.bucket(Severity.TRACE) == (second,)


def test_registry_shares_one_sink_across_buckets() -> None:
    writer = FailingWriter()
    sink = _sink("shared", writer, levels=[Severity.WARN, Severity.ERROR])
    registry = SinkRegistry([sink])

    registry.bucket(Severity.WARN)[0].write("x\n")

    assert registry.bucket(Severity.ERROR)[0] is sink
    assert not registry.bucket(Severity.ERROR)[0].enabled


def test_sink_without_levels_is_inert_but_kept() -> None:
    inert = _sink("inert", CountingBuffer(), levels=())
    registry = SinkRegistry([inert])

    assert all(registry.bucket(level) == () for level in Severity)
    assert registry.sinks == (inert,)
    assert registry.unique_sinks() == (inert,)


def test_unique_sinks_removes_repeated_references() -> None:
    sink = _sink("twice", levels=[Severity.INFO])
    other = _sink("other", levels=[Severity.INFO])
    registry = SinkRegistry([sink, other, sink])

    assert registry.unique_sinks() == (sink, other)
    assert registry.bucket(Severity.INFO) == (sink, other, sink)


def test_registry_buckets_are_read_only() -> None:
    registry = SinkRegistry([_sink("mem")])
    with pytest.raises(TypeError):
        registry._buckets[Severity.INFO] = ()  # type: ignore[index]
