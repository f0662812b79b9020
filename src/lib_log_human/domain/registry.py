"""Registry partitioning sinks into one dispatch bucket per severity."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping

from .levels import Severity
from .sink import Sink


class SinkRegistry:
    """Five ordered buckets of shared sink references.

    Buckets preserve configuration order and are immutable after
    construction; only each sink's ``enabled`` latch changes afterwards.
    Sinks accepting no level are kept so they can still be flushed.

    Examples
    --------
    >>> import io
    >>> sink = Sink(label="mem", writer=io.StringIO(), colour=False, levels=[Severity.WARN, Severity.ERROR])
    >>> registry = SinkRegistry([sink])
    >>> registry.bucket(Severity.ERROR)[0] is registry.bucket(Severity.WARN)[0]
    True
    >>> registry.bucket(Severity.INFO)
    ()
    """

    def __init__(self, sinks: Iterable[Sink]) -> None:
        self._sinks: tuple[Sink, ...] = tuple(sinks)
        buckets: dict[Severity, list[Sink]] = {level: [] for level in Severity}
        for sink in self._sinks:
            for level in Severity:
                if sink.accepts(level):
                    buckets[level].append(sink)
        self._buckets: Mapping[Severity, tuple[Sink, ...]] = MappingProxyType(
            {level: tuple(members) for level, members in buckets.items()}
        )

    @property
    def sinks(self) -> tuple[Sink, ...]:
        """Return every configured sink in configuration order."""

        return self._sinks

    def bucket(self, level: Severity) -> tuple[Sink, ...]:
        """Return the sinks accepting ``level`` in dispatch order."""

        return self._buckets[level]

    def unique_sinks(self) -> tuple[Sink, ...]:
        """Return configured sinks with duplicates (by identity) removed."""

        seen: set[int] = set()
        unique: list[Sink] = []
        for sink in self._sinks:
            if id(sink) in seen:
                continue
            seen.add(id(sink))
            unique.append(sink)
        return tuple(unique)


__all__ = ["SinkRegistry"]
