"""Wall-clock instants with nanosecond precision."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

_NANOS_PER_SECOND = 1_000_000_000


@dataclass(slots=True, frozen=True)
class Instant:
    """A timezone-aware moment (whole seconds) plus its nanosecond fraction."""

    moment: datetime
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if self.moment.tzinfo is None or self.moment.utcoffset() is None:
            raise ValueError("moment must be timezone-aware")
        if not 0 <= self.nanosecond < _NANOS_PER_SECOND:
            raise ValueError("nanosecond must be within [0, 1e9)")
        object.__setattr__(self, "moment", self.moment.replace(microsecond=0))

    @classmethod
    def from_epoch_ns(cls, epoch_ns: int, tz: tzinfo | None = None) -> "Instant":
        """Build an instant from nanoseconds since the epoch.

        ``tz`` defaults to the local zone of the process.

        Examples
        --------
        >>> from datetime import timezone
        >>> Instant.from_epoch_ns(1_677_862_342_123_456_789, timezone.utc).rfc3339_text()
        '2023-03-03T16:52:22.123456789+00:00'
        """
        seconds, nanosecond = divmod(epoch_ns, _NANOS_PER_SECOND)
        if tz is None:
            moment = datetime.fromtimestamp(seconds).astimezone()
        else:
            moment = datetime.fromtimestamp(seconds, tz=tz)
        return cls(moment=moment, nanosecond=nanosecond)

    def seconds_text(self) -> str:
        """Return the debug-mode stamp, e.g. ``2023-03-03T16:52:22Z``."""

        return self.moment.strftime("%Y-%m-%dT%H:%M:%SZ")

    def rfc3339_text(self) -> str:
        """Return the full-mode stamp with nanoseconds and UTC offset."""

        return f"{self.moment:%Y-%m-%dT%H:%M:%S}.{self.nanosecond:09d}{self._offset_text()}"

    def _offset_text(self) -> str:
        # RFC 3339 offsets carry no seconds; sub-minute parts are truncated.
        total = int(self.moment.utcoffset().total_seconds())  # type: ignore[union-attr]
        sign = "-" if total < 0 else "+"
        hours, minutes = divmod(abs(total) // 60, 60)
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Instant"]
