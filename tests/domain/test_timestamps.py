from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_human.domain import Instant


def test_instant_texts_in_utc() -> None:
    instant = Instant.from_epoch_ns(1_677_862_342_123_456_789, timezone.utc)
    assert instant.seconds_text() == "2023-03-03T16:52:22Z"
    assert instant.rfc3339_text() == "2023-03-03T16:52:22.123456789+00:00"


def test_instant_keeps_offset_of_zone() -> None:
    plus_one = timezone(timedelta(hours=1))
    instant = Instant.from_epoch_ns(1_677_862_342_000_000_005, plus_one)
    assert instant.seconds_text() == "2023-03-03T17:52:22Z"
    assert instant.rfc3339_text() == "2023-03-03T17:52:22.000000005+01:00"


def test_instant_defaults_to_local_zone() -> None:
    instant = Instant.from_epoch_ns(0)
    assert instant.moment.tzinfo is not None


def test_instant_requires_aware_moment() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        Instant(moment=datetime(2023, 3, 3, 12, 0))


def test_instant_rejects_out_of_range_nanoseconds() -> None:
    with pytest.raises(ValueError, match="nanosecond"):
        Instant(moment=datetime(2023, 3, 3, tzinfo=timezone.utc), nanosecond=1_000_000_000)


@pytest.mark.parametrize(
    "offset, suffix",
    [
        (timedelta(minutes=9, seconds=21), "+00:09"),
        (-timedelta(minutes=9, seconds=21), "-00:09"),
        (timedelta(hours=-5), "-05:00"),
        (timedelta(hours=5, minutes=30), "+05:30"),
    ],
)
def test_full_stamp_offset_has_hours_and_minutes_only(offset: timedelta, suffix: str) -> None:
    instant = Instant(moment=datetime(1900, 1, 1, 12, 0, tzinfo=timezone(offset)), nanosecond=7)
    assert instant.rfc3339_text() == f"1900-01-01T12:00:00.000000007{suffix}"
