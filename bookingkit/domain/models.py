"""
Domain models for timestamps crossing the API boundary.

A timestamp is either a ``UtcTimestamp`` (an explicit UTC instant) or a
``NaiveTimestamp`` (wall-clock fields without a zone). Only ``UtcTimestamp``
values leave the normalizer.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import ClassVar, Union

import pendulum
from pendulum import DateTime


def is_utc(value: datetime) -> bool:
    """Check if a datetime is aware and sits at a zero UTC offset."""
    return value.tzinfo is not None and value.utcoffset() == timedelta(0)


def utc_from_wall_clock(value: datetime) -> DateTime:
    """
    Read the wall-clock fields of ``value`` as UTC.

    Any tzinfo on ``value`` is ignored; no offset conversion is applied.
    """
    return pendulum.datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
        tz="UTC",
    )


@dataclass(frozen=True, order=True)
class UtcTimestamp:
    """
    Represents an instant with explicit UTC semantics.

    Invariant: ``instant`` is timezone-aware with a zero UTC offset.
    ``UtcTimestamp.MIN`` is the sentinel for an absent value.
    """
    instant: DateTime

    MIN: ClassVar["UtcTimestamp"]

    def __post_init__(self):
        if not is_utc(self.instant):
            raise ValueError(f"UtcTimestamp requires a UTC datetime, got {self.instant!r}")

        if not isinstance(self.instant, DateTime) or self.instant.timezone_name != "UTC":
            object.__setattr__(self, "instant", utc_from_wall_clock(self.instant))

    @property
    def is_unset(self) -> bool:
        """True for the "absent/unset" sentinel."""
        return self == UtcTimestamp.MIN


UtcTimestamp.MIN = UtcTimestamp(pendulum.datetime(1, 1, 1, tz="UTC"))


@dataclass(frozen=True)
class NaiveTimestamp:
    """
    Represents wall-clock fields with no associated timezone.
    """
    wall_clock: datetime

    def __post_init__(self):
        if self.wall_clock.tzinfo is not None:
            raise ValueError(f"NaiveTimestamp requires a naive datetime, got {self.wall_clock!r}")

    def as_utc(self) -> UtcTimestamp:
        """Reinterpret the wall-clock fields as UTC without shifting them."""
        return UtcTimestamp(utc_from_wall_clock(self.wall_clock))


Timestamp = Union[UtcTimestamp, NaiveTimestamp]


def to_timestamp(value: datetime) -> Timestamp:
    """
    Classify a raw datetime.

    Naive values become ``NaiveTimestamp``. Aware values become
    ``UtcTimestamp``; a non-zero offset is converted to the same instant
    in UTC.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return NaiveTimestamp(value.replace(tzinfo=None))

    if is_utc(value):
        return UtcTimestamp(value)

    return UtcTimestamp(pendulum.instance(value).in_timezone("UTC"))
