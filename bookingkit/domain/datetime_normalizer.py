"""
UTC normalization for timestamps crossing the API boundary.

Read path: ``parse_timestamp`` turns a wire string into a ``UtcTimestamp``.
Write path: ``format_timestamp`` renders any timestamp as
``YYYY-MM-DDTHH:mm:ss.sssZ``.

Values without zone information are read as UTC on both paths. Values that
carry an offset are converted on the read path only; the write path always
reuses the wall clock. Clients in other runtimes treat a timestamp without
``Z`` as local time, so the suffix is never omitted.
"""

import logging
from datetime import date, datetime
from typing import Any

import pendulum
from dateutil import parser as dateutil_parser

from .exceptions import ParseError
from .models import (
    NaiveTimestamp,
    Timestamp,
    UtcTimestamp,
    is_utc,
    to_timestamp,
    utc_from_wall_clock,
)

logger = logging.getLogger(__name__)

WIRE_FORMAT = "YYYY-MM-DDTHH:mm:ss.sssZ"

# Relative keywords pendulum understands but which depend on the clock
_RELATIVE_KEYWORDS = {"now"}

# Defaults that differ in every date field; a string that leaves one of them
# out resolves differently against each.
_FALLBACK_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 2, 2))


def _parse_fallback(value: str, text: str, field: str | None) -> datetime:
    """Parse a non-ISO string with dateutil, rejecting partial date-times."""
    try:
        first, second = (
            dateutil_parser.parse(text, default=default) for default in _FALLBACK_DEFAULTS
        )
    except (ValueError, OverflowError) as exc:
        raise ParseError(value, field=field) from exc

    if first != second:
        raise ParseError(value, f"Incomplete date-time value: {value!r}", field=field)

    return first


def parse_timestamp(value: str | None, *, field: str | None = None) -> UtcTimestamp:
    """
    Parse a wire string into a UTC timestamp.

    Args:
        value: ISO 8601 or another common date-time representation.
            ``None`` and ``""`` mean "unset".
        field: Optional payload field name, attached to a raised ParseError

    Returns:
        ``UtcTimestamp.MIN`` for absent input, otherwise the UTC instant

    Raises:
        ParseError: If ``value`` is non-empty but not a date-time
    """
    if value is None or value == "":
        logger.debug("Empty timestamp input, returning the unset sentinel")
        return UtcTimestamp.MIN

    stripped = value.strip()
    if not stripped or stripped.lower() in _RELATIVE_KEYWORDS:
        raise ParseError(value, field=field)

    try:
        parsed = pendulum.parse(stripped, tz=None, strict=True, exact=True)
    except (ValueError, OverflowError):
        parsed = _parse_fallback(value, stripped, field)

    if isinstance(parsed, datetime):
        wall_clock: datetime = parsed
    elif isinstance(parsed, date):
        wall_clock = datetime(parsed.year, parsed.month, parsed.day)
    else:
        # Times of day, durations and intervals
        raise ParseError(value, f"Not a date-time value: {value!r}", field=field)

    try:
        timestamp = to_timestamp(wall_clock)
    except OverflowError as exc:
        raise ParseError(value, f"Date-time out of range: {value!r}", field=field) from exc

    if isinstance(timestamp, NaiveTimestamp):
        logger.debug("Timestamp %r has no offset, reading it as UTC", value)
        return timestamp.as_utc()

    return timestamp


def format_timestamp(value: Timestamp | datetime) -> str:
    """
    Render a timestamp in the canonical wire format.

    UTC values are used as-is. Anything else (naive values and aware values
    with a non-zero offset) has its wall-clock fields read as UTC.
    Sub-millisecond digits are truncated.
    """
    if isinstance(value, UtcTimestamp):
        instant = value.instant
    elif isinstance(value, NaiveTimestamp):
        instant = value.as_utc().instant
    elif isinstance(value, datetime):
        instant = value if is_utc(value) else utc_from_wall_clock(value)
    else:
        raise TypeError(f"Cannot format {type(value).__name__} as a timestamp")

    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
        f".{instant.microsecond // 1000:03d}Z"
    )


def coerce_timestamp(value: Any, *, field: str | None = None) -> UtcTimestamp:
    """
    Normalize any supported input on the read path.

    Strings and ``None`` go through ``parse_timestamp``; datetimes are
    classified and naive ones read as UTC.

    Raises:
        ParseError: For unparseable strings
        TypeError: For unsupported input types
    """
    if value is None or isinstance(value, str):
        return parse_timestamp(value, field=field)

    if isinstance(value, datetime):
        value = to_timestamp(value)

    if isinstance(value, NaiveTimestamp):
        return value.as_utc()

    if isinstance(value, UtcTimestamp):
        return value

    raise TypeError(f"Expected a date-time string or datetime, got {type(value).__name__}")


class DateTimeNormalizer:
    """
    Stateless object form of the normalizer for callers that inject one.
    """

    def parse(self, value: str | None, *, field: str | None = None) -> UtcTimestamp:
        """Parse a wire string into a UTC timestamp."""
        return parse_timestamp(value, field=field)

    def format(self, value: Timestamp | datetime) -> str:
        """Render a timestamp in the canonical wire format."""
        return format_timestamp(value)
