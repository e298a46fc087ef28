"""
Company-timezone helpers: UTC storage, local display.

Instants are stored and sent as UTC. A company's IANA timezone is only used
to read local input (a date plus a time of day) and to render local output.
"""

import re
from datetime import datetime
from typing import Dict, Tuple, Union

import pendulum
from pendulum import DateTime

from .datetime_normalizer import coerce_timestamp, format_timestamp
from .exceptions import InvalidTimezoneError, ParseError
from .models import NaiveTimestamp, UtcTimestamp

InstantLike = Union[UtcTimestamp, NaiveTimestamp, datetime, str]

COMMON_TIMEZONES: Dict[str, str] = {
    "America/New_York": "Eastern Time (ET)",
    "America/Chicago": "Central Time (CT)",
    "America/Denver": "Mountain Time (MT)",
    "America/Los_Angeles": "Pacific Time (PT)",
    "Europe/London": "London (GMT/BST)",
    "Europe/Paris": "Paris (CET/CEST)",
    "Europe/Athens": "Athens (EET/EEST)",
    "Asia/Kolkata": "India (IST)",
    "Asia/Tokyo": "Tokyo (JST)",
    "Australia/Sydney": "Sydney (AEDT/AEST)",
}

_DIGITS = re.compile(r"\d+")
_TIME_OF_DAY = re.compile(r"(\d+):(\d+)\s*(am|pm)?", re.IGNORECASE)


def resolve_timezone(name: str) -> pendulum.Timezone | pendulum.FixedTimezone:
    """
    Resolve an IANA timezone name.

    Raises:
        InvalidTimezoneError: If the name is unknown
    """
    try:
        return pendulum.timezone(name)
    except (ValueError, KeyError) as exc:
        raise InvalidTimezoneError(name) from exc


def _parse_time_of_day(time_str: str) -> Tuple[int, int]:
    """Read "15:22", "03:22 PM" or "11:30am" into (hour, minute)."""
    match = _TIME_OF_DAY.search(time_str)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        meridiem = (match.group(3) or "").upper()
        if meridiem == "PM" and hour < 12:
            hour += 12
        if meridiem == "AM" and hour == 12:
            hour = 0
        return hour, minute

    # Bare numbers such as "15" or "15 30"
    numbers = [int(part) for part in _DIGITS.findall(time_str)]
    hour = numbers[0] if numbers else 0
    minute = numbers[1] if len(numbers) > 1 else 0
    return hour, minute


def combine_local_to_utc(date_str: str, time_str: str, timezone: str) -> str:
    """
    Combine a local date and time of day into a UTC wire string.

    Example: ("2025-01-20", "15:33", "America/New_York") -> "2025-01-20T20:33:00.000Z"

    Args:
        date_str: Year, month and day in that order, any delimiter
        time_str: 24h ("15:22") or 12h ("03:22 PM") time of day
        timezone: IANA timezone the wall time belongs to

    Returns:
        Canonical UTC wire string

    Raises:
        ParseError: If the date or time cannot be read
        InvalidTimezoneError: If the timezone is unknown
    """
    date_parts = _DIGITS.findall(date_str)
    if len(date_parts) < 3:
        raise ParseError(date_str, f"Invalid date format: {date_str!r}")

    year, month, day = (int(part) for part in date_parts[:3])
    hour, minute = _parse_time_of_day(time_str)
    tz = resolve_timezone(timezone)

    try:
        local = pendulum.datetime(year, month, day, hour, minute, tz=tz)
    except ValueError as exc:
        raise ParseError(
            f"{date_str} {time_str}",
            f"Invalid date or time: {date_str!r} {time_str!r}",
        ) from exc

    return format_timestamp(UtcTimestamp(local.in_timezone("UTC")))


def to_local(instant: InstantLike, timezone: str) -> DateTime:
    """
    Express an instant in the given timezone.

    Raises:
        ValueError: For the unset sentinel, which has no local representation
    """
    timestamp = coerce_timestamp(instant)
    if timestamp.is_unset:
        raise ValueError("Cannot localize an unset timestamp")

    return timestamp.instant.in_timezone(resolve_timezone(timezone))


def local_date_string(instant: InstantLike, timezone: str) -> str:
    """Get the YYYY-MM-DD date of an instant in a timezone."""
    return to_local(instant, timezone).format("YYYY-MM-DD")


def local_time_string(instant: InstantLike, timezone: str) -> str:
    """Get the HH:mm (24h) time of an instant in a timezone."""
    return to_local(instant, timezone).format("HH:mm")


def format_local_datetime(instant: InstantLike, timezone: str) -> str:
    """
    Format an instant for display in a timezone.

    Format: Dec 24, 2025 at 03:22 PM
    """
    local = to_local(instant, timezone)
    return f"{local.format('MMM D, YYYY')} at {local.format('hh:mm A')}"


def is_same_local_day(first: InstantLike, second: InstantLike, timezone: str) -> bool:
    """Check if two instants fall on the same calendar day in a timezone."""
    return local_date_string(first, timezone) == local_date_string(second, timezone)


def utc_offset_label(timezone: str, at: InstantLike | None = None) -> str:
    """
    Get the UTC offset of a timezone as a label, e.g. "UTC+5:30".

    Args:
        timezone: IANA timezone name
        at: Instant to evaluate the offset at (defaults to now)
    """
    tz = resolve_timezone(timezone)
    local = pendulum.now(tz) if at is None else to_local(at, timezone)

    offset_minutes = int(local.utcoffset().total_seconds() // 60)
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)

    return f"UTC{sign}{hours}:{minutes:02d}"
