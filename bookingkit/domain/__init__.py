"""
Domain layer - Pure boundary logic without I/O.
"""

from .datetime_normalizer import (
    DateTimeNormalizer,
    coerce_timestamp,
    format_timestamp,
    parse_timestamp,
)
from .exceptions import BookingKitError, InvalidTimezoneError, ParseError, SlugAllocationError
from .models import NaiveTimestamp, Timestamp, UtcTimestamp, to_timestamp
from .slugs import generate_slug, is_valid_slug

__all__ = [
    "BookingKitError",
    "DateTimeNormalizer",
    "InvalidTimezoneError",
    "NaiveTimestamp",
    "ParseError",
    "SlugAllocationError",
    "Timestamp",
    "UtcTimestamp",
    "coerce_timestamp",
    "format_timestamp",
    "generate_slug",
    "is_valid_slug",
    "parse_timestamp",
    "to_timestamp",
]
