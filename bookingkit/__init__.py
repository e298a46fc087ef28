"""
bookingkit - UTC timestamp normalization and slug generation for the booking API.
"""

__version__ = "0.1.0"

from .domain import (
    BookingKitError,
    DateTimeNormalizer,
    InvalidTimezoneError,
    NaiveTimestamp,
    ParseError,
    SlugAllocationError,
    UtcTimestamp,
    format_timestamp,
    generate_slug,
    parse_timestamp,
)

__all__ = [
    "BookingKitError",
    "DateTimeNormalizer",
    "InvalidTimezoneError",
    "NaiveTimestamp",
    "ParseError",
    "SlugAllocationError",
    "UtcTimestamp",
    "__version__",
    "format_timestamp",
    "generate_slug",
    "parse_timestamp",
]
