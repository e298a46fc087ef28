"""
Domain-specific exception hierarchy for bookingkit.
"""

# Validation error code the API layer reports for unreadable dates.
INVALID_DATE = "INVALID_DATE"


class BookingKitError(Exception):
    """Base class for all bookingkit errors."""


class ParseError(BookingKitError, ValueError):
    """Raised when a non-empty string cannot be read as a date-time."""

    error_code = INVALID_DATE

    def __init__(self, value: str, message: str | None = None, field: str | None = None):
        self.value = value
        self.field = field
        super().__init__(message or f"Invalid date-time value: {value!r}")


class InvalidTimezoneError(BookingKitError, ValueError):
    """Raised when a timezone name is not a known IANA identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown timezone: {name!r}")


class SlugAllocationError(BookingKitError):
    """Raised when no free slug is found within the attempt budget."""
