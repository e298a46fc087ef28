"""
Tests for the pydantic wire types.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from pydantic import ValidationError

from bookingkit.adapters.wire import SlugStr, UtcDateTime, WireModel
from bookingkit.domain.models import UtcTimestamp


class AppointmentPayload(WireModel):
    starts_at: UtcDateTime
    ends_at: Optional[UtcDateTime] = None
    company_slug: SlugStr = ""


def test_reads_camel_case_and_converts_offset():
    """Incoming offsets should become the same instant in UTC."""
    payload = AppointmentPayload.model_validate({"startsAt": "2025-12-24T15:22:00+05:30"})

    assert payload.starts_at == datetime(2025, 12, 24, 9, 52, tzinfo=timezone.utc)
    assert payload.starts_at.utcoffset() == timedelta(0)


def test_snake_case_names_are_accepted():
    """Python callers may use field names directly."""
    payload = AppointmentPayload(starts_at="2025-12-24T09:52:00Z")

    assert payload.starts_at.hour == 9


def test_naive_string_is_read_as_utc():
    """Timestamps without an offset keep their wall clock as UTC."""
    payload = AppointmentPayload.model_validate({"startsAt": "2025-12-24T15:22:00"})

    assert payload.starts_at == datetime(2025, 12, 24, 15, 22, tzinfo=timezone.utc)


def test_dump_uses_wire_format():
    """Serialized timestamps are UTC with milliseconds and a Z suffix."""
    payload = AppointmentPayload.model_validate(
        {
            "startsAt": "2025-12-24T15:22:00.123456+05:30",
            "endsAt": "2025-12-24T10:22:00Z",
            "companySlug": "Acme Corp!!",
        }
    )

    assert payload.model_dump(mode="json", by_alias=True) == {
        "startsAt": "2025-12-24T09:52:00.123Z",
        "endsAt": "2025-12-24T10:22:00.000Z",
        "companySlug": "acme-corp",
    }


def test_naive_datetime_dumps_as_utc_wall_clock():
    """Naive datetimes assigned from Python are read as UTC."""
    payload = AppointmentPayload(starts_at=datetime(2025, 1, 2, 3, 4, 5))

    assert payload.model_dump_json(by_alias=True, include={"starts_at"}) == '{"startsAt":"2025-01-02T03:04:05.000Z"}'


def test_invalid_timestamp_is_a_validation_error():
    """Unreadable strings are reported against the field."""
    with pytest.raises(ValidationError) as exc_info:
        AppointmentPayload.model_validate({"startsAt": "not-a-date"})

    errors = exc_info.value.errors()
    assert errors[0]["loc"] == ("startsAt",)


def test_unsupported_type_is_a_validation_error():
    """Numbers are not accepted as timestamps."""
    with pytest.raises(ValidationError):
        AppointmentPayload.model_validate({"startsAt": 1735033920})


def test_empty_string_is_unset_sentinel():
    """An empty timestamp becomes the unset sentinel, not an error."""
    payload = AppointmentPayload.model_validate({"startsAt": ""})

    assert payload.starts_at == UtcTimestamp.MIN.instant
    assert payload.model_dump(mode="json", by_alias=True)["startsAt"] == "0001-01-01T00:00:00.000Z"


def test_optional_timestamp_may_be_null():
    """A nullable field keeps None."""
    payload = AppointmentPayload.model_validate({"startsAt": "2025-12-24T09:52:00Z", "endsAt": None})

    assert payload.ends_at is None
    assert payload.model_dump(mode="json", by_alias=True)["endsAt"] is None
