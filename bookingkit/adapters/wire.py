"""
Pydantic wire types for request and response payloads.

A field declared as ``UtcDateTime`` is read through the normalizer's read
path and written through ``format_timestamp``, so every payload carries
``YYYY-MM-DDTHH:mm:ss.sssZ`` in both directions.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationInfo
from pydantic.alias_generators import to_camel

from ..domain.datetime_normalizer import coerce_timestamp, format_timestamp
from ..domain.slugs import generate_slug


def _read_timestamp(value: Any, info: ValidationInfo) -> datetime:
    try:
        return coerce_timestamp(value, field=info.field_name).instant
    except TypeError as exc:
        # pydantic only reports ValueError and AssertionError as field errors
        raise ValueError(str(exc)) from exc


UtcDateTime = Annotated[
    datetime,
    BeforeValidator(_read_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]

SlugStr = Annotated[str, AfterValidator(generate_slug)]


class WireModel(BaseModel):
    """
    Base class for API payloads.

    Fields use camelCase on the wire and snake_case in Python.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
