"""Filter value payloads, one per field type.

Payloads use camelCase aliases on the wire (``startDate``, ``minAmount``) and
snake_case attributes in Python. Defaults mirror what a freshly added
condition carries before the user edits it.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class Payload(BaseModel):
    """Base for all filter value payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TextValue(Payload):
    value: str = ""


class NumberValue(Payload):
    value: float = 0


class DateRangeValue(Payload):
    """Calendar-date range; both ends are inclusive whole days."""

    start_date: str = ""
    end_date: str = ""


class AmountRangeValue(Payload):
    """Plain inclusive numeric range."""

    min_amount: float = 0
    max_amount: float = 0


class SingleSelectValue(Payload):
    value: str = ""


class MultiSelectValue(Payload):
    values: List[str] = Field(default_factory=list)


class BooleanValue(Payload):
    value: StrictBool = False


__all__ = [
    "AmountRangeValue",
    "BooleanValue",
    "DateRangeValue",
    "MultiSelectValue",
    "NumberValue",
    "Payload",
    "SingleSelectValue",
    "TextValue",
]
