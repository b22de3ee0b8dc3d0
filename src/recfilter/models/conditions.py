"""Filter condition models.

A condition is one ``(field, operator, value)`` rule tagged with the field
type that decides the shape of ``value``. The seven condition models form a
closed union discriminated by ``fieldType``.
"""

from __future__ import annotations

import uuid
from typing import Any, Annotated, Iterable, List, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
)
from pydantic.alias_generators import to_camel

from .types import FieldType
from .values import (
    AmountRangeValue,
    BooleanValue,
    DateRangeValue,
    MultiSelectValue,
    NumberValue,
    SingleSelectValue,
    TextValue,
)


def new_condition_id() -> str:
    """Return a fresh opaque condition id."""

    return f"filter-{uuid.uuid4().hex}"


class ConditionBase(BaseModel):
    """Fields shared by every condition model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(default_factory=new_condition_id)
    field: str
    # Free-form: operators not wired for the field type fail closed.
    operator: str


class TextCondition(ConditionBase):
    field_type: Literal["text"] = "text"
    value: TextValue = Field(default_factory=TextValue)


class NumberCondition(ConditionBase):
    field_type: Literal["number"] = "number"
    value: NumberValue = Field(default_factory=NumberValue)


class DateCondition(ConditionBase):
    field_type: Literal["date"] = "date"
    value: DateRangeValue = Field(default_factory=DateRangeValue)


class AmountCondition(ConditionBase):
    field_type: Literal["amount"] = "amount"
    value: AmountRangeValue = Field(default_factory=AmountRangeValue)


class SingleSelectCondition(ConditionBase):
    field_type: Literal["singleSelect"] = "singleSelect"
    value: SingleSelectValue = Field(default_factory=SingleSelectValue)


class MultiSelectCondition(ConditionBase):
    field_type: Literal["multiSelect"] = "multiSelect"
    value: MultiSelectValue = Field(default_factory=MultiSelectValue)


class BooleanCondition(ConditionBase):
    field_type: Literal["boolean"] = "boolean"
    value: BooleanValue = Field(default_factory=BooleanValue)


CONDITION_MODELS: dict[FieldType, type[ConditionBase]] = {
    FieldType.TEXT: TextCondition,
    FieldType.NUMBER: NumberCondition,
    FieldType.DATE: DateCondition,
    FieldType.AMOUNT: AmountCondition,
    FieldType.SINGLE_SELECT: SingleSelectCondition,
    FieldType.MULTI_SELECT: MultiSelectCondition,
    FieldType.BOOLEAN: BooleanCondition,
}


def _field_type_tag(data: Any) -> str | None:
    if isinstance(data, dict):
        tag = data.get("fieldType", data.get("field_type"))
    else:
        tag = getattr(data, "field_type", None)
    return str(tag) if tag is not None else None


FilterCondition = Annotated[
    Union[
        Annotated[TextCondition, Tag("text")],
        Annotated[NumberCondition, Tag("number")],
        Annotated[DateCondition, Tag("date")],
        Annotated[AmountCondition, Tag("amount")],
        Annotated[SingleSelectCondition, Tag("singleSelect")],
        Annotated[MultiSelectCondition, Tag("multiSelect")],
        Annotated[BooleanCondition, Tag("boolean")],
    ],
    Discriminator(_field_type_tag),
]

_CONDITION = TypeAdapter(FilterCondition)
_CONDITIONS = TypeAdapter(List[FilterCondition])


def parse_condition(data: Any) -> ConditionBase:
    """Build a condition from a JSON-shaped mapping.

    Raises:
        pydantic.ValidationError: unknown ``fieldType`` or a payload whose
            shape does not match it.
    """

    return _CONDITION.validate_python(data)


def parse_conditions(data: Iterable[Any]) -> List[ConditionBase]:
    """Build a list of conditions; fails on the first malformed entry."""

    return _CONDITIONS.validate_python(list(data))


__all__ = [
    "AmountCondition",
    "BooleanCondition",
    "CONDITION_MODELS",
    "ConditionBase",
    "DateCondition",
    "FilterCondition",
    "MultiSelectCondition",
    "NumberCondition",
    "SingleSelectCondition",
    "TextCondition",
    "new_condition_id",
    "parse_condition",
    "parse_conditions",
]
