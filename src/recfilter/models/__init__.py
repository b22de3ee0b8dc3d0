"""Pydantic models for conditions, payloads and the field catalog."""

from .catalog import FieldCatalog, FieldConfig
from .conditions import (
    CONDITION_MODELS,
    AmountCondition,
    BooleanCondition,
    ConditionBase,
    DateCondition,
    FilterCondition,
    MultiSelectCondition,
    NumberCondition,
    SingleSelectCondition,
    TextCondition,
    new_condition_id,
    parse_condition,
    parse_conditions,
)
from .operators import FIELD_TYPE_OPERATORS, OPERATOR_LABELS, operators_for
from .types import FieldType
from .values import (
    AmountRangeValue,
    BooleanValue,
    DateRangeValue,
    MultiSelectValue,
    NumberValue,
    Payload,
    SingleSelectValue,
    TextValue,
)

__all__ = [
    "AmountCondition",
    "AmountRangeValue",
    "BooleanCondition",
    "BooleanValue",
    "CONDITION_MODELS",
    "ConditionBase",
    "DateCondition",
    "DateRangeValue",
    "FIELD_TYPE_OPERATORS",
    "FieldCatalog",
    "FieldConfig",
    "FieldType",
    "FilterCondition",
    "MultiSelectCondition",
    "MultiSelectValue",
    "NumberCondition",
    "NumberValue",
    "OPERATOR_LABELS",
    "Payload",
    "SingleSelectCondition",
    "SingleSelectValue",
    "TextCondition",
    "TextValue",
    "new_condition_id",
    "operators_for",
    "parse_condition",
    "parse_conditions",
]
