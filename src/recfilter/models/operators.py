"""Operator names allowed per field type, with display labels."""

from __future__ import annotations

from typing import Dict, Tuple

from .types import FieldType

FIELD_TYPE_OPERATORS: Dict[FieldType, Tuple[str, ...]] = {
    FieldType.TEXT: ("equals", "contains", "startsWith", "endsWith", "doesNotContain"),
    FieldType.NUMBER: (
        "equals",
        "greaterThan",
        "lessThan",
        "greaterThanOrEqual",
        "lessThanOrEqual",
    ),
    FieldType.DATE: ("between",),
    FieldType.AMOUNT: ("between",),
    FieldType.SINGLE_SELECT: ("is", "isNot"),
    FieldType.MULTI_SELECT: ("in", "notIn"),
    FieldType.BOOLEAN: ("is",),
}

OPERATOR_LABELS: Dict[str, str] = {
    "equals": "Equals",
    "contains": "Contains",
    "startsWith": "Starts With",
    "endsWith": "Ends With",
    "doesNotContain": "Does Not Contain",
    "greaterThan": "Greater Than",
    "lessThan": "Less Than",
    "greaterThanOrEqual": "Greater Than or Equal",
    "lessThanOrEqual": "Less Than or Equal",
    "between": "Between",
    "is": "Is",
    "isNot": "Is Not",
    "in": "In",
    "notIn": "Not In",
}


def operators_for(field_type: FieldType | str) -> Tuple[str, ...]:
    """Return the operator names permitted for ``field_type``.

    Unknown field types have no operators.
    """

    try:
        return FIELD_TYPE_OPERATORS[FieldType(field_type)]
    except ValueError:
        return ()


__all__ = ["FIELD_TYPE_OPERATORS", "OPERATOR_LABELS", "operators_for"]
