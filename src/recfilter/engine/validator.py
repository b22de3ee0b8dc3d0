"""Structural validation of condition payloads.

Validation only looks at the condition itself, never at record data, and
never raises: anything it cannot make sense of is invalid.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable

from pydantic import ValidationError

from ..models.conditions import ConditionBase, parse_condition
from ..models.types import FieldType
from .coerce import to_date

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def _valid_text(value) -> bool:
    return isinstance(value.value, str) and bool(value.value.strip())


def _valid_number(value) -> bool:
    return _is_number(value.value)


def _valid_date(value) -> bool:
    start = to_date(value.start_date)
    end = to_date(value.end_date)
    return start is not None and end is not None and start <= end


def _valid_amount(value) -> bool:
    low, high = value.min_amount, value.max_amount
    return _is_number(low) and _is_number(high) and low <= high


def _valid_single_select(value) -> bool:
    return isinstance(value.value, str) and bool(value.value)


def _valid_multi_select(value) -> bool:
    return isinstance(value.values, (list, tuple)) and len(value.values) > 0


def _valid_boolean(value) -> bool:
    return isinstance(value.value, bool)


VALIDATORS: Dict[FieldType, Callable[[Any], bool]] = {
    FieldType.TEXT: _valid_text,
    FieldType.NUMBER: _valid_number,
    FieldType.DATE: _valid_date,
    FieldType.AMOUNT: _valid_amount,
    FieldType.SINGLE_SELECT: _valid_single_select,
    FieldType.MULTI_SELECT: _valid_multi_select,
    FieldType.BOOLEAN: _valid_boolean,
}


def is_valid_condition(condition: Any) -> bool:
    """Check that a condition's payload is complete and well-formed.

    Accepts a condition model or a JSON-shaped mapping. Returns False for
    unknown field types and malformed payloads instead of raising.

    Examples:
        >>> is_valid_condition({"field": "joinDate", "operator": "between",
        ...     "fieldType": "date",
        ...     "value": {"startDate": "2024-05-01", "endDate": "2024-01-01"}})
        False
    """
    try:
        if not isinstance(condition, ConditionBase):
            condition = parse_condition(condition)
        check = VALIDATORS.get(FieldType(condition.field_type))
        if check is None:
            return False
        return check(condition.value)
    except (
        ValidationError,
        AttributeError,
        TypeError,
        ValueError,
        OverflowError,
    ) as exc:
        logger.debug("Condition rejected during validation: %s", exc)
        return False


def validate_conditions(conditions: Iterable[Any]) -> Dict[str, bool]:
    """Map each condition id to its validity.

    Mappings without an id are keyed by their position.
    """
    results: Dict[str, bool] = {}
    for index, condition in enumerate(conditions):
        if isinstance(condition, ConditionBase):
            key = condition.id
        elif isinstance(condition, dict) and condition.get("id"):
            key = str(condition["id"])
        else:
            key = str(index)
        results[key] = is_valid_condition(condition)
    return results


__all__ = ["VALIDATORS", "is_valid_condition", "validate_conditions"]
