"""Predicate dispatch: one family of operators per field type.

Each family pairs the payload model it expects with an operator table and a
match function. The match function coerces the record value and payload into
comparable operands and hands them to the operator.

    matches(raw, operator, value, field_type)
        │
        ├─ FAMILIES[field_type]         unknown type      → False
        ├─ family.operators[operator]   unknown operator  → False
        ├─ payload model validation     malformed payload → False
        ├─ raw is ABSENT                                  → False
        └─ family.match(raw, handler, payload)

In strict mode the unknown-type, unknown-operator and malformed-payload
branches raise instead of returning False. Absent values and record values
that do not coerce always give False.
"""

from __future__ import annotations

import logging
import operator as op
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from pydantic import ValidationError

from ..errors import InvalidConditionError, UnknownOperatorError
from ..models.operators import FIELD_TYPE_OPERATORS
from ..models.types import FieldType
from ..models.values import (
    AmountRangeValue,
    BooleanValue,
    DateRangeValue,
    MultiSelectValue,
    NumberValue,
    Payload,
    SingleSelectValue,
    TextValue,
)
from .coerce import end_of_day, is_sequence, start_of_day, to_bool, to_date, to_number, to_text
from .resolver import ABSENT

logger = logging.getLogger(__name__)

Handler = Callable[..., bool]


def _between(value, low, high) -> bool:
    return low <= value <= high


def _any_shared(have, wanted) -> bool:
    return any(item in have for item in wanted)


TEXT_OPERATORS: Dict[str, Handler] = {
    "equals": op.eq,
    "contains": lambda text, needle: needle in text,
    "startsWith": lambda text, needle: text.startswith(needle),
    "endsWith": lambda text, needle: text.endswith(needle),
    "doesNotContain": lambda text, needle: needle not in text,
}

NUMBER_OPERATORS: Dict[str, Handler] = {
    "equals": op.eq,
    "greaterThan": op.gt,
    "lessThan": op.lt,
    "greaterThanOrEqual": op.ge,
    "lessThanOrEqual": op.le,
}

RANGE_OPERATORS: Dict[str, Handler] = {"between": _between}

SINGLE_SELECT_OPERATORS: Dict[str, Handler] = {"is": op.eq, "isNot": op.ne}

MULTI_SELECT_OPERATORS: Dict[str, Handler] = {
    "in": _any_shared,
    "notIn": lambda have, wanted: not _any_shared(have, wanted),
}

BOOLEAN_OPERATORS: Dict[str, Handler] = {"is": op.eq}


def _match_text(raw: Any, handler: Handler, value: TextValue) -> bool:
    text = to_text(raw)
    if text is None:
        return False
    return handler(text.lower(), value.value.lower())


def _match_number(raw: Any, handler: Handler, value: NumberValue) -> bool:
    number = to_number(raw)
    target = to_number(value.value)
    if number is None or target is None:
        return False
    return handler(number, target)


def _match_date(raw: Any, handler: Handler, value: DateRangeValue) -> bool:
    moment = to_date(raw)
    start = to_date(value.start_date)
    end = to_date(value.end_date)
    if moment is None or start is None or end is None:
        return False
    return handler(moment, start_of_day(start), end_of_day(end))


def _match_amount(raw: Any, handler: Handler, value: AmountRangeValue) -> bool:
    amount = to_number(raw)
    low = to_number(value.min_amount)
    high = to_number(value.max_amount)
    if amount is None or low is None or high is None:
        return False
    return handler(amount, low, high)


def _match_single_select(raw: Any, handler: Handler, value: SingleSelectValue) -> bool:
    text = to_text(raw)
    if text is None:
        return False
    return handler(text, value.value)


def _match_multi_select(raw: Any, handler: Handler, value: MultiSelectValue) -> bool:
    if not is_sequence(raw) or not value.values:
        return False
    return handler(raw, value.values)


def _match_boolean(raw: Any, handler: Handler, value: BooleanValue) -> bool:
    return handler(to_bool(raw), value.value)


@dataclass(frozen=True)
class PredicateFamily:
    """Operator table and matcher for one field type."""

    payload: type[Payload]
    operators: Mapping[str, Handler]
    match: Callable[[Any, Handler, Any], bool]


FAMILIES: Dict[FieldType, PredicateFamily] = {
    FieldType.TEXT: PredicateFamily(TextValue, TEXT_OPERATORS, _match_text),
    FieldType.NUMBER: PredicateFamily(NumberValue, NUMBER_OPERATORS, _match_number),
    FieldType.DATE: PredicateFamily(DateRangeValue, RANGE_OPERATORS, _match_date),
    FieldType.AMOUNT: PredicateFamily(AmountRangeValue, RANGE_OPERATORS, _match_amount),
    FieldType.SINGLE_SELECT: PredicateFamily(
        SingleSelectValue, SINGLE_SELECT_OPERATORS, _match_single_select
    ),
    FieldType.MULTI_SELECT: PredicateFamily(
        MultiSelectValue, MULTI_SELECT_OPERATORS, _match_multi_select
    ),
    FieldType.BOOLEAN: PredicateFamily(BooleanValue, BOOLEAN_OPERATORS, _match_boolean),
}


def _check_families() -> None:
    missing = set(FieldType) - set(FAMILIES)
    if missing:
        raise RuntimeError(f"No predicate family for field types: {sorted(missing)}")
    for field_type, family in FAMILIES.items():
        if tuple(family.operators) != FIELD_TYPE_OPERATORS[field_type]:
            raise RuntimeError(f"Operator table for {field_type} is out of sync")


_check_families()


def family_for(field_type: FieldType | str) -> PredicateFamily | None:
    """Return the predicate family for ``field_type``, or None if unknown."""

    try:
        return FAMILIES[FieldType(field_type)]
    except ValueError:
        return None


def matches(
    raw: Any,
    operator: str,
    value: Any,
    field_type: FieldType | str,
    *,
    strict: bool = False,
) -> bool:
    """Decide whether a resolved record value satisfies one operator.

    Args:
        raw: Value from the field resolver, possibly ``ABSENT``.
        operator: Operator name, e.g. ``"contains"`` or ``"between"``.
        value: Payload model for the field type, or a mapping of its fields.
        field_type: Field type tag selecting the predicate family.
        strict: Raise on wiring errors instead of returning False.

    Returns:
        True if the value matches. Absent values never match.

    Raises:
        UnknownOperatorError: strict mode, operator not wired for the type.
        InvalidConditionError: strict mode, unknown type or malformed payload.
    """
    family = family_for(field_type)
    if family is None:
        logger.debug("Unknown field type %r", field_type)
        if strict:
            raise InvalidConditionError(None, f"unknown field type '{field_type}'")
        return False

    handler = family.operators.get(operator)
    if handler is None:
        logger.debug("Operator %r is not wired for %s", operator, field_type)
        if strict:
            raise UnknownOperatorError(str(field_type), operator)
        return False

    if not isinstance(value, family.payload):
        try:
            value = family.payload.model_validate(value)
        except ValidationError as exc:
            logger.debug("Malformed %s payload: %s", field_type, exc)
            if strict:
                raise InvalidConditionError(None, f"malformed {field_type} payload") from exc
            return False

    # Covers multiSelect too: an absent value is never a sequence.
    if raw is ABSENT or raw is None:
        return False

    return family.match(raw, handler, value)


__all__ = [
    "BOOLEAN_OPERATORS",
    "FAMILIES",
    "MULTI_SELECT_OPERATORS",
    "NUMBER_OPERATORS",
    "PredicateFamily",
    "RANGE_OPERATORS",
    "SINGLE_SELECT_OPERATORS",
    "TEXT_OPERATORS",
    "family_for",
    "matches",
]
