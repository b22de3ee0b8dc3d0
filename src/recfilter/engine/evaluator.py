"""Condition evaluation and the AND-combining filter pass."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Sequence

from pydantic import ValidationError

from ..errors import InvalidConditionError
from ..models.conditions import ConditionBase, parse_condition
from .predicates import matches
from .resolver import resolve
from .validator import is_valid_condition

logger = logging.getLogger(__name__)


def evaluate(
    record: Any,
    condition: ConditionBase,
    path: str | None = None,
    *,
    strict: bool = False,
) -> bool:
    """Evaluate one condition against one record.

    ``path`` overrides ``condition.field`` as the dotted path to resolve.
    """
    raw = resolve(record, path or condition.field)
    return matches(
        raw,
        condition.operator,
        condition.value,
        condition.field_type,
        strict=strict,
    )


def _prepare(conditions: Iterable[Any], strict: bool) -> List[ConditionBase | None]:
    """Parse mapping conditions; unparseable ones become None."""
    prepared: List[ConditionBase | None] = []
    for condition in conditions:
        if isinstance(condition, ConditionBase):
            parsed = condition
        else:
            try:
                parsed = parse_condition(condition)
            except ValidationError as exc:
                condition_id = condition.get("id") if isinstance(condition, Mapping) else None
                if strict:
                    raise InvalidConditionError(condition_id, "could not be parsed") from exc
                logger.warning(
                    "Condition %s could not be parsed; it matches no records",
                    condition_id or "<unknown>",
                )
                parsed = None
        if strict and parsed is not None and not is_valid_condition(parsed):
            raise InvalidConditionError(parsed.id)
        prepared.append(parsed)
    return prepared


def filter_records(
    records: Sequence[Any],
    conditions: Iterable[Any],
    field_paths: Mapping[str, str] | None = None,
    *,
    strict: bool = False,
) -> Sequence[Any]:
    """Keep the records that satisfy every condition.

    Rules:
    - No conditions → ``records`` is returned unchanged
    - Otherwise a record is kept only if all conditions hold (AND)
    - Matching records keep their input order

    Args:
        records: Records to filter (mappings, possibly nested)
        conditions: Condition models or JSON-shaped condition mappings
        field_paths: Optional mapping of condition field key to dotted path
        strict: Raise on unparseable/invalid conditions and unwired operators

    Returns:
        The matching records

    Examples:
        >>> rows = [{"projects": 3}, {"projects": 7}]
        >>> filter_records(rows, [{"field": "projects", "operator": "greaterThan",
        ...     "fieldType": "number", "value": {"value": 5}}])
        [{'projects': 7}]
    """
    prepared = _prepare(conditions, strict)
    if not prepared:
        return records

    paths = field_paths or {}
    if any(condition is None for condition in prepared):
        return []

    plan = [(condition, paths.get(condition.field)) for condition in prepared]
    kept = [
        record
        for record in records
        if all(evaluate(record, condition, path, strict=strict) for condition, path in plan)
    ]
    logger.debug("Kept %d of %d records over %d conditions", len(kept), len(records), len(plan))
    return kept


__all__ = ["evaluate", "filter_records"]
