"""Validate-then-filter gate used by front ends."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence, Tuple

from .evaluator import filter_records
from .validator import validate_conditions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOutcome:
    """Result of :func:`apply_filters`.

    When ``applied`` is False, ``records`` is the unfiltered input and
    ``errors`` names the conditions that failed validation.
    """

    records: Sequence[Any]
    total: int
    applied: bool
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors


def apply_filters(
    records: Sequence[Any],
    conditions: Iterable[Any],
    field_paths: Mapping[str, str] | None = None,
) -> FilterOutcome:
    """Validate every condition, then filter only if all are valid."""

    conditions = list(conditions)
    validity = validate_conditions(conditions)
    errors = tuple(key for key, valid in validity.items() if not valid)
    if errors:
        logger.info("Not filtering: %d invalid condition(s): %s", len(errors), ", ".join(errors))
        return FilterOutcome(records=records, total=len(records), applied=False, errors=errors)

    kept = filter_records(records, conditions, field_paths)
    return FilterOutcome(records=kept, total=len(records), applied=True)


__all__ = ["FilterOutcome", "apply_filters"]
