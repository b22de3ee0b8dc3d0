"""Filter engine: resolution, predicates, evaluation and validation."""

from .apply import FilterOutcome, apply_filters
from .evaluator import evaluate, filter_records
from .predicates import FAMILIES, family_for, matches
from .resolver import ABSENT, is_absent, resolve
from .validator import is_valid_condition, validate_conditions

__all__ = [
    "ABSENT",
    "FAMILIES",
    "FilterOutcome",
    "apply_filters",
    "evaluate",
    "family_for",
    "filter_records",
    "is_absent",
    "is_valid_condition",
    "matches",
    "resolve",
    "validate_conditions",
]
