"""recfilter: typed filter conditions over in-memory record collections."""

from . import config
from .engine import (
    ABSENT,
    FilterOutcome,
    apply_filters,
    evaluate,
    filter_records,
    is_valid_condition,
    matches,
    resolve,
    validate_conditions,
)
from .models import FieldType, parse_condition, parse_conditions

__all__ = [
    "ABSENT",
    "FieldType",
    "FilterOutcome",
    "__version__",
    "apply_filters",
    "config",
    "evaluate",
    "filter_records",
    "is_valid_condition",
    "matches",
    "parse_condition",
    "parse_conditions",
    "resolve",
    "validate_conditions",
]

__version__ = "0.1.0"
