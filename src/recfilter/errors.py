"""Exceptions raised by strict evaluation and the catalog config layer.

The default evaluation path never raises; it fails closed instead.
"""


class FilterError(Exception):
    """Base class for recfilter errors."""


class UnknownOperatorError(FilterError):
    """Operator is not wired for the condition's field type (strict mode)."""

    def __init__(self, field_type: str, operator: str):
        self.field_type = field_type
        self.operator = operator
        super().__init__(f"Operator '{operator}' is not supported for {field_type} fields")


class InvalidConditionError(FilterError):
    """Condition failed validation or could not be parsed (strict mode)."""

    def __init__(self, condition_id: str | None, reason: str = "invalid payload"):
        self.condition_id = condition_id
        super().__init__(f"Condition {condition_id or '<unparsed>'}: {reason}")


class CatalogError(FilterError):
    """Field catalog could not be loaded or validated."""


__all__ = [
    "CatalogError",
    "FilterError",
    "InvalidConditionError",
    "UnknownOperatorError",
]
