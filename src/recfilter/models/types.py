"""Field type tags shared by conditions, predicates and the catalog."""

from enum import Enum


class FieldType(str, Enum):
    """Closed set of filterable value domains."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    AMOUNT = "amount"
    SINGLE_SELECT = "singleSelect"
    MULTI_SELECT = "multiSelect"
    BOOLEAN = "boolean"

    def __str__(self) -> str:
        return self.value


__all__ = ["FieldType"]
