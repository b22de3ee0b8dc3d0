"""Read operations over the cached field catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from recfilter.models import ConditionBase, FieldConfig

from .core import ensure

__all__ = [
    "field_keys",
    "field_paths",
    "get_field",
    "has_field",
    "new_condition",
]


def field_keys(path: Optional[Path | str] = None) -> Tuple[str, ...]:
    """Return catalog field keys in declaration order."""

    return ensure(path).keys()


def has_field(key: str, path: Optional[Path | str] = None) -> bool:
    return ensure(path).has_field(key)


def get_field(key: str, path: Optional[Path | str] = None) -> FieldConfig | None:
    return ensure(path).get_field(key)


def field_paths(path: Optional[Path | str] = None) -> Dict[str, str]:
    """Field key → dotted path mapping for nested fields."""

    return ensure(path).field_paths()


def new_condition(
    key: str,
    operator: str | None = None,
    path: Optional[Path | str] = None,
) -> ConditionBase:
    """Create a default condition for a catalog field."""

    return ensure(path).new_condition(key, operator)
