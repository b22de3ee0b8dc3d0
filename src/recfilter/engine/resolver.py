"""Field resolution: walk a dotted path into a record."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class _Absent:
    """Marker for a path that does not resolve to a value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def split_path(path: str) -> list[str]:
    """Split a dotted path into its segments.

    Examples:
        >>> split_path("address.city")
        ['address', 'city']
    """
    return path.split(".")


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment, ABSENT)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not (segment.isascii() and segment.isdigit()):
            return ABSENT
        index = int(segment)
        return current[index] if index < len(current) else ABSENT
    return ABSENT


def resolve(record: Any, path: str) -> Any:
    """Return the value at ``path`` in ``record`` or ``ABSENT``.

    A missing key, an out-of-range index, a non-container intermediate or a
    ``None`` anywhere along the path resolves to ``ABSENT``. Never raises.

    Examples:
        >>> resolve({"address": {"city": "Austin"}}, "address.city")
        'Austin'
        >>> resolve({"address": None}, "address.city")
        ABSENT
    """
    current = record
    for segment in split_path(path):
        if current is None or current is ABSENT:
            return ABSENT
        current = _step(current, segment)
    if current is None:
        return ABSENT
    return current


def is_absent(value: Any) -> bool:
    return value is ABSENT


__all__ = ["ABSENT", "is_absent", "resolve", "split_path"]
