"""Total coercions from loosely typed record values.

Each function returns the coerced value, or ``None`` when the input has no
sensible reading in the target domain. None of them raise.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from datetime import date, datetime, time, timezone
from typing import Any

from .resolver import ABSENT

START_OF_DAY = time(0, 0, 0, 0)
END_OF_DAY = time(23, 59, 59, 999000)


def to_text(value: Any) -> str | None:
    """String form of a scalar or sequence value.

    Booleans render as ``true``/``false`` and integral floats without a
    fractional part, so ``3.0`` and ``3`` compare equal as text.
    """
    if value is None or value is ABSENT:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ",".join(to_text(item) or "" for item in value)
    if isinstance(value, Mapping):
        return None
    try:
        return str(value)
    except ValueError:
        # ints past the interpreter's digit limit have no string form
        return None


def to_number(value: Any) -> float | None:
    """Numeric form of ``value``; NaN and unparseable input give ``None``.

    Blank strings are not numbers.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def to_date(value: Any) -> datetime | None:
    """Parse an ISO-8601 date or datetime.

    Aware datetimes are converted to naive UTC so every parsed value is
    comparable with every other. Values carry millisecond precision; finer
    digits are truncated so the last millisecond of a day stays inside
    ``END_OF_DAY``. Aware values whose UTC form falls outside the supported
    years give ``None``.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, START_OF_DAY)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except (OverflowError, ValueError):
            return None
    return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), START_OF_DAY)


def end_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), END_OF_DAY)


def to_bool(value: Any) -> bool:
    """Truthiness of a record value; absent values are false."""
    if value is ABSENT:
        return False
    return bool(value)


def is_sequence(value: Any) -> bool:
    """True for lists and tuples, not for strings or bytes."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


__all__ = [
    "END_OF_DAY",
    "START_OF_DAY",
    "end_of_day",
    "is_sequence",
    "start_of_day",
    "to_bool",
    "to_date",
    "to_number",
    "to_text",
]
