"""Boundary validation turning raw text fields into a :class:`DateInput`.

All three fields are checked for numeric form before any range check, so a
non-numeric field always wins over an out-of-range one. Within each pass the
fields are checked in month, day, year order.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import NonNumericInputError, OutOfRangeError
from .models import DateInput

#: Inclusive (minimum, maximum) bounds per field.
FIELD_BOUNDS: Final[dict[str, tuple[int, int]]] = {
    "month": (1, 12),
    "day": (1, 31),
    "year": (1, 2500),
}

#: Optional sign followed by ASCII digits only.
_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_field(field: str, raw: str | int) -> int:
    """Parse one field as a base-10 integer.

    Surrounding whitespace is ignored. Integers pass through unchanged.
    Only ASCII digits are accepted: no underscores, no other scripts.

    Raises:
        NonNumericInputError: If the text is not a whole number.

    Example:
        >>> parse_field("day", " 07 ")
        7
        >>> parse_field("day", "7th")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        NonNumericInputError: day must be a whole number, got '7th'
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not _WHOLE_NUMBER.fullmatch(text):
        raise NonNumericInputError(f"{field} must be a whole number, got {raw!r}", field=field, raw=str(raw))
    return int(text, 10)


def check_range(field: str, value: int) -> int:
    """Return *value* when it lies within the bounds of *field*.

    Raises:
        OutOfRangeError: If the value is outside ``FIELD_BOUNDS[field]``.

    Example:
        >>> check_range("month", 12)
        12
    """
    minimum, maximum = FIELD_BOUNDS[field]
    if not minimum <= value <= maximum:
        raise OutOfRangeError(
            f"{field} must be between {minimum} and {maximum}, got {value}",
            field=field,
            value=value,
            minimum=minimum,
            maximum=maximum,
        )
    return value


def parse_date_input(month: str | int, day: str | int, year: str | int) -> DateInput:
    """Validate raw month/day/year fields and build a :class:`DateInput`.

    Calendar validity is not checked: February 30 is accepted.

    Raises:
        NonNumericInputError: If any field is not a whole number.
        OutOfRangeError: If any field is outside its bounds.

    Example:
        >>> parse_date_input("3", "14", "2024")
        DateInput(month=3, day=14, year=2024)
        >>> parse_date_input("2", "30", "2023").day
        30
    """
    values = {
        "month": parse_field("month", month),
        "day": parse_field("day", day),
        "year": parse_field("year", year),
    }
    for field, value in values.items():
        check_range(field, value)
    return DateInput(**values)


__all__ = [
    "FIELD_BOUNDS",
    "check_range",
    "parse_date_input",
    "parse_field",
]
