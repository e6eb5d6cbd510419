"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[datecheck]`` configuration section holds values the
    report settings cannot accept. Caught at the CLI boundary and mapped to
    ``EX_CONFIG``.

    Example:
        >>> from datecheck.domain.errors import ConfigurationError
        >>> err = ConfigurationError("output_format must be 'human' or 'json'")
        >>> str(err)
        "output_format must be 'human' or 'json'"
    """


class DateInputError(ValueError):
    """Base class for rejected date input.

    Carries the name of the field (``month``, ``day`` or ``year``) that
    failed so callers can point the user at it.

    Example:
        >>> err = DateInputError("bad input", field="day")
        >>> err.field
        'day'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class NonNumericInputError(DateInputError):
    """A date field could not be parsed as a base-10 integer.

    Example:
        >>> err = NonNumericInputError("month must be a whole number, got 'march'", field="month", raw="march")
        >>> err.raw
        'march'
    """

    def __init__(self, message: str, *, field: str, raw: str) -> None:
        super().__init__(message, field=field)
        self.raw = raw


class OutOfRangeError(DateInputError):
    """A date field parsed as an integer but lies outside its bounds.

    Example:
        >>> err = OutOfRangeError("day must be between 1 and 31, got 32", field="day", value=32, minimum=1, maximum=31)
        >>> (err.value, err.minimum, err.maximum)
        (32, 1, 31)
    """

    def __init__(self, message: str, *, field: str, value: int, minimum: int, maximum: int) -> None:
        super().__init__(message, field=field)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


__all__ = [
    "ConfigurationError",
    "DateInputError",
    "NonNumericInputError",
    "OutOfRangeError",
]
