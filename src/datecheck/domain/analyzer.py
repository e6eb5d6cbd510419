"""Date pattern analyzer: pure checks over a (month, day, year) triple.

Every function here is deterministic and free of I/O so the CLI, the Python
API and the tests all share one set of semantics.

Digit-string predicates (:func:`is_prime`, :func:`is_palindrome`,
:func:`is_perfect_power`, :func:`is_armstrong`) take the concatenated text
``f"{month}{day}{year}"``. Component predicates (:func:`is_pythagorean`,
:func:`is_equation`) take the raw integers.

Contents:
    * :func:`analyze` - Run every check and return an :class:`AnalysisResult`.
    * :func:`analyze_input` - Same, for an already-built :class:`DateInput`.
    * The individual predicates and colour formatters.
"""

from __future__ import annotations

from math import isqrt

from .models import AnalysisResult, DateInput, HexPair, HslPair

#: Exponents tried by :func:`is_perfect_power`.
PERFECT_POWER_EXPONENTS = range(2, 10)


def _parse_digits(digits: str) -> int | None:
    """Return the integer value of an ASCII digit string, or None.

    Example:
        >>> _parse_digits("0042")
        42
        >>> _parse_digits("-3") is None
        True
        >>> _parse_digits("") is None
        True
    """
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def is_prime(digits: str) -> bool:
    """Return True when the digit string is a prime number.

    Empty, signed or non-numeric strings and values <= 1 are not prime.

    Example:
        >>> is_prime("2"), is_prime("4"), is_prime("1"), is_prime("0")
        (True, False, False, False)
    """
    number = _parse_digits(digits)
    if number is None or number <= 1:
        return False
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))


def is_palindrome(digits: str) -> bool:
    """Return True when the string equals its character reversal.

    Example:
        >>> is_palindrome("1221"), is_palindrome("3142024")
        (True, False)
    """
    return digits == digits[::-1]


def is_pythagorean(day: int, month: int, year: int) -> bool:
    """Return True when ``day² + month² == year²``.

    Example:
        >>> is_pythagorean(3, 4, 5), is_pythagorean(1, 1, 1)
        (True, False)
    """
    return day * day + month * month == year * year


def is_perfect_power(digits: str) -> bool:
    """Return True when the digit string equals ``base**exp``.

    ``base`` ranges over ``[2, isqrt(n)]`` and ``exp`` over ``[2, 9]``.

    Example:
        >>> is_perfect_power("8"), is_perfect_power("10"), is_perfect_power("1")
        (True, False, False)
    """
    number = _parse_digits(digits)
    if number is None or number <= 1:
        return False
    for base in range(2, isqrt(number) + 1):
        for exponent in PERFECT_POWER_EXPONENTS:
            power = base**exponent
            if power == number:
                return True
            if power > number:
                break
    return False


def is_armstrong(digits: str) -> bool:
    """Return True when the digit string is a narcissistic number.

    Each digit is raised to the length of the string itself, so leading
    zeros count towards the width.

    Example:
        >>> is_armstrong("153"), is_armstrong("154")
        (True, False)
    """
    number = _parse_digits(digits)
    if number is None:
        return False
    width = len(digits)
    return sum(int(char) ** width for char in digits) == number


def _power_equals(base: int, exponent: int, target: int) -> bool:
    # Zero to a negative power has no value.
    if exponent < 0 and base == 0:
        return False
    return base**exponent == target


def is_equation(day: int, month: int, year: int) -> bool:
    """Return True when day and month combine into the year.

    Checks ``day + month``, ``day - month``, ``day * month``, exact
    ``day / month`` and ``day ** month`` against ``year``. A zero month
    skips the division instead of raising.

    Example:
        >>> is_equation(10, 2, 20), is_equation(10, 2, 5), is_equation(3, 1, 7)
        (True, True, False)
        >>> is_equation(5, 0, 1)
        True
    """
    return (
        day + month == year
        or day - month == year
        or day * month == year
        or (month != 0 and day % month == 0 and day // month == year)
        or _power_equals(day, month, year)
    )


def to_hex_pair(month: int, day: int, year: int) -> HexPair:
    """Return ``(#MMDDYY, #DDMMYY)`` with each part zero-padded to two digits.

    Example:
        >>> to_hex_pair(3, 14, 24)
        ('#031424', '#140324')
        >>> to_hex_pair(12, 31, 2099)
        ('#123199', '#311299')
    """
    yy = year % 100
    return f"#{month:02d}{day:02d}{yy:02d}", f"#{day:02d}{month:02d}{yy:02d}"


def to_hsl_pair(month: int, day: int, year: int) -> HslPair:
    """Return month-led and day-led ``hsl()`` strings; values are not clamped.

    Example:
        >>> to_hsl_pair(3, 14, 24)
        ('hsl(3, 14%, 24%)', 'hsl(14, 3%, 24%)')
    """
    yy = year % 100
    return f"hsl({month}, {day}%, {yy}%)", f"hsl({day}, {month}%, {yy}%)"


def analyze(month: int, day: int, year: int) -> AnalysisResult:
    """Evaluate every pattern check for a date.

    Args:
        month: Month component, expected in 1..12.
        day: Day component, expected in 1..31.
        year: Year component, expected in 1..2500.

    Returns:
        Fully populated, immutable analysis result.

    Example:
        >>> result = analyze(3, 14, 2024)
        >>> result.is_prime, result.is_palindrome, result.is_pythagorean
        (False, False, False)
        >>> result.hex_codes
        ('#031424', '#140324')
    """
    digits = f"{month}{day}{year}"
    return AnalysisResult(
        is_prime=is_prime(digits),
        is_palindrome=is_palindrome(digits),
        is_pythagorean=is_pythagorean(day, month, year),
        is_perfect_power=is_perfect_power(digits),
        is_armstrong=is_armstrong(digits),
        is_equation=is_equation(day, month, year),
        hex_codes=to_hex_pair(month, day, year),
        hsl_codes=to_hsl_pair(month, day, year),
    )


def analyze_input(date: DateInput) -> AnalysisResult:
    """Analyze a validated :class:`DateInput`.

    Example:
        >>> analyze_input(DateInput(month=1, day=1, year=2)).is_equation
        True
    """
    return analyze(date.month, date.day, date.year)


__all__ = [
    "PERFECT_POWER_EXPONENTS",
    "analyze",
    "analyze_input",
    "is_armstrong",
    "is_equation",
    "is_palindrome",
    "is_perfect_power",
    "is_prime",
    "is_pythagorean",
    "to_hex_pair",
    "to_hsl_pair",
]
